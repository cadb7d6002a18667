from pydantic import BaseModel
from typing import Literal, Optional

"""
NOTICE SCHEMA
"""


#Transient notification shown to the user after an action
class Notice(BaseModel):
    title: str
    description: Optional[str] = None
    variant: Literal["default", "destructive"] = "default"
