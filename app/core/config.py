from pydantic_settings import BaseSettings
from typing import List, Literal, Optional

"""
API CONFIGURATION
"""


#Origins allowed to call the API from a browser during development
DEFAULT_FRONTEND_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


#Class to load and read backend .env
class Settings(BaseSettings):

    APP_NAME: str = "Inquiry Desk API"

    DATABASE_URL: str = "sqlite:///./dev.db"

    FRONTEND_ORIGINS: List[str] = DEFAULT_FRONTEND_ORIGINS

    # "open" lets every admin request through, "api_key" checks X-Admin-Key
    ADMIN_ACCESS: Literal["open", "api_key"] = "open"
    ADMIN_API_KEY: Optional[str] = None

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    SEED_DEMO_DATA: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
