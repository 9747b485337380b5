from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Restaurant Booking API"
    API_V1_STR: str = "/api"

    # Server
    PORT: int = 5000
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Store ("memory" for local dev, "supabase" in production)
    STORE_BACKEND: str = "memory"
    BOOKINGS_TABLE: str = "bookings"

    # Supabase
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""

    # Listing
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # Restaurant rules (slots, durations)
    RESTAURANT_CONFIG_PATH: str = "data/restaurant_config.json"

    # Booking form
    BACKEND_URL: str = "http://localhost:5000"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
