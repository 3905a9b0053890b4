from typing import List

from pydantic import BaseModel, Field
import os
from dotenv import load_dotenv
from fastapi import Request

load_dotenv()

def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]

class Settings(BaseModel):
    app_env: str = "dev"
    days_per_year: float = Field(365.0, gt=0)
    log_level: str = "INFO"
    cors_origins: List[str] = ["http://localhost:3000"]

def load_settings() -> Settings:
    return Settings(
        app_env=os.getenv("APP_ENV", "dev"),
        days_per_year=float(os.getenv("GREEKS_DAYS_PER_YEAR", "365")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "http://localhost:3000")),
    )

settings = load_settings()

def get_settings(request: Request) -> Settings:
    # the Settings given to create_app(); falls back to the environment
    return getattr(request.app.state, "settings", settings)
