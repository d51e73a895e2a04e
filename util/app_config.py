from dotenv import load_dotenv
from pydantic import BaseModel
import os


load_dotenv()


class Config(BaseModel):
    SQLALCHEMY_DATABASE_URI: str
    LOG_LEVEL: str
    API_PREFIX: str
    CORS_ALLOW_ORIGINS: list[str]


def parse_origins(value: str) -> list[str]:
    origins = [origin.strip() for origin in value.split(",") if origin.strip()]
    return origins or ["*"]


config = Config(
    SQLALCHEMY_DATABASE_URI=os.getenv(
        "SQLALCHEMY_DATABASE_URI", "sqlite+aiosqlite:///./vacancies.db"
    ),
    LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
    API_PREFIX=os.getenv("API_PREFIX", "/api/v1"),
    CORS_ALLOW_ORIGINS=parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
)
