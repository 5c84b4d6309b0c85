import json
import os
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "PulseOps API"
    VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Server settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # CORS settings, comma separated list or JSON list
    BACKEND_CORS_ORIGINS: str = os.getenv("BACKEND_CORS_ORIGINS", "*")

    # Database settings
    MYSQL_SERVER: str = os.getenv("MYSQL_SERVER", "localhost")
    MYSQL_USER: str = os.getenv("MYSQL_USER", "root")
    MYSQL_PASSWORD: str = os.getenv("MYSQL_PASSWORD", "")
    MYSQL_DB: str = os.getenv("MYSQL_DB", "pulseops")
    MYSQL_PORT: str = os.getenv("MYSQL_PORT", "3306")

    # Full SQLAlchemy URL, takes precedence over the MYSQL_* settings
    # e.g. sqlite:///./pulseops.db
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "false").lower() == "true"

    # Demo data inserted on first boot
    SEED_DEMO_DATA: bool = os.getenv("SEED_DEMO_DATA", "true").lower() == "true"

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Integration API keys are shape-checked only, never stored
    API_KEY_MIN_LENGTH: int = int(os.getenv("API_KEY_MIN_LENGTH", "20"))

    # Public dashboard share links
    SHARE_TOKEN_LENGTH: int = int(os.getenv("SHARE_TOKEN_LENGTH", "32"))

    @property
    def cors_origins(self) -> List[str]:
        v = self.BACKEND_CORS_ORIGINS.strip()
        if v.startswith("["):
            return [str(i) for i in json.loads(v)]
        return [i.strip() for i in v.split(",") if i.strip()]

    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}@"
            f"{self.MYSQL_SERVER}:{self.MYSQL_PORT}/{self.MYSQL_DB}"
        )

    class Config:
        case_sensitive = True
        env_file = ".env"
        extra = "ignore"


settings = Settings()
