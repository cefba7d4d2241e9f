# src/config.py

from functools import lru_cache
from typing import List, Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Central application settings (Pydantic v2).

    - Aliases match the .env keys:
      APP_NAME, ENV, LOG_LEVEL, LOG_FORMAT, DATABASE_URL, TEST_DATABASE_URL,
      TESTING, SQLALCHEMY_ECHO, AUTO_ASSIGN_DEFAULT_MAX_CHILDREN,
      FAMILY_ACTIVE_STATUS
    """

    # ------------------------------------------------------------------------------------
    # App / API
    # ------------------------------------------------------------------------------------
    PROJECT_NAME: str = Field(default="family-auto-assign", alias="APP_NAME")
    ENVIRONMENT: str = Field(default="dev", alias="ENV")  # dev|staging|prod
    PROJECT_VERSION: str = Field(default="1.0.0")

    # ------------------------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------------------------
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: Optional[str] = Field(default=None)  # json|console; defaults by ENV

    # ------------------------------------------------------------------------------------
    # Database
    # ------------------------------------------------------------------------------------
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./dev.db",
        description="Async SQLAlchemy URL (postgresql+asyncpg / sqlite+aiosqlite)",
    )
    TEST_DATABASE_URL: Optional[str] = Field(default=None)
    SQLALCHEMY_ECHO: bool = Field(default=False)

    # ------------------------------------------------------------------------------------
    # Auto-assignment
    # ------------------------------------------------------------------------------------
    AUTO_ASSIGN_DEFAULT_MAX_CHILDREN: int = Field(default=4, ge=1)
    FAMILY_ACTIVE_STATUS: str = Field(default="current")

    # ------------------------------------------------------------------------------------
    # CORS / Web
    # ------------------------------------------------------------------------------------
    BACKEND_CORS_ORIGINS: Union[List[str], str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:8000",
        ]
    )

    # ------------------------------------------------------------------------------------
    # Feature Flags / Misc
    # ------------------------------------------------------------------------------------
    TESTING: bool = Field(default=False)

    # ------------------------------------------------------------------------------------
    # Helper properties
    # ------------------------------------------------------------------------------------
    @property
    def is_dev(self) -> bool:
        return self.ENVIRONMENT.lower() in {"dev", "development", "local"}

    @property
    def is_prod(self) -> bool:
        return self.ENVIRONMENT.lower() in {"prod", "production"}

    @property
    def json_logs(self) -> bool:
        if self.LOG_FORMAT:
            return self.LOG_FORMAT.lower() == "json"
        return not self.is_dev

    def cors_origins(self) -> List[str]:
        if isinstance(self.BACKEND_CORS_ORIGINS, list):
            return self.BACKEND_CORS_ORIGINS
        if isinstance(self.BACKEND_CORS_ORIGINS, str):
            return [o.strip() for o in self.BACKEND_CORS_ORIGINS.split(",") if o.strip()]
        return []

    @property
    def effective_database_url(self) -> str:
        if self.TESTING and self.TEST_DATABASE_URL:
            return self.TEST_DATABASE_URL
        return self.DATABASE_URL

    # ------------------------------------------------------------------------------------
    # Pydantic v2 settings config
    # ------------------------------------------------------------------------------------
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "populate_by_name": True,   # enable aliases
        "extra": "ignore",          # don't crash on unrelated env keys
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()


# Convenient singleton: from src.config import settings
settings = get_settings()
