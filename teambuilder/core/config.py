# teambuilder/core/config.py
from __future__ import annotations

import json
from typing import List, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


EnvType = Literal["local", "dev", "staging", "prod"]
StoreBackend = Literal["json", "sql"]
RosterFormat = Literal["classic", "full"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    APP_NAME: str = "FantasyTeamBuilderAPI"
    APP_ENV: EnvType = "local"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str | List[str] = Field(
        default='["http://localhost:5173","http://127.0.0.1:5173"]',
        description="JSON list or comma-separated origins",
    )

    # Storage
    STORE_BACKEND: StoreBackend = "json"
    USERS_FILE: str = "server/users.json"
    DATABASE_URL: Optional[str] = None

    # Password hashing (scrypt cost parameters)
    SCRYPT_N: int = 2**14
    SCRYPT_R: int = 8
    SCRYPT_P: int = 1

    # Roster rules
    ROSTER_FORMAT: RosterFormat = "full"

    # Client
    API_URL: str = "http://localhost:4000"
    API_TIMEOUT_SECONDS: float = 10.0

    @property
    def IS_LOCAL(self) -> bool:
        return self.APP_ENV == "local"

    @property
    def database_url(self) -> str:
        return self.DATABASE_URL or "sqlite:///./teambuilder.db"

    # ---------- Validators ----------

    @field_validator("CORS_ORIGINS")
    @classmethod
    def _parse_cors(cls, v):
        # Accept JSON list or comma-separated string
        if isinstance(v, list):
            return v
        s = str(v).strip()
        if not s:
            return []
        try:
            parsed = json.loads(s)
            if isinstance(parsed, list):
                return parsed
        except ValueError:
            pass
        return [p.strip() for p in s.split(",") if p.strip()]

    @field_validator("SCRYPT_N")
    @classmethod
    def _validate_scrypt_n(cls, v: int) -> int:
        # scrypt requires a power of two greater than 1
        if v < 2 or v & (v - 1):
            raise ValueError("SCRYPT_N must be a power of two greater than 1")
        return v

    # ---------- Runtime validations ----------

    def validate_at_startup(self) -> None:
        """Fail fast with clear messages for misconfigurations."""
        problems: list[str] = []

        if self.STORE_BACKEND == "json" and not self.USERS_FILE.strip():
            problems.append("USERS_FILE is required when STORE_BACKEND=json.")

        # Outside local we don't want to silently fall back to a SQLite file
        if self.STORE_BACKEND == "sql" and not self.IS_LOCAL and not self.DATABASE_URL:
            problems.append("DATABASE_URL is required for STORE_BACKEND=sql in non-local env.")

        if not self.IS_LOCAL and not self.CORS_ORIGINS:
            problems.append("CORS_ORIGINS must contain at least one allowed origin in non-local env.")

        if problems:
            raise RuntimeError("Config validation failed: " + " ".join(problems))


settings = Settings()
