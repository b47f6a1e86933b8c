from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, case_sensitive=False)

    # App
    app_name: str = "Smarteam API"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = ["http://localhost:3000"]

    # Database
    database_url: str = "sqlite:///./smarteam.db"

    # Security
    jwt_secret: str = "dev-jwt-secret-change-me-before-deploying"
    jwt_algorithm: str = "HS256"
    token_expires_minutes: int = 24 * 60
    token_header_name: str = "x-auth-token"
    password_hash_rounds: int = 29000

    # Default administrator
    admin_email: str = "admin@smarteam.local"
    admin_password: str = "dev-admin-password-change-me"

    @field_validator("jwt_secret")
    @classmethod
    def _check_secret_length(cls, value: str) -> str:
        # HS256 keys shorter than the digest size weaken the signature
        if len(value.encode("utf-8")) < 32:
            raise ValueError("JWT_SECRET must be at least 32 bytes")
        return value


settings = Settings()
