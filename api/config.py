from typing import Dict, Literal
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Core
    log_level: str = "INFO"
    service_env: str = "dev"  # dev|prod
    server_public_url: str = "http://localhost:8000"

    # CORS
    cors_allow_origins: str = "*"
    cors_allow_credentials: bool = True
    cors_allow_methods: str = "*"
    cors_allow_headers: str = "*"

    # DB / almacenamiento
    db_url: str = "sqlite:///./recetario.db"
    storage_backend: Literal["sql", "memory"] = "sql"
    seed_on_startup: bool = True

    # Usuario (no hay sistema de auth real)
    default_user_id: str = "default_user"
    api_keys: str = ""

    # Size limit
    max_body_bytes: int = 262144  # 256KB

    def parsed_api_keys(self) -> Dict[str, str]:
        mapping: Dict[str, str] = {}
        for pair in [p.strip() for p in self.api_keys.split(",") if p.strip()]:
            if ":" not in pair:
                continue
            user, token = pair.split(":", 1)
            mapping[token.strip()] = user.strip()
        return mapping

    @model_validator(mode="after")
    def _validate_backend(self) -> "Settings":
        if self.service_env == "prod" and self.storage_backend == "memory":
            raise ValueError("storage_backend=memory is not allowed in prod")
        if not self.default_user_id.strip():
            raise ValueError("default_user_id must not be empty")
        return self

settings = Settings()
