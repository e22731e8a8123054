"""Runtime settings, read from the environment (prefix ``EXPANSE_``) or ``.env``."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EXPANSE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Seed for the die/reputation RNG of new games; None draws from system entropy
    rng_seed: int | None = None
    # Length of a game in rounds; reported to clients, never enforced by the core
    max_rounds: int = Field(default=9, ge=1)
    log_level: str = "INFO"
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )


settings = Settings()
