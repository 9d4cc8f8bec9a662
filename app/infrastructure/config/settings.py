"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    log_level: str = "INFO"
    repository_backend: str = "in_memory"  # in_memory or postgres
    database_url: str = ""  # Required when repository_backend=postgres
    mock_email_delay_seconds: float = 1.0
    default_avatar_base_url: str = "https://api.dicebear.com/7.x/avataaars/svg"
    # Superadmin seeded into the in-memory backend so it can be used at all
    seed_superadmin_id: str = "superadmin"
    seed_superadmin_email: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
