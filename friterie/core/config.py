"""Application configuration."""

from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = "Friterie API"
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    log_level: str = getenv("LOG_LEVEL", "INFO")
    database_url: str = getenv("DATABASE_URL", "sqlite:///./data/menu.db")
    status_file: str = getenv("STATUS_FILE", "./data/status.json")
    images_dir: str = getenv("IMAGES_DIR", "./public/images")
    admin_username: str = getenv("ADMIN_USERNAME", "admin")
    admin_password: str = getenv("ADMIN_PASSWORD", "changeme123")
    public_base_url: str = getenv("PUBLIC_BASE_URL", "http://localhost:8000")
    whatsapp_phone: str = getenv("WHATSAPP_PHONE", "32470000000")
    bcrypt_rounds: int = int(getenv("BCRYPT_ROUNDS", "10"))
    sweeper_enabled: bool = getenv("SWEEPER_ENABLED", "1") == "1"
    seed_menu: bool = getenv("SEED_MENU", "0") == "1"
    session_cookie_name: str = "admin_session"

    @property
    def is_production(self) -> bool:
        return self.app_env in {"prod", "production"}


settings: Settings = Settings()
