"""
Configuration settings for the Valencio storefront backend
"""
import os
from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings

# Resolve .env paths relative to this file so settings load regardless of cwd.
_PACKAGE_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _PACKAGE_DIR.parent
_ENV_CANDIDATES = [
    _PACKAGE_DIR / ".env",
    _PROJECT_ROOT / ".env",
]
_ENV_FILE = [str(p) for p in _ENV_CANDIDATES if p.is_file()]

# Load .env into os.environ so the os.getenv defaults below see it too.
try:
    import dotenv
    for p in _ENV_CANDIDATES:
        if p.is_file():
            dotenv.load_dotenv(p, override=False)
            break
except ImportError:
    pass


# Placeholder signing key; anyone can forge admin cookies while it is in use.
DEFAULT_COOKIE_SECRET = "valencio-cookie-secret-change-me"


class Settings(BaseSettings):
    """Application settings"""

    # App
    APP_NAME: str = "Valencio"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

    # Persisted key-value store
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./valencio.db")

    # CORS - comma-separated; credentials are always allowed so "*" is not usable here
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list, dropping blanks and "*"."""
        origins = [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]
        return [origin for origin in dict.fromkeys(origins) if origin != "*"]

    # Admin session cookie
    COOKIE_NAME: str = "valencio_admin"
    COOKIE_SECRET: str = os.getenv("COOKIE_SECRET", DEFAULT_COOKIE_SECRET)
    COOKIE_ALGORITHM: str = "HS256"

    # Hub-issued activation tokens. Signature checking is opt-in: the hub is trusted by default.
    HUB_JWT_SECRET: str = os.getenv("HUB_JWT_SECRET", "")
    HUB_VERIFY_SIGNATURE: bool = os.getenv("HUB_VERIFY_SIGNATURE", "").lower() in ("true", "1", "yes")

    # Second factor for activation. ADMIN_PIN_HASH (bcrypt) wins over ADMIN_PIN when both are set.
    ADMIN_PIN: str = os.getenv("ADMIN_PIN", "")
    ADMIN_PIN_HASH: str = os.getenv("ADMIN_PIN_HASH", "")

    # Client side: where the storefront API lives
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000")

    class Config:
        env_file = _ENV_FILE if _ENV_FILE else [".env"]
        case_sensitive = True
        extra = "ignore"


settings = Settings()
