# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Tuple
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")
_PRESIGN_PATH = os.getenv("PRESIGN_PATH", "/presign")
_CREATE_EVENT_PATH = os.getenv("CREATE_EVENT_PATH", "/event/create/aws")

# Event defaults sent with every created event
_EVENT_CATEGORY_ID = int(os.getenv("EVENT_CATEGORY_ID", "1"))
_DEFAULT_LATITUDE = os.getenv("DEFAULT_LATITUDE", "00000000.4444444")
_DEFAULT_LONGITUDE = os.getenv("DEFAULT_LONGITUDE", "00000000.4444444")
_EVENT_OWNER_ID = os.getenv("EVENT_OWNER_ID", None)

# Accepted poster media types (comma separated)
_ALLOWED_IMAGE_TYPES = tuple(
    t.strip() for t in os.getenv("ALLOWED_IMAGE_TYPES", "image/jpeg,image/png").split(",")
    if t.strip()
)

# UI language: "fr" (default) or "en"
_DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "fr")

# Logs location and console verbosity
_LOGS_DIR = os.getenv("LOGS_DIR", None)
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_PROJECT_ROOT = Path(__file__).parent.parent


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Event Form Wizard"
    APP_TITLE: str = "Création d'événement"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "EventForm"

    # HTTP API Backend Settings
    # If .env not found, uses default (http://localhost:3000/api)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL
    PRESIGN_PATH: str = _PRESIGN_PATH
    CREATE_EVENT_PATH: str = _CREATE_EVENT_PATH

    # Event record defaults
    EVENT_CATEGORY_ID: int = _EVENT_CATEGORY_ID
    # Placeholder coordinates until real geolocation is collected
    DEFAULT_LATITUDE: str = _DEFAULT_LATITUDE
    DEFAULT_LONGITUDE: str = _DEFAULT_LONGITUDE
    EVENT_OWNER_ID: Optional[str] = _EVENT_OWNER_ID

    # Poster upload
    ALLOWED_IMAGE_TYPES: Tuple[str, ...] = _ALLOWED_IMAGE_TYPES
    UPLOAD_METHOD: str = "PUT"

    # i18n
    DEFAULT_LANGUAGE: str = _DEFAULT_LANGUAGE

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else _PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL

    # UI Settings
    WINDOW_MIN_WIDTH: int = 640
    WINDOW_MIN_HEIGHT: int = 500
    ZIP_CODE_MAX_LENGTH: int = 5

    # Colors
    PRIMARY_COLOR: str = "#3B82F6"
    TEXT_COLOR: str = "#2C3E50"
    TEXT_LIGHT: str = "#5D6D7E"
    BACKGROUND_COLOR: str = "#F8F9FA"
    BORDER_COLOR: str = "#DEE2E6"
    ERROR_COLOR: str = "#E74C3C"

    # Date inputs (ISO, as sent to the backend)
    QT_DATE_FORMAT: str = "yyyy-MM-dd"

