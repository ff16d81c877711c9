import os
import logging
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _float_env(key, default):
    """Read a numeric env var, falling back to the default on bad input"""
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid {key}={raw!r}, using default {default}")
        return default


class Config:
    """
    Base configuration for the signup relay.
    Secrets (EMAIL_SERVICE_API_KEY) are resolved per request, not stored here.
    """
    # MailerLite settings
    MAILERLITE_API_BASE = os.getenv('MAILERLITE_API_BASE', 'https://api.mailerlite.com/api/v2')
    # Placeholder used when no group is configured
    MAILERLITE_GROUP_ID = os.getenv('MAILERLITE_GROUP_ID', 'YOUR_DEFAULT_LIST_ID')
    MAILERLITE_TIMEOUT = _float_env('MAILERLITE_TIMEOUT', 15.0)

    # Comma-separated list of origins allowed to post the signup form
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Port for local dev server
    PORT = int(_float_env('PORT', 5000))
