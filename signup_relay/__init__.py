"""
Signup Relay - Newsletter signup forwarding for Flask
=====================================================

Accepts a name/email pair from a web form and adds it to a MailerLite
subscriber group.

Usage:
    from flask import Flask
    from signup_relay import SignupRelay

    app = Flask(__name__)
    SignupRelay(app)

Or build a standalone app:
    from signup_relay import create_app
    app = create_app()
"""

import logging

from flask import Flask
from flask_cors import CORS

from .core.config import Config

__version__ = '0.1.0'

logger = logging.getLogger(__name__)

# Non-secret settings copied into app.config on init. The API key and group
# ID are looked up per request so they are never cached on the app.
_DEFAULT_SETTINGS = (
    'MAILERLITE_API_BASE',
    'MAILERLITE_TIMEOUT',
    'CORS_ORIGINS',
    'LOG_LEVEL',
)


def _resolve_log_level(value):
    """Numeric logging level for a name or number; unknown values fall back to INFO"""
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown LOG_LEVEL {value!r}, using INFO")
        return logging.INFO
    return level


class SignupRelay:
    """
    Flask extension that wires the subscribe blueprint into an app.

    Configuration (set in Flask app.config or environment):
        EMAIL_SERVICE_API_KEY: MailerLite API key (required, read per request)
        MAILERLITE_GROUP_ID: Target group (default: 'YOUR_DEFAULT_LIST_ID')
        MAILERLITE_TIMEOUT: Outbound request timeout in seconds (default: 15)
        CORS_ORIGINS: Comma-separated origins allowed to post the form (default: '*')
        LOG_LEVEL: Logging level name (default: 'INFO')
    """

    def __init__(self, app=None):
        self._registered = []
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Initialize the relay with a Flask app"""
        for key in _DEFAULT_SETTINGS:
            app.config.setdefault(key, getattr(Config, key))

        logging.basicConfig(level=_resolve_log_level(app.config['LOG_LEVEL']))

        origins = [o.strip() for o in str(app.config['CORS_ORIGINS']).split(',') if o.strip()]
        CORS(app, resources={r'/api/*': {'origins': origins or '*'}})

        from .modules.subscribe import subscribe_bp
        app.register_blueprint(subscribe_bp)
        self._registered.append(subscribe_bp.name)

        app.extensions['signup_relay'] = self
        logger.info(f"Signup relay initialised (modules: {', '.join(self._registered)})")

    def get_registered_modules(self):
        """Names of the blueprints registered by this extension"""
        return list(self._registered)


def create_app(config=None):
    """Build a Flask app with the signup relay registered.

    Args:
        config: Optional mapping of app.config overrides
    """
    app = Flask(__name__)
    if config:
        app.config.update(config)
    SignupRelay(app)
    return app


__all__ = ['SignupRelay', 'create_app', 'Config']
