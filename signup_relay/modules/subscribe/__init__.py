"""
Subscribe Module
================

Provides:
- /api/subscribe -- accepts {name, email} from a web form and adds the
  address to a MailerLite group
"""

from flask import Blueprint

subscribe_bp = Blueprint(
    'subscribe',
    __name__,
    url_prefix='/api/subscribe'
)

from . import routes

__all__ = ['subscribe_bp']
