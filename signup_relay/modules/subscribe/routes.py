"""
Subscribe Routes
================

Provides:
- POST /api/subscribe -- add {name, email} to the configured MailerLite group

Any other method gets a plain-text 405. Provider and configuration failures
are logged server-side; clients only ever see a generic message.
"""

import os
import logging
from flask import request, jsonify, current_app
from . import subscribe_bp
from . import mailerlite
from ...core.config import Config

# Setup logging
logger = logging.getLogger(__name__)

MSG_CONFIG_ERROR = 'Server configuration error.'
MSG_INVALID_INPUT = 'Missing or invalid name/email address.'
MSG_PROVIDER_ERROR = 'Error subscribing. This email may already be on the list.'
MSG_INTERNAL_ERROR = 'Internal server error. Check logs for details.'
MSG_SUCCESS = 'Subscription successful!'


def _get_setting(key, default=None):
    """Resolve a setting: Flask app config, then environment, then default"""
    try:
        val = current_app.config.get(key)
        if val:
            return val
    except RuntimeError:
        pass
    return os.getenv(key) or default


def get_api_key():
    """MailerLite API key, or None when not configured"""
    return _get_setting('EMAIL_SERVICE_API_KEY')


def get_group_id():
    """Target MailerLite group, falling back to the placeholder ID"""
    return _get_setting('MAILERLITE_GROUP_ID', Config.MAILERLITE_GROUP_ID)


def validate_signup(data):
    """Return (name, email) if the payload is acceptable, else None.

    Only checks presence and that the email contains '@'; the provider owns
    anything stricter.
    """
    if not isinstance(data, dict):
        return None

    name = data.get('name')
    email = data.get('email')

    if not isinstance(name, str) or not name:
        return None
    if not isinstance(email, str) or '@' not in email:
        return None

    return name, email


def _method_not_allowed(method):
    """Plain-text 405 naming the rejected method"""
    response = current_app.response_class(
        f'Method {method} Not Allowed',
        status=405,
        mimetype='text/plain'
    )
    response.headers['Allow'] = 'POST'
    return response


# ===================
# PUBLIC API ROUTES
# ===================

# OPTIONS is left to Flask's automatic handling so CORS preflight still works
@subscribe_bp.route('', methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE'])
def subscribe():
    """Handle a newsletter signup from the web form."""
    if request.method != 'POST':
        return _method_not_allowed(request.method)

    api_key = get_api_key()
    if not api_key:
        logger.error("EMAIL_SERVICE_API_KEY is not set.")
        return jsonify({'message': MSG_CONFIG_ERROR}), 500

    signup = validate_signup(request.get_json(silent=True))
    if signup is None:
        logger.info("Rejected signup with missing or invalid name/email")
        return jsonify({'message': MSG_INVALID_INPUT}), 400

    name, email = signup
    group_id = get_group_id()

    try:
        result = mailerlite.add_subscriber_to_group(
            api_key,
            group_id,
            email,
            name,
            api_base=current_app.config.get('MAILERLITE_API_BASE', Config.MAILERLITE_API_BASE),
            timeout=current_app.config.get('MAILERLITE_TIMEOUT', Config.MAILERLITE_TIMEOUT),
        )

        if not result['success']:
            logger.error(f"MailerLite API Error ({result['status_code']}): {result['error']}")
            return jsonify({'message': MSG_PROVIDER_ERROR}), 500

        logger.info(f"Subscribed {email} to MailerLite group {group_id}")
        return jsonify({'message': MSG_SUCCESS}), 200

    except Exception:
        logger.exception("API Handler Error")
        return jsonify({'message': MSG_INTERNAL_ERROR}), 500


@subscribe_bp.app_errorhandler(405)
def subscribe_method_not_allowed(error):
    """Methods outside the route's list fail during routing, before the view
    runs. Give them the same plain-text 405 on the subscribe URL."""
    if request.path.rstrip('/') == subscribe_bp.url_prefix:
        return _method_not_allowed(request.method)
    return error
