"""
MailerLite Provider Adapter
===========================

Adds a subscriber to a MailerLite group via the v2 REST API.
Authenticates with a static API key sent in the X-MailerLite-ApiKey header.
"""

import requests

from ...core.config import Config


def group_subscribers_url(group_id, api_base=None):
    """Endpoint for adding subscribers to a group."""
    api_base = api_base or Config.MAILERLITE_API_BASE
    return f"{api_base.rstrip('/')}/groups/{group_id}/subscribers"


def build_payload(email, name):
    """Request body for the add-to-group call. Previously unsubscribed
    addresses are resubscribed rather than rejected."""
    return {
        "email": email,
        "name": name,
        "resubscribe": True,
    }


def add_subscriber_to_group(api_key, group_id, email, name,
                            api_base=None, timeout=None):
    """
    Add a subscriber to a MailerLite group.

    Args:
        api_key: MailerLite API key
        group_id: Target group ID
        email: Subscriber email address
        name: Subscriber display name
        api_base: API root (default: Config.MAILERLITE_API_BASE)
        timeout: Request timeout in seconds (default: Config.MAILERLITE_TIMEOUT)

    Returns:
        dict with {success, status_code, error}. On failure `error` holds the
        raw provider response text, which must not be shown to end users.

    Raises:
        requests.RequestException on transport failure.
    """
    headers = {
        "Content-Type": "application/json",
        "X-MailerLite-ApiKey": api_key,
    }

    resp = requests.post(
        group_subscribers_url(group_id, api_base),
        headers=headers,
        json=build_payload(email, name),
        timeout=timeout or Config.MAILERLITE_TIMEOUT,
    )

    if not 200 <= resp.status_code < 300:
        return {'success': False, 'status_code': resp.status_code, 'error': resp.text}

    return {'success': True, 'status_code': resp.status_code, 'error': ''}
