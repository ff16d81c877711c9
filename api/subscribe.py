"""
Serverless entry point
======================

Exposes a WSGI `app` for platforms that import api/<name>.py as a function
(e.g. Vercel's Python runtime), serving POST /api/subscribe.

Run locally with:
    python api/subscribe.py
"""

from signup_relay import create_app
from signup_relay.core.config import Config

app = create_app()


if __name__ == '__main__':
    print(f"Signup endpoint: http://localhost:{Config.PORT}/api/subscribe")
    app.run(host='0.0.0.0', port=Config.PORT, debug=True)
