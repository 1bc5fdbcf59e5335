"""
WSGI Entry Point - Status Page

Provides the application factory output for production servers such as
Gunicorn or uWSGI.

Author: Status Page Development Team
Updated: October 19, 2026
"""

from app import create_app


app = create_app()

# Example (Gunicorn, threaded workers):
#   gunicorn -k gthread --threads 8 -w 1 -b 0.0.0.0:8080 wsgi:app
