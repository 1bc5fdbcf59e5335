import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_int(name, default):
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_float(name, default=None):
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        return default


class Config:
    # Basic Flask configuration
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    PORT = _env_int('PORT', 8080)

    # Logging configuration
    CONFIGURE_LOGGING = os.environ.get('CONFIGURE_LOGGING', 'true').lower() == 'true'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    LOG_FILE = os.environ.get('LOG_FILE') or 'status_page.log'

    # Redis holds the subscriber set and the last posted status
    REDIS_ADDRESS = os.environ.get('REDIS_ADDRESS') or 'localhost:6379'
    REDIS_PASSWORD = os.environ.get('REDIS_PASSWORD', '')
    REDIS_DB = _env_int('REDIS_DB', 0)

    # Slack channel the status history is read from
    SLACK_TOKEN = os.environ.get('SLACK_TOKEN', '')
    SLACK_CHANNEL = os.environ.get('SLACK_CHANNEL', '')
    SLACK_API_URL = os.environ.get('SLACK_API_URL') or 'https://slack.com/api'

    # SendGrid credentials for outbound broadcast email
    SENDGRID_API_KEY = os.environ.get('SENDGRID_API_KEY', '')
    SENDGRID_API_URL = os.environ.get('SENDGRID_API_URL') or 'https://api.sendgrid.com/v3'

    # Email settings
    DOMAIN = os.environ.get('DOMAIN', '')
    EMAIL_FROM = os.environ.get('EMAIL_FROM') or 'hello@domain.com'
    EMAIL_SUBJECT = os.environ.get('EMAIL_SUBJECT') or 'Status Update'

    # Page settings
    PAGE_TITLE = os.environ.get('PAGE_TITLE') or 'Status Page'
    HISTORY_COUNT = _env_int('HISTORY_COUNT', 10)

    # Broadcast worker pool
    BROADCAST_MAX_WORKERS = _env_int('BROADCAST_MAX_WORKERS', 8)
    BROADCAST_MAX_PENDING = _env_int('BROADCAST_MAX_PENDING', 1000)

    # Seconds before an upstream HTTP call is abandoned (None = wait forever)
    UPSTREAM_TIMEOUT = _env_float('UPSTREAM_TIMEOUT')

    # Ephemeral port file written by `app.py --addr`
    PORT_FILE = os.environ.get('PORT_FILE') or 'final-port.txt'


class TestingConfig(Config):
    TESTING = True
    CONFIGURE_LOGGING = False
    SLACK_CHANNEL = 'C0TEST'
    DOMAIN = 'status.example.com'
