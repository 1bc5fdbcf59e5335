"""
Application Bootstrap - Status Page

Creates the Flask application, registers the status page blueprint and
builds the shared services from configuration.

Author: Status Page Development Team
Updated: October 19, 2026
"""

import argparse
import atexit
import logging

from flask import Flask, render_template  # type: ignore
from werkzeug.exceptions import HTTPException
from werkzeug.serving import make_server

from config.config import Config
from routes.main import main_bp
from services.service_manager import ServiceManager
from utils.logger import setup_logger

logger = logging.getLogger("StatusPage")


def make_renderer(app):
    """Template renderer usable from request threads and delivery workers alike."""
    def render(template_name, **context):
        with app.app_context():
            return render_template(template_name, **context)
    return render


def create_app(config_class=Config, **clients):
    """Application factory pattern.

    ``clients`` may carry ``redis_client``, ``slack_connection`` and
    ``email_client`` instances that replace the ones built from config.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Setup logging
    if app.config.get('CONFIGURE_LOGGING', True):
        setup_logger("StatusPage", app.config.get('LOG_FILE', 'status_page.log'), app.config.get('LOG_LEVEL', 'INFO'))
    logger.info("Starting Status Page Flask application")

    services = ServiceManager(app.config, make_renderer(app), **clients)
    app.extensions['status_page'] = services

    app.register_blueprint(main_bp)

    # Error handlers
    register_error_handlers(app)

    logger.info("Status Page Flask application initialized successfully")
    return app


def register_error_handlers(app):
    """Register error handlers"""

    @app.errorhandler(404)
    def not_found_error(error):
        return '', 404

    @app.errorhandler(Exception)
    def handle_exception(e):
        if isinstance(e, HTTPException):
            return e
        logger.error(f"Unhandled exception: {e}")
        return '', 500


def serve_on_ephemeral_port(app, port_file):
    """Bind 127.0.0.1 on a free port, record it in ``port_file`` and serve."""
    server = make_server('127.0.0.1', 0, app, threaded=True)
    host, port = server.server_address[:2]
    address = f"{host}:{port}"
    with open(port_file, 'w', encoding='utf-8') as handle:
        handle.write(address)
    logger.info(f"Serving on {address} (written to {port_file})")
    server.serve_forever()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Status page web service")
    parser.add_argument(
        '--addr',
        action='store_true',
        help="find open address and print to final-port.txt",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    app = create_app()
    atexit.register(app.extensions['status_page'].shutdown)

    if args.addr:
        serve_on_ephemeral_port(app, app.config.get('PORT_FILE', 'final-port.txt'))
        return

    port = app.config.get('PORT', 8080)
    logger.info(f"Status Page Starting on port {port}...")
    app.run(host='0.0.0.0', port=port, threaded=True)


if __name__ == '__main__':
    main()
