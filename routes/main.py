"""
Module Name: main.py
Author: Status Page Development Team
Created: Oct 19 2026
Description:
    Status page routes: the page itself, subscribe/unsubscribe, status
    updates and the subscriber broadcast. Failures are logged by the services
    and never surface to the visitor.
Location:
    /routes/main.py

"""

from flask import Blueprint, current_app, redirect, request, url_for

from utils.logger import get_module_logger

main_bp = Blueprint('main', __name__)
logger = get_module_logger("Routes.Main")

ROUTE_METHODS = ['GET', 'POST']


def _services():
    return current_app.extensions['status_page']


@main_bp.route('/', methods=ROUTE_METHODS)
def index():
    """Status page with the latest message and recent history."""
    html = _services().get_status_page_service().render_index()
    if html is None:
        logger.debug("Index served without a body")
        return '', 200
    return html


@main_bp.route('/update-status', methods=ROUTE_METHODS)
def update_status():
    _services().get_status_page_service().handle_update_status(request.args.get('status', ''))
    return '', 200


@main_bp.route('/add-email', methods=ROUTE_METHODS)
def add_email():
    """Subscribe an address, then send the visitor back to the page."""
    _services().get_status_page_service().handle_subscribe(request.args.get('email', ''))
    return redirect(url_for('main.index'), code=307)


@main_bp.route('/unsubscribe', methods=ROUTE_METHODS)
def unsubscribe():
    _services().get_status_page_service().handle_unsubscribe(request.args.get('email', ''))
    return redirect(url_for('main.index'), code=301)


@main_bp.route('/emails-in-list', methods=ROUTE_METHODS)
def emails_in_list():
    """Print the subscriber list to the server log."""
    _services().get_status_page_service().handle_list_subscribers()
    return '', 200


@main_bp.route('/send-email', methods=ROUTE_METHODS)
def send_email():
    """Broadcast the latest status to every subscriber."""
    _services().get_status_page_service().handle_broadcast()
    return '', 200
