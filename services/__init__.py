# Services package for the Status Page Flask app

from .broadcast import BroadcastService
from .slack import StatusHistoryReader
from .status_page import StatusPageService
from .store import SubscriberStore

from .service_manager import ServiceManager

__all__ = [
    # Core services
    'SubscriberStore',
    'StatusHistoryReader',
    'BroadcastService',
    'StatusPageService',

    # Service manager
    'ServiceManager',
]
