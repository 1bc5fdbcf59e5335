"""
Broadcast Service Package - Status Page

Outbound email to subscribers: SendGrid client, delivery pool and the
broadcast workflow.
"""

from .broadcast_service import BroadcastService, EmailDispatch
from .delivery_pool import DeliveryPool
from .sendgrid_client import SendGridConnection


__all__ = ['BroadcastService', 'EmailDispatch', 'DeliveryPool', 'SendGridConnection']
