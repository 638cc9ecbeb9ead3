"""
Domain building blocks: notifications, validation contracts, value objects.
"""

from shared.domain.notifications import Notification, Notifiable
from shared.domain.contract import Contract
from shared.domain.value_objects import Email

__all__ = [
    "Notification",
    "Notifiable",
    "Contract",
    "Email",
]
