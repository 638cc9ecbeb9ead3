"""
Notification pattern for domain validation.

Expected validation and business-rule failures are never raised. Entities and
services collect them as Notifications and expose an ``invalid`` flag that is
derived from the collected list.

Usage:
    from shared.domain import Notifiable

    class Customer(Notifiable):
        def __init__(self, name: str | None):
            if not name:
                self.add_notification("name", "name is required")

    customer = Customer(None)
    customer.invalid          # True
    customer.notifications    # (Notification(property='name', ...),)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class Notification:
    """A single field-scoped validation or business-rule failure."""

    property: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"property": self.property, "message": self.message}


NotificationSource = Union["Notifiable", Notification, Iterable[Notification]]


class Notifiable:
    """
    Mixin exposing an ordered notification list and a derived validity flag.

    The backing list is created lazily so that objects whose ``__init__`` is
    never run (ORM instances loaded from the database) still behave correctly.
    """

    @property
    def _notification_list(self) -> list[Notification]:
        return self.__dict__.setdefault("_notifications", [])

    @property
    def notifications(self) -> tuple[Notification, ...]:
        """Snapshot of the collected notifications, in insertion order."""
        return tuple(self._notification_list)

    @property
    def invalid(self) -> bool:
        return bool(self._notification_list)

    @property
    def valid(self) -> bool:
        return not self.invalid

    def add_notification(self, property: str, message: str) -> None:
        self._notification_list.append(Notification(property, message))

    def add_notifications(self, *sources: NotificationSource) -> None:
        """Append notifications from Notifiable objects, Notifications or iterables of them."""
        for source in sources:
            if isinstance(source, Notifiable):
                self._notification_list.extend(source.notifications)
            elif isinstance(source, Notification):
                self._notification_list.append(source)
            else:
                self._notification_list.extend(source)

    def clear_notifications(self) -> None:
        self._notification_list.clear()
