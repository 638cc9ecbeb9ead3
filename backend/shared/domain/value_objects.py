"""
Value objects shared by domain entities.
"""

from __future__ import annotations

from shared.domain.contract import Contract
from shared.domain.notifications import Notifiable

EMAIL_MAX_LENGTH = 255


class Email(Notifiable):
    """
    E-mail address value object.

    The address is normalized (stripped, lowercased). A malformed or empty
    address produces exactly one notification on the ``email`` property.
    """

    def __init__(self, address: str | None):
        self.address = address.strip().lower() if address else ""

        if not self.address:
            self.add_notification("email", "email is required")
            return

        self.add_notifications(
            Contract()
            .requires()
            .is_email(self.address, "email", "email is not a valid address")
        )
        if self.valid:
            self.add_notifications(
                Contract().has_max_len(
                    self.address,
                    EMAIL_MAX_LENGTH,
                    "email",
                    f"email must have at most {EMAIL_MAX_LENGTH} characters",
                )
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Email):
            return NotImplemented
        return self.address == other.address

    def __hash__(self) -> int:
        return hash(self.address)

    def __str__(self) -> str:
        return self.address

    def __repr__(self) -> str:
        return f"Email({self.address!r})"
