"""
Fluent validation contract.

A Contract is a Notifiable that records one notification per violated rule.
Entities build a contract in their constructor and merge it into their own
notification list.

Usage:
    contract = (
        Contract()
        .requires()
        .is_not_none_or_whitespace(name, "name", "name is required")
        .has_max_len(name, 120, "name", "name must have at most 120 characters")
    )
    entity.add_notifications(contract)
"""

from __future__ import annotations

import re
from typing import Any

from shared.domain.notifications import Notifiable

# Pragmatic address check: one @, no whitespace, a dot in the domain part.
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Contract(Notifiable):
    """Chainable set of validation rules."""

    def requires(self) -> Contract:
        return self

    def is_not_none(self, value: Any, property: str, message: str) -> Contract:
        if value is None:
            self.add_notification(property, message)
        return self

    def is_not_none_or_whitespace(
        self, value: str | None, property: str, message: str
    ) -> Contract:
        if value is None or not str(value).strip():
            self.add_notification(property, message)
        return self

    def has_min_len(
        self, value: str | None, minimum: int, property: str, message: str
    ) -> Contract:
        if value is None or len(value) < minimum:
            self.add_notification(property, message)
        return self

    def has_max_len(
        self, value: str | None, maximum: int, property: str, message: str
    ) -> Contract:
        # Absent values are checked by the "required" rules, not by length.
        if value is not None and len(value) > maximum:
            self.add_notification(property, message)
        return self

    def is_email(self, value: str | None, property: str, message: str) -> Contract:
        if value is None or not EMAIL_PATTERN.match(value):
            self.add_notification(property, message)
        return self

    def is_greater_or_equal_than(
        self, value: int | float | None, minimum: int | float, property: str, message: str
    ) -> Contract:
        # Absent values are checked by is_not_none.
        if value is not None and value < minimum:
            self.add_notification(property, message)
        return self

    def is_lower_or_equal_than(
        self, value: int | float | None, maximum: int | float, property: str, message: str
    ) -> Contract:
        if value is not None and value > maximum:
            self.add_notification(property, message)
        return self

    def is_true(self, condition: bool, property: str, message: str) -> Contract:
        if not condition:
            self.add_notification(property, message)
        return self
