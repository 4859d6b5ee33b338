"""Domain models shared by the store slices and use-cases."""

from __future__ import annotations

import re
from enum import StrEnum

from pydantic import field_validator

from appstate.domain.identity import Entity, ValueObject

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Theme(StrEnum):
    """UI color theme."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Theme:
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class Email(ValueObject[str]):
    """Email address, normalized to lowercase without surrounding whitespace."""

    @field_validator("value")
    @classmethod
    def _check_format(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not EMAIL_PATTERN.match(normalized):
            msg = f"Invalid email address: {value!r}"
            raise ValueError(msg)
        return normalized


class User(Entity[str]):
    """Authenticated user. Two users are the same user iff their ids match."""

    email: Email
    name: str

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "User id must not be empty"
            raise ValueError(msg)
        return value
