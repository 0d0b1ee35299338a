from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    """The single operator account allowed into the console."""

    username: str
    password_hash: str


@dataclass(frozen=True)
class SessionUser:
    """What the console keeps after a successful login."""

    username: str
