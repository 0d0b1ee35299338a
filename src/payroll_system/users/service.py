from __future__ import annotations

import logging
from typing import Callable, Optional

from werkzeug.security import check_password_hash

from ..core.constants import DEFAULT_MAX_LOGIN_ATTEMPTS
from ..core.exceptions import AuthenticationError
from .model import Credentials, SessionUser

Prompt = Callable[[str], str]


class AuthService:
    """Use case: gate the console behind the configured operator account."""

    def __init__(
        self,
        credentials: Credentials,
        *,
        max_attempts: int = DEFAULT_MAX_LOGIN_ATTEMPTS,
        logger: Optional[logging.Logger] = None,
    ):
        self._credentials = credentials
        self._max_attempts = int(max_attempts)
        self._logger = logger or logging.getLogger(__name__)

    def authenticate(self, username: str, password: str) -> SessionUser:
        if (username or "").strip() != self._credentials.username:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(self._credentials.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME'
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")
        return SessionUser(username=self._credentials.username)

    def login(self, prompt: Prompt, secret_prompt: Optional[Prompt] = None, *, echo: Callable[[str], None] = print) -> Optional[SessionUser]:
        """Interactive login with a limited number of attempts; ``None`` when exhausted."""
        secret_prompt = secret_prompt or prompt
        for attempt in range(1, self._max_attempts + 1):
            echo("=== Login ===")
            username = prompt("Enter username: ")
            password = secret_prompt("Enter password: ")
            try:
                user = self.authenticate(username, password)
            except AuthenticationError:
                remaining = self._max_attempts - attempt
                self._logger.warning("Failed login attempt %d for user %r", attempt, username)
                echo(f"Invalid credentials. Attempts remaining: {remaining}")
                continue

            self._logger.info("User %s logged in", user.username)
            echo("Login successful! Redirecting to dashboard...")
            return user

        echo("Maximum login attempts reached. Exiting system...")
        return None
