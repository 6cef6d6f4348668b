from __future__ import annotations

from dataclasses import dataclass

from .diagnostics import DiagnosticLogger
from .exceptions import ApiError
from .navigation import EVENTS_PATH, Destination
from .session import SessionStore
from .validation import validate_email, validate_name, validate_password

INVALID_LOGIN = "Please enter a valid email and password."
INVALID_REGISTRATION = "Please enter a valid email, password, and name."
LOGIN_FAILED = "Login failed"
REGISTRATION_FAILED = "Registration failed"

log = DiagnosticLogger("forms")


def _message(error: ApiError, fallback: str) -> str:
    return error.message.strip() or fallback


@dataclass
class LoginForm:
    session: SessionStore
    error: str | None = None
    loading: bool = False
    destination: Destination | None = None

    async def submit(self, email: str, password: str) -> bool:
        if self.loading:
            return False
        self.error = None
        clean_email = validate_email(email)
        clean_password = validate_password(password)
        if clean_email is None or clean_password is None:
            self.error = INVALID_LOGIN
            return False

        self.loading = True
        log.debug("Login form submit", email=clean_email)
        try:
            await self.session.login(clean_email, clean_password)
        except ApiError as exc:
            self.error = _message(exc, LOGIN_FAILED)
            log.warn("Login error", message=self.error)
            return False
        finally:
            self.loading = False
        self.destination = Destination(EVENTS_PATH)
        return True


@dataclass
class RegisterForm:
    session: SessionStore
    error: str | None = None
    loading: bool = False
    destination: Destination | None = None

    async def submit(self, email: str, password: str, name: str) -> bool:
        if self.loading:
            return False
        self.error = None
        clean_email = validate_email(email)
        clean_password = validate_password(password)
        clean_name = validate_name(name)
        if clean_email is None or clean_password is None or clean_name is None:
            self.error = INVALID_REGISTRATION
            return False

        self.loading = True
        try:
            await self.session.register(clean_email, clean_password, clean_name)
        except ApiError as exc:
            self.error = _message(exc, REGISTRATION_FAILED)
            log.warn("Registration error", message=self.error)
            return False
        finally:
            self.loading = False
        self.destination = Destination(EVENTS_PATH)
        return True
