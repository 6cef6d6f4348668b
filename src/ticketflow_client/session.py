from __future__ import annotations

from dataclasses import dataclass, field, replace

from pydantic import ValidationError as ModelValidationError

from .auth_store import AuthStore
from .clients.auth import AuthClient
from .diagnostics import DiagnosticLogger
from .exceptions import SessionProviderError
from .http_client import HttpClient
from .models import AuthResponse, User

log = DiagnosticLogger("session")


@dataclass(frozen=True)
class Session:
    credential: str | None = None
    identity: User | None = None
    ready: bool = False

    @property
    def authenticated(self) -> bool:
        return bool(self.credential) and self.identity is not None


@dataclass
class SessionStore:
    """Authenticated identity plus bearer credential, mirrored to an ``AuthStore``.

    Every transition swaps the whole ``Session`` record in a single assignment,
    so no interleaving of login/register/logout can leave a credential without
    an identity (or the reverse).
    """

    http: HttpClient
    auth_store: AuthStore = field(default_factory=AuthStore)
    _state: Session = field(default_factory=Session, init=False)

    @property
    def state(self) -> Session:
        return self._state

    @property
    def ready(self) -> bool:
        return self._state.ready

    @property
    def credential(self) -> str | None:
        return self._state.credential

    @property
    def identity(self) -> User | None:
        return self._state.identity

    @property
    def authenticated(self) -> bool:
        return self._state.authenticated

    def initialize(self) -> Session:
        """Restore the persisted record once. Later calls are no-ops."""
        if self._state.ready:
            return self._state
        restored = self._restore()
        if restored is not None:
            self._state = Session(credential=restored.token, identity=restored.user, ready=True)
            log.info("Session restored", user_id=restored.user.id)
        else:
            self._state = replace(self._state, ready=True)
        return self._state

    def _restore(self) -> AuthResponse | None:
        try:
            record = self.auth_store.load()
        except (OSError, ValueError) as exc:
            log.warn("Session restore failed", message=str(exc))
            return None
        if not record:
            return None
        try:
            restored = AuthResponse.model_validate(record)
        except ModelValidationError:
            log.warn("Discarding malformed session record")
            self.auth_store.clear()
            return None
        if not restored.token:
            self.auth_store.clear()
            return None
        return restored

    async def login(self, email: str, password: str) -> User:
        log.debug("Login attempt", email=email)
        auth = await AuthClient(http=self.http).login(email, password)
        self._adopt(auth)
        log.info("Login success", user_id=auth.user.id)
        return auth.user

    async def register(self, email: str, password: str, name: str) -> User:
        log.debug("Register attempt", email=email)
        auth = await AuthClient(http=self.http).register(email, password, name)
        self._adopt(auth)
        log.info("Register success", user_id=auth.user.id)
        return auth.user

    def _adopt(self, auth: AuthResponse) -> None:
        self.auth_store.save(auth.token, auth.user.model_dump(mode="json"))
        self._state = Session(credential=auth.token, identity=auth.user, ready=True)

    def logout(self) -> None:
        self.auth_store.clear()
        self._state = Session(ready=True)
        log.info("Logout")

    def set_credential(self, credential: str | None) -> None:
        """Patch the in-memory credential only. Persisted storage is untouched."""
        self._state = replace(self._state, credential=credential)

    def set_identity(self, identity: User | None) -> None:
        """Patch the in-memory identity only. Persisted storage is untouched."""
        self._state = replace(self._state, identity=identity)


class SessionProvider:
    """Owns the process-wide ``SessionStore`` between ``open`` and ``close``."""

    def __init__(self, http: HttpClient, auth_store: AuthStore | None = None) -> None:
        self.http = http
        self.auth_store = auth_store or AuthStore()
        self._store: SessionStore | None = None

    @property
    def store(self) -> SessionStore:
        if self._store is None:
            raise SessionProviderError("SessionStore must be used within an open SessionProvider")
        return self._store

    def open(self) -> SessionStore:
        if self._store is None:
            self._store = SessionStore(http=self.http, auth_store=self.auth_store)
            self._store.initialize()
        return self._store

    def close(self) -> None:
        self._store = None

    def __enter__(self) -> SessionStore:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()
