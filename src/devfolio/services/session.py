"""Session gate: who is signed in for the current client.

A ``SessionGate`` is created per request from the client's session token
and passed explicitly to whatever needs the current user. On ``start()``
it looks up the existing session and subscribes to auth events so that a
sign-out or token refresh seen during its lifetime is reflected in
``user``. A failed lookup is treated the same as "no user".
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from devfolio.services import auth
from devfolio.services.auth import AuthEvent, AuthUser, SessionInfo

logger = logging.getLogger(__name__)

__all__ = ["SessionGate"]


@dataclass
class SessionGate:
    """Current-user-or-absent plus a loading flag.

    Attributes:
        token: Session token presented by the client, if any.
        user: Signed-in user, or None.
        loading: True until the initial session lookup has finished.
    """

    token: str | None = None
    user: AuthUser | None = None
    loading: bool = True
    _unsubscribe: Callable[[], None] | None = field(default=None, repr=False)

    def start(self) -> SessionGate:
        """Resolve the existing session and subscribe to changes."""
        try:
            info = auth.get_session_info(self.token)
        except Exception:
            logger.exception("Session lookup failed")
            info = None

        self.user = info.user if info else None
        if info is None:
            self.token = None
        self.loading = False
        self._unsubscribe = auth.on_auth_state_change(self._on_auth_event)
        return self

    def close(self) -> None:
        """Stop listening for auth events."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def should_redirect(self) -> bool:
        """True when an admin screen must send the client to the login screen."""
        return not self.loading and self.user is None

    def sign_in(self, email: str, password: str) -> tuple[SessionInfo | None, str | None]:
        """Sign in through this gate.

        Returns:
            Tuple of (session, error message). On success, error is None.
        """
        info, error = auth.sign_in(email, password)
        if info is not None:
            self._adopt(info)
        return info, error

    def sign_out(self) -> None:
        if self.token is not None:
            auth.sign_out(self.token)
        self.token = None
        self.user = None

    def _adopt(self, info: SessionInfo) -> None:
        self.token = info.token
        self.user = info.user

    def _on_auth_event(self, event: AuthEvent, info: SessionInfo) -> None:
        if self.token is None or info.token != self.token:
            return
        if event is AuthEvent.SIGNED_OUT:
            self.user = None
            self.token = None
        else:
            self._adopt(info)
