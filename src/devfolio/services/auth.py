"""Authentication for the admin area.

This module provides an email/password authentication layer backed by the
users table. Passwords are stored as salted PBKDF2 hashes. Signing in
issues an opaque session token with an expiry; every sign-in, sign-out and
token refresh is announced to subscribers registered through
``on_auth_state_change``.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import StrEnum

from devfolio.data.db import get_session
from devfolio.data.models import AuthSession, User

logger = logging.getLogger(__name__)

__all__ = [
    "AuthEvent",
    "AuthUser",
    "SessionInfo",
    "get_session_info",
    "on_auth_state_change",
    "refresh_session",
    "sign_in",
    "sign_out",
    "sign_up",
]

_PBKDF2_ITERATIONS = 100_000
_SALT_BYTES = 16
_MIN_PASSWORD_LENGTH = 6
_DEFAULT_SESSION_TTL_MINUTES = 60


class AuthEvent(StrEnum):
    """Auth state changes announced to subscribers."""

    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"


@dataclass(frozen=True)
class AuthUser:
    id: int
    email: str


@dataclass(frozen=True)
class SessionInfo:
    """A live session: the token handed to the client and whose it is."""

    token: str
    user: AuthUser
    expires_at: datetime


AuthListener = Callable[[AuthEvent, SessionInfo], None]

_listeners: list[AuthListener] = []


def on_auth_state_change(listener: AuthListener) -> Callable[[], None]:
    """Subscribe ``listener`` to auth events.

    Returns:
        A function that removes the subscription.
    """
    _listeners.append(listener)

    def unsubscribe() -> None:
        if listener in _listeners:
            _listeners.remove(listener)

    return unsubscribe


def _notify(event: AuthEvent, info: SessionInfo) -> None:
    for listener in list(_listeners):
        try:
            listener(event, info)
        except Exception:
            logger.exception("Auth listener failed while handling %s", event)


def _session_ttl() -> timedelta:
    raw = os.getenv("DEVFOLIO_SESSION_TTL_MINUTES")
    try:
        minutes = int(raw) if raw else _DEFAULT_SESSION_TTL_MINUTES
    except ValueError:
        logger.warning("Ignoring invalid DEVFOLIO_SESSION_TTL_MINUTES=%r", raw)
        minutes = _DEFAULT_SESSION_TTL_MINUTES
    return timedelta(minutes=minutes)


def _as_utc(moment: datetime) -> datetime:
    # SQLite drops tzinfo on the way back out.
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=UTC)


def _hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash for the given password.

    The result is stored as ``<salt_hex>:<hash_hex>``.
    """
    salt = os.urandom(_SALT_BYTES)
    derived = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"{salt.hex()}:{derived.hex()}"


def _verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against a stored ``salt:hash`` string."""
    try:
        salt_hex, hash_hex = stored_hash.split(":", 1)
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False

    candidate = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        _PBKDF2_ITERATIONS,
    )
    return hmac.compare_digest(candidate, expected)


def _session_info(record: AuthSession, user: User) -> SessionInfo:
    return SessionInfo(
        token=record.token,
        user=AuthUser(id=user.id, email=user.email),
        expires_at=_as_utc(record.expires_at),
    )


def sign_up(email: str, password: str) -> tuple[bool, str | None]:
    """Create a new admin account.

    Returns:
        Tuple of (success flag, error message). On success, error is None.
    """
    email_clean = email.strip().lower()
    if not email_clean or "@" not in email_clean:
        return False, "A valid email address is required."
    if len(password) < _MIN_PASSWORD_LENGTH:
        return False, f"Password must be at least {_MIN_PASSWORD_LENGTH} characters."

    try:
        with get_session() as session:
            existing = session.query(User).filter(User.email == email_clean).first()
            if existing is not None:
                return False, "An account with this email already exists."

            session.add(User(email=email_clean, password_hash=_hash_password(password)))
    except Exception:
        logger.exception("Failed to create account for %s", email_clean)
        return False, "Sign up failed. Please try again."

    logger.info("Created admin account %s", email_clean)
    return True, None


def sign_in(email: str, password: str) -> tuple[SessionInfo | None, str | None]:
    """Authenticate with email and password and open a session.

    Returns:
        Tuple of (session, error message). On success, error is None.
    """
    email_clean = email.strip().lower()
    if not email_clean or not password:
        return None, "Email and password are required."

    try:
        with get_session() as session:
            user = session.query(User).filter(User.email == email_clean).first()
            if user is None or not _verify_password(password, user.password_hash):
                return None, "Invalid email or password."

            record = AuthSession(
                token=secrets.token_urlsafe(32),
                user_id=user.id,
                expires_at=datetime.now(UTC) + _session_ttl(),
            )
            session.add(record)
            session.flush()
            info = _session_info(record, user)
    except Exception:
        logger.exception("Sign in failed for %s", email_clean)
        return None, "Sign in failed. Please try again."

    _notify(AuthEvent.SIGNED_IN, info)
    return info, None


def get_session_info(token: str | None) -> SessionInfo | None:
    """Return the live session for ``token``, or None if missing or expired."""
    if not token:
        return None

    with get_session() as session:
        record = session.query(AuthSession).filter(AuthSession.token == token).first()
        if record is None:
            return None
        if _as_utc(record.expires_at) <= datetime.now(UTC):
            session.delete(record)
            return None
        return _session_info(record, record.user)


def refresh_session(token: str) -> SessionInfo | None:
    """Extend a live session's expiry.

    Returns:
        The refreshed session, or None if the token is unknown or expired.
    """
    with get_session() as session:
        record = session.query(AuthSession).filter(AuthSession.token == token).first()
        if record is None or _as_utc(record.expires_at) <= datetime.now(UTC):
            return None
        record.expires_at = datetime.now(UTC) + _session_ttl()
        session.flush()
        info = _session_info(record, record.user)

    _notify(AuthEvent.TOKEN_REFRESHED, info)
    return info


def sign_out(token: str) -> bool:
    """Revoke a session. Returns True if the token was live."""
    with get_session() as session:
        record = session.query(AuthSession).filter(AuthSession.token == token).first()
        if record is None:
            return False
        info = _session_info(record, record.user)
        session.delete(record)

    _notify(AuthEvent.SIGNED_OUT, info)
    return True
