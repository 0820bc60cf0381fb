"""
app/services/auth_service.py

Resolves the caller's session from a JWT.

The token is looked up in the ``access_token`` cookie first and the
``Authorization: Bearer`` header second. Any problem with the token —
absent, malformed, badly signed, expired, or without a subject — resolves
to "no session"; the controller turns that into a 401.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Request
from jose import JWTError, jwt

from app.core.config import settings
from app.core.logger import get_logger
from app.models.upload_models import Session

logger = get_logger(__name__)

SESSION_COOKIE = "access_token"
_BEARER_PREFIX = "bearer "


class AuthService:
    """Decodes session tokens signed with the configured secret."""

    def __init__(
        self,
        secret_key: str | None = None,
        algorithm: str | None = None,
    ) -> None:
        self._secret_key: str = secret_key or settings.jwt_secret_key
        self._algorithm: str = algorithm or settings.jwt_algorithm

    # ── Public API ─────────────────────────────────────────────────────────────

    def extract_token(self, request: Request) -> Optional[str]:
        """Return the raw token from the cookie or bearer header, if any."""
        token = request.cookies.get(SESSION_COOKIE)
        if token:
            return token

        header = request.headers.get("authorization", "")
        if header.lower().startswith(_BEARER_PREFIX):
            return header[len(_BEARER_PREFIX):].strip() or None
        return None

    def decode(self, token: str) -> Optional[Session]:
        """Return the Session encoded in ``token``, or None if it is not valid."""
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.info("Rejected session token: %s", exc)
            return None

        subject = payload.get("sub")
        if not subject:
            logger.info("Rejected session token: missing 'sub' claim.")
            return None

        return Session(user_id=str(subject), email=payload.get("email"))

    def get_session(self, request: Request) -> Optional[Session]:
        token = self.extract_token(request)
        if token is None:
            return None
        return self.decode(token)

    def issue_token(self, user_id: str, email: str | None = None, **claims) -> str:
        """Sign a session token with this service's key and algorithm."""
        payload = {"sub": user_id, **claims}
        if email is not None:
            payload["email"] = email
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)


# ── Module-level singleton ─────────────────────────────────────────────────────

auth_service = AuthService()


def get_session(request: Request) -> Optional[Session]:
    """FastAPI dependency: the caller's session, or None."""
    return auth_service.get_session(request)
