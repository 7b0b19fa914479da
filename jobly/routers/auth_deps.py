"""
Authorization dependencies for FastAPI endpoints.

A missing or unverifiable token makes the caller anonymous; the ``ensure_*``
dependencies decide whether anonymous or non-admin callers may proceed.
Both cases answer 401.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobly.core.exceptions import UnauthorizedError
from jobly.services import auth as auth_service

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Dict[str, Any]]:
    """
    Returns the verified token payload, or None for anonymous callers.
    """
    if credentials is None:
        return None

    payload = auth_service.decode_access_token(credentials.credentials)

    if payload is None:
        logger.warning("Authentication failed: Invalid token")
        return None

    if payload.get("error") == "TOKEN_EXPIRED":
        logger.info("Authentication failed: Token expired")
        return None

    if not payload.get("username"):
        logger.warning("Authentication failed: Missing username in token")
        return None

    return payload


def ensure_logged_in(current_user: Optional[Dict[str, Any]] = Depends(get_current_user)) -> Dict[str, Any]:
    if current_user is None:
        raise UnauthorizedError()
    return current_user


def ensure_admin(current_user: Dict[str, Any] = Depends(ensure_logged_in)) -> Dict[str, Any]:
    if not current_user.get("isAdmin"):
        raise UnauthorizedError()
    return current_user
