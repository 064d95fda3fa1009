"""Token auth gate.

Protected views read the signed token from the ``auth-token`` header and get
the caller's id on ``g.user_id``. Whether that user still exists is left to
the view.
"""

import logging
from functools import wraps
from typing import Callable, TypeVar, Any

from flask import current_app, g, request

from merchanza.app.common.errors import AuthError
from merchanza.app.common.tokens import VerificationError, get_token_service

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


def authenticate() -> int:
    header = current_app.config.get("AUTH_HEADER", "auth-token")
    token = request.headers.get(header)
    if not token:
        raise AuthError.missing_token()

    try:
        user_id = get_token_service().verify(token)
    except VerificationError as exc:
        logger.info("Rejected token on %s: %s", request.path, exc.__class__.__name__)
        raise AuthError.invalid_token() from exc

    g.user_id = user_id
    return user_id


def token_required(fn: F) -> F:
    @wraps(fn)
    def wrapper(*args, **kwargs):
        authenticate()
        return fn(*args, **kwargs)

    return wrapper  # type: ignore
