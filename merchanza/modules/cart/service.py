"""Per-user cart vector updates.

The whole vector is read, changed in memory and written back. The write is
conditioned on the row version (see ``User.version``); when another request
got there first the commit raises ``StaleDataError`` and the update is
replayed against the fresh row.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from flask import current_app
from sqlalchemy.orm.exc import StaleDataError
from tenacity import (
    RetryError,
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
)

from merchanza.app.common.errors import CartError
from merchanza.app.extensions import db
from merchanza.app.models import CART_SIZE, User

logger = logging.getLogger(__name__)


def parse_slot(raw: Any) -> int:
    if isinstance(raw, bool):
        raise CartError.invalid_slot(raw, CART_SIZE)
    if isinstance(raw, int):
        slot = raw
    elif isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        slot = int(raw.strip())
    else:
        raise CartError.invalid_slot(raw, CART_SIZE)

    if not 0 <= slot < CART_SIZE:
        raise CartError.invalid_slot(raw, CART_SIZE)
    return slot


def _load_owner(user_id: int) -> User:
    user = db.session.get(User, user_id)
    if user is None:
        raise CartError.user_not_found()
    return user


def _apply(user_id: int, slot: int, change: Callable[[int], int]) -> int:
    user = _load_owner(user_id)
    cart = list(user.cart_data)
    cart[slot] = change(cart[slot])
    # Assign a new list so the JSON column is flagged dirty.
    user.cart_data = cart
    try:
        db.session.commit()
    except StaleDataError:
        db.session.rollback()
        raise
    return cart[slot]


def _update_slot(user_id: int, slot: int, change: Callable[[int], int]) -> int:
    attempts = max(1, int(current_app.config.get("CART_UPDATE_ATTEMPTS", 5)))
    retrying = Retrying(
        retry=retry_if_exception_type(StaleDataError),
        stop=stop_after_attempt(attempts),
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )

    try:
        for attempt in retrying:
            with attempt:
                return _apply(user_id, slot, change)
    except RetryError as exc:
        logger.error("Giving up on cart update for user %s after %s attempts", user_id, attempts)
        raise CartError.conflict() from exc


def add_to_cart(user_id: int, item_slot: Any) -> int:
    """Increment one slot by exactly one and return the new count."""
    slot = parse_slot(item_slot)
    return _update_slot(user_id, slot, lambda count: count + 1)


def remove_from_cart(user_id: int, item_slot: Any) -> int:
    """Decrement one slot, never below zero, and return the new count."""
    slot = parse_slot(item_slot)
    return _update_slot(user_id, slot, lambda count: max(count - 1, 0))


def get_cart(user_id: int) -> list[int]:
    return list(_load_owner(user_id).cart_data)
