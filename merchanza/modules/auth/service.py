from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from merchanza.app.common.errors import AccountError
from merchanza.app.common.tokens import get_token_service
from merchanza.app.extensions import db
from merchanza.app.models import User, empty_cart

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def signup(name: str | None, email: str, password: str) -> str:
    """Create a user with an empty cart and return a session token."""
    email = normalize_email(email)
    if User.query.filter_by(email=email).first():
        raise AccountError.email_taken()

    user = User(
        name=name,
        email=email,
        password_hash=generate_password_hash(password),
        cart_data=empty_cart(),
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as exc:
        # Lost a race with another signup for the same email.
        db.session.rollback()
        raise AccountError.email_taken() from exc

    logger.info("Created user %s", user.id)
    return get_token_service().issue(user.id)


def login(email: str, password: str) -> str:
    user = User.query.filter_by(email=normalize_email(email)).first()
    if not user or not check_password_hash(user.password_hash, password):
        logger.info("Failed login attempt")
        raise AccountError.invalid_credentials()

    logger.info("User %s logged in", user.id)
    return get_token_service().issue(user.id)
