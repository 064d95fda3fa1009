"""Stateless session tokens.

A token is ``{"user": {"id": <user id>}}`` serialized and HMAC-signed with
itsdangerous. Nothing is stored server side and tokens never expire; a token
stops verifying only when the secret (or salt) changes.
"""

from __future__ import annotations

from typing import Any

from flask import current_app
from itsdangerous import BadPayload, BadSignature, URLSafeSerializer


class VerificationError(Exception):
    """Token could not be verified."""


class MalformedToken(VerificationError):
    pass


class SignatureInvalid(VerificationError):
    pass


class TokenService:
    def __init__(self, secret_key: str, salt: str = "merchanza-session"):
        if not secret_key:
            raise ValueError("secret_key must be a non-empty string")
        self._serializer = URLSafeSerializer(secret_key, salt=salt)

    def issue(self, user_id: int) -> str:
        return self._serializer.dumps({"user": {"id": user_id}})

    def verify(self, token: Any) -> int:
        # Without a separator there is no signature to check at all.
        if not isinstance(token, str) or "." not in token:
            raise MalformedToken("token is not a signed payload")

        # itsdangerous checks the signature before decoding, so decode first
        # to tell garbage apart from a forged or foreign token.
        payload = token.rsplit(".", 1)[0]
        try:
            self._serializer.load_payload(payload.encode("utf-8"))
        except BadPayload as exc:
            raise MalformedToken("token payload could not be decoded") from exc

        try:
            data = self._serializer.loads(token)
        except BadPayload as exc:
            raise MalformedToken("token payload could not be decoded") from exc
        except BadSignature as exc:
            raise SignatureInvalid("token signature does not match") from exc

        try:
            user_id = data["user"]["id"]
        except (KeyError, TypeError) as exc:
            raise MalformedToken("token does not carry a user id") from exc

        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise MalformedToken("token user id is not an integer")
        return user_id


def init_token_service(app) -> TokenService:
    secret = app.config.get("TOKEN_SECRET")
    if not secret:
        raise RuntimeError("TOKEN_SECRET must be configured")
    service = TokenService(secret, salt=app.config.get("TOKEN_SALT", "merchanza-session"))
    app.extensions["token_service"] = service
    return service


def get_token_service() -> TokenService:
    return current_app.extensions["token_service"]
