from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ApiError(Exception):
    """Raise to return a consistent JSON error response."""

    status_code: int
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def to_dict(self, request_id: str | None = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "success": False,
            "errors": self.message,
            "code": self.code,
            "details": self.details or {},
            "request_id": request_id,
        }
        return payload


def abort_json(status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None) -> None:
    """Convenience wrapper."""
    raise ApiError(status_code=status_code, code=code, message=message, details=details)


class AuthError(ApiError):
    """Rejected at the auth gate."""

    @classmethod
    def missing_token(cls) -> "AuthError":
        return cls(401, "missing_token", "Please authenticate using valid login")

    @classmethod
    def invalid_token(cls) -> "AuthError":
        return cls(401, "invalid_token", "Please authenticate using valid token")


class AccountError(ApiError):
    @classmethod
    def email_taken(cls) -> "AccountError":
        return cls(400, "email_taken", "Existing user found with the same email")

    @classmethod
    def invalid_credentials(cls) -> "AccountError":
        # Unknown email and wrong password are deliberately indistinguishable.
        return cls(401, "invalid_credentials", "Wrong Email or Password")


class CartError(ApiError):
    @classmethod
    def user_not_found(cls) -> "CartError":
        return cls(404, "user_not_found", "User not found")

    @classmethod
    def invalid_slot(cls, slot: Any, size: int) -> "CartError":
        return cls(
            400,
            "invalid_slot",
            f"itemId must be an integer in [0, {size})",
            {"itemId": slot},
        )

    @classmethod
    def conflict(cls) -> "CartError":
        return cls(409, "cart_conflict", "Cart was modified concurrently, please retry")
