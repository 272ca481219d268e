"""
Authentication Gateway Interface (Port).

Wraps the hosted auth provider's email/password flows.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol


@dataclass
class AuthSession:
    """An authenticated session returned by sign-in."""
    user_id: str
    email: str
    access_token: Optional[str] = None


@dataclass
class SignUpResult:
    """Outcome of a sign-up request."""
    user_id: Optional[str]
    email: str
    confirmation_required: bool = True


class AuthGateway(Protocol):
    """
    Abstract interface for the auth provider.

    Failures are raised as AuthenticationError carrying the provider's
    message.
    """

    def sign_up(self, email: str, password: str, metadata: Dict[str, Any]) -> SignUpResult:
        """
        Register a new account.

        Args:
            email: Account email
            password: Account password
            metadata: User metadata stored with the account (name, role)

        Raises:
            AuthenticationError: If the provider refuses the request
        """
        ...

    def sign_in(self, email: str, password: str) -> AuthSession:
        """
        Sign in with email and password.

        Raises:
            AuthenticationError: If the credentials are refused
        """
        ...

    def sign_out(self) -> None:
        """End the current session. Never raises."""
        ...
