"""
Supabase Auth implementation of AuthGateway.

Uses a client created with the anon key so signing in never changes the
credentials of the service-role client the repositories share.
"""
import logging
from typing import Any, Dict

from supabase import Client

from application.exceptions import AuthenticationError
from application.ports import AuthSession, SignUpResult

logger = logging.getLogger(__name__)


class SupabaseAuthGateway:
    """Email/password flows against Supabase Auth."""

    def __init__(self, client: Client):
        self._client = client

    def sign_up(self, email: str, password: str, metadata: Dict[str, Any]) -> SignUpResult:
        try:
            response = self._client.auth.sign_up(
                {"email": email, "password": password, "options": {"data": metadata}}
            )
        except Exception as e:
            logger.error(f"Sign-up failed for {email}: {e}")
            raise AuthenticationError(str(e)) from e

        user = response.user
        return SignUpResult(
            user_id=user.id if user else None,
            email=email,
            confirmation_required=response.session is None,
        )

    def sign_in(self, email: str, password: str) -> AuthSession:
        try:
            response = self._client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as e:
            logger.error(f"Sign-in failed for {email}: {e}")
            raise AuthenticationError(str(e)) from e

        if response.user is None:
            raise AuthenticationError("Invalid login credentials")
        return AuthSession(
            user_id=response.user.id,
            email=response.user.email or email,
            access_token=response.session.access_token if response.session else None,
        )

    def sign_out(self) -> None:
        try:
            self._client.auth.sign_out()
        except Exception as e:
            logger.warning(f"Sign-out failed: {e}")
