"""
Account use case: invite-gated sign-up, sign-in and sign-out.

Sign-up is gated by a shared invite code and tags the account role from a
configured list of creator emails. The profile row itself is created by the
database from the user metadata passed here.
"""

import logging
from typing import Iterable, Optional

from application.exceptions import AuthenticationError
from application.ports import AuthGateway, AuthSession, SignUpResult
from application.use_cases.base import ActionResult
from domain.models import ProfileRole

logger = logging.getLogger(__name__)

DEFAULT_SIGNUP_NAME = "User"


class AuthService:
    """
    Use case wrapping the auth gateway.

    Usage:
        >>> auth = AuthService(gateway, invite_code="LETMEIN", creator_emails=["coach@example.com"])
        >>> result = auth.sign_up("a@example.com", "secret", "Alex", "LETMEIN")
        >>> session = auth.sign_in("a@example.com", "secret")
    """

    def __init__(
        self,
        gateway: AuthGateway,
        invite_code: Optional[str] = None,
        creator_emails: Iterable[str] = (),
    ):
        self._gateway = gateway
        self._invite_code = invite_code
        self._creator_emails = {email.strip().lower() for email in creator_emails}

    def role_for(self, email: str) -> ProfileRole:
        if email.strip().lower() in self._creator_emails:
            return ProfileRole.CREATOR
        return ProfileRole.MEMBER

    def sign_up(
        self,
        email: str,
        password: str,
        name: Optional[str] = None,
        invite_code: Optional[str] = None,
    ) -> ActionResult:
        """
        Register an account. Does not sign in.

        Returns:
            ActionResult whose value is the SignUpResult. A wrong invite code,
            blank credentials and provider refusals are reported as errors.
        """
        if self._invite_code and (invite_code or "").strip() != self._invite_code:
            logger.warning(f"Sign-up rejected for {email}: invalid invite code")
            return ActionResult.rejected("Invalid invite code")
        if not email or not email.strip() or not password:
            return ActionResult.rejected("Email and password are required")

        email = email.strip()
        metadata = {
            "name": (name or "").strip() or DEFAULT_SIGNUP_NAME,
            "role": self.role_for(email).value,
        }
        try:
            result: SignUpResult = self._gateway.sign_up(email, password, metadata)
        except AuthenticationError as e:
            logger.warning(f"Sign-up failed for {email}: {e}")
            return ActionResult.rejected(str(e))

        logger.info(f"Account created for {email} (role={metadata['role']})")
        return ActionResult.ok(result)

    def sign_in(self, email: str, password: str) -> AuthSession:
        """
        Raises:
            AuthenticationError: If the credentials are blank or refused
        """
        if not email or not email.strip() or not password:
            raise AuthenticationError("Email and password are required")
        session = self._gateway.sign_in(email.strip(), password)
        logger.info(f"Signed in as {session.email}")
        return session

    def sign_out(self) -> None:
        self._gateway.sign_out()
        logger.info("Signed out")
