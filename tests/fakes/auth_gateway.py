"""
Fake Auth Gateway for testing.
"""
import uuid
from typing import Any, Dict, List, Optional

from application.exceptions import AuthenticationError
from application.ports import AuthSession, SignUpResult


class FakeAuthGateway:
    """
    In-memory accounts keyed by email.

    Usage:
        gateway = FakeAuthGateway()
        gateway.seed("a@example.com", "secret", user_id="user-1")
        session = gateway.sign_in("a@example.com", "secret")
    """

    def __init__(self):
        self._accounts: Dict[str, Dict[str, Any]] = {}
        self.sign_up_calls: List[Dict[str, Any]] = []
        self.signed_out = 0

    def reset(self) -> None:
        self._accounts.clear()
        self.sign_up_calls.clear()
        self.signed_out = 0

    def seed(self, email: str, password: str, user_id: Optional[str] = None) -> str:
        user_id = user_id or str(uuid.uuid4())
        self._accounts[email] = {"password": password, "user_id": user_id, "metadata": {}}
        return user_id

    def get_all(self) -> Dict[str, Dict[str, Any]]:
        return dict(self._accounts)

    # =========================================================================
    # AuthGateway Protocol Methods
    # =========================================================================

    def sign_up(self, email: str, password: str, metadata: Dict[str, Any]) -> SignUpResult:
        self.sign_up_calls.append({"email": email, "metadata": dict(metadata)})
        if email in self._accounts:
            raise AuthenticationError("User already registered")
        user_id = str(uuid.uuid4())
        self._accounts[email] = {"password": password, "user_id": user_id, "metadata": dict(metadata)}
        return SignUpResult(user_id=user_id, email=email, confirmation_required=True)

    def sign_in(self, email: str, password: str) -> AuthSession:
        account = self._accounts.get(email)
        if account is None or account["password"] != password:
            raise AuthenticationError("Invalid login credentials")
        return AuthSession(user_id=account["user_id"], email=email, access_token="fake-token")

    def sign_out(self) -> None:
        self.signed_out += 1
