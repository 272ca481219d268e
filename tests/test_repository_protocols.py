"""
Tests for repository protocol definitions.

These tests verify that:
1. Protocol definitions are valid and importable
2. Protocols define the expected methods
3. Fake and Supabase implementations provide every protocol method
"""
import pytest

# All tests in this module are pure logic tests (no TestClient) - mark as unit
pytestmark = pytest.mark.unit


PROTOCOL_METHODS = {
    "KeyValueStore": ["get", "set", "remove", "keys"],
    "TemplateRepository": ["list_for_user", "create", "update", "delete"],
    "WorkoutLogRepository": ["list_for_user", "create", "delete"],
    "CustomExerciseRepository": ["list_for_user", "create", "delete"],
    "ProfileRepository": ["get", "update"],
    "AuthGateway": ["sign_up", "sign_in", "sign_out"],
}


class TestProtocolImports:
    """Test that all protocols can be imported."""

    @pytest.mark.parametrize("name", sorted(PROTOCOL_METHODS))
    def test_protocol_defines_methods(self, name):
        import application.ports as ports
        protocol = getattr(ports, name)
        for method in PROTOCOL_METHODS[name]:
            assert callable(getattr(protocol, method)), f"{name}.{method} missing"

    def test_auth_dtos(self):
        from application.ports import AuthSession, SignUpResult
        session = AuthSession(user_id="u1", email="a@example.com")
        assert session.access_token is None
        assert SignUpResult(user_id=None, email="a@example.com").confirmation_required is True


class TestImplementationsMatchProtocols:
    """Fakes and Supabase adapters must expose the same methods."""

    @pytest.mark.parametrize(
        "protocol, implementations",
        [
            ("KeyValueStore", ["tests.fakes:FakeKeyValueStore", "infrastructure.local:JsonFileStore"]),
            (
                "TemplateRepository",
                ["tests.fakes:FakeTemplateRepository", "infrastructure.db:SupabaseTemplateRepository"],
            ),
            (
                "WorkoutLogRepository",
                ["tests.fakes:FakeWorkoutLogRepository", "infrastructure.db:SupabaseWorkoutLogRepository"],
            ),
            (
                "CustomExerciseRepository",
                [
                    "tests.fakes:FakeCustomExerciseRepository",
                    "infrastructure.db:SupabaseCustomExerciseRepository",
                ],
            ),
            (
                "ProfileRepository",
                ["tests.fakes:FakeProfileRepository", "infrastructure.db:SupabaseProfileRepository"],
            ),
            ("AuthGateway", ["tests.fakes:FakeAuthGateway", "infrastructure.db:SupabaseAuthGateway"]),
        ],
    )
    def test_methods_present(self, protocol, implementations):
        import importlib
        for target in implementations:
            module_name, class_name = target.split(":")
            cls = getattr(importlib.import_module(module_name), class_name)
            for method in PROTOCOL_METHODS[protocol]:
                assert callable(getattr(cls, method, None)), f"{class_name}.{method} missing"
