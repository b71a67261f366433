"""Unit tests for the operation → requirement table and the authorize() check."""

import unittest

import support  # noqa: F401  sets the test environment before sweetshop is imported
from sweetshop.api.routing import PolicyRoute
from sweetshop.core.access import ACCESS_POLICY, Requirement, authorize
from sweetshop.core.errors import Forbidden, Unauthenticated
from sweetshop.main import app
from sweetshop.schemas.auth import Identity

USER = Identity(username="alice", authorities=frozenset({"ROLE_USER"}))
ADMIN = Identity(username="boss", authorities=frozenset({"ROLE_ADMIN"}))

ADMIN_OPERATIONS = ("sweets.create", "sweets.update", "sweets.delete", "sweets.restock")
AUTHENTICATED_OPERATIONS = ("sweets.list", "sweets.search", "sweets.purchase")
ANONYMOUS_OPERATIONS = ("auth.register", "auth.login", "health")


class TestPolicyTable(unittest.TestCase):
    """The table lists every routed operation with the expected requirement."""

    def test_requirements(self) -> None:
        for op in ADMIN_OPERATIONS:
            self.assertIs(ACCESS_POLICY[op], Requirement.ADMIN)
        for op in AUTHENTICATED_OPERATIONS:
            self.assertIs(ACCESS_POLICY[op], Requirement.AUTHENTICATED)
        for op in ANONYMOUS_OPERATIONS:
            self.assertIs(ACCESS_POLICY[op], Requirement.ANONYMOUS)

    def test_unknown_operation_raises_key_error(self) -> None:
        with self.assertRaises(KeyError):
            authorize(ADMIN, "sweets.explode")

    def test_every_routed_operation_has_an_entry(self) -> None:
        routed = {route.name for route in app.routes if isinstance(route, PolicyRoute)}
        self.assertEqual(routed, set(ACCESS_POLICY))


class TestAuthorize(unittest.TestCase):
    """Anonymous → Unauthenticated, wrong role → Forbidden, otherwise allowed."""

    def test_anonymous_operations_allow_everyone(self) -> None:
        for op in ANONYMOUS_OPERATIONS:
            for identity in (None, USER, ADMIN):
                authorize(identity, op)

    def test_protected_operations_reject_anonymous(self) -> None:
        for op in ADMIN_OPERATIONS + AUTHENTICATED_OPERATIONS:
            with self.subTest(op=op):
                with self.assertRaises(Unauthenticated):
                    authorize(None, op)

    def test_user_allowed_on_authenticated_operations(self) -> None:
        for op in AUTHENTICATED_OPERATIONS:
            authorize(USER, op)

    def test_user_forbidden_on_admin_operations(self) -> None:
        for op in ADMIN_OPERATIONS:
            with self.subTest(op=op):
                with self.assertRaises(Forbidden):
                    authorize(USER, op)

    def test_admin_allowed_everywhere(self) -> None:
        for op in ACCESS_POLICY:
            authorize(ADMIN, op)

    def test_identity_without_authorities_is_not_admin(self) -> None:
        with self.assertRaises(Forbidden):
            authorize(Identity(username="ghost"), "sweets.delete")


if __name__ == "__main__":
    unittest.main()
