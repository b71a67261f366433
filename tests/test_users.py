"""Tests for user registration and credential checks against a real (SQLite) session."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

import support
from sweetshop.core.database import SessionLocal
from sweetshop.core.errors import DuplicateUsername, InvalidCredentials, ValidationError
from sweetshop.models import Role, User
from sweetshop.scripts import create_user
from sweetshop.services.users import authenticate_user, register_user


class UserServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        support.reset_database()
        self.db = SessionLocal()

    def tearDown(self) -> None:
        self.db.close()

    def _count_users(self) -> int:
        return self.db.scalar(select(func.count()).select_from(User))


class TestRegister(UserServiceTestCase):
    def test_register_creates_user_with_hashed_password(self) -> None:
        user = register_user(self.db, "alice", "pw123456")
        self.assertIsNotNone(user.id)
        self.assertEqual(user.username, "alice")
        self.assertEqual(user.role, Role.USER.value)
        self.assertNotEqual(user.password_hash, "pw123456")
        self.assertTrue(user.password_hash.startswith("$2"))

    def test_register_strips_username(self) -> None:
        user = register_user(self.db, "  alice  ", "pw123456")
        self.assertEqual(user.username, "alice")

    def test_register_admin_role(self) -> None:
        user = register_user(self.db, "boss", "pw123456", role=Role.ADMIN)
        self.assertEqual(user.role, "ADMIN")

    def test_short_username_or_password_rejected_and_nothing_stored(self) -> None:
        for username, password in (("ab", "pw123456"), ("alice", "12345"), ("", "")):
            with self.subTest(username=username, password=password):
                with self.assertRaises(ValidationError):
                    register_user(self.db, username, password)
        self.assertEqual(self._count_users(), 0)

    def test_duplicate_username_rejected_first_user_intact(self) -> None:
        first = register_user(self.db, "alice", "pw123456")
        original_hash = first.password_hash
        with self.assertRaises(DuplicateUsername):
            register_user(self.db, "alice", "different-password")
        self.assertEqual(self._count_users(), 1)
        stored = self.db.scalars(select(User).where(User.username == "alice")).one()
        self.assertEqual(stored.password_hash, original_hash)
        self.assertEqual(authenticate_user(self.db, "alice", "pw123456").id, first.id)

    def test_unique_violation_on_commit_maps_to_duplicate(self) -> None:
        """A concurrent registration that passes the existence check still fails cleanly."""
        db = MagicMock()
        db.scalars.return_value.first.return_value = None
        db.commit.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
        with self.assertRaises(DuplicateUsername):
            register_user(db, "alice", "pw123456")
        db.rollback.assert_called_once()


class TestAuthenticate(UserServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        register_user(self.db, "alice", "pw123456")

    def test_valid_credentials_return_user(self) -> None:
        self.assertEqual(authenticate_user(self.db, "alice", "pw123456").username, "alice")

    def test_wrong_password_and_unknown_user_fail_identically(self) -> None:
        with self.assertRaises(InvalidCredentials) as wrong_pw:
            authenticate_user(self.db, "alice", "nope-nope")
        with self.assertRaises(InvalidCredentials) as unknown:
            authenticate_user(self.db, "nobody", "pw123456")
        self.assertEqual(wrong_pw.exception.message, unknown.exception.message)


class TestCreateUserScript(UserServiceTestCase):
    """The bootstrap CLI is the only way to create an ADMIN."""

    def test_creates_admin(self) -> None:
        self.assertEqual(create_user.main(["boss", "pw123456", "admin"]), 0)
        user = self.db.scalars(select(User).where(User.username == "boss")).one()
        self.assertEqual(user.role, "ADMIN")

    def test_defaults_to_user_role(self) -> None:
        self.assertEqual(create_user.main(["clerk", "pw123456"]), 0)
        user = self.db.scalars(select(User).where(User.username == "clerk")).one()
        self.assertEqual(user.role, "USER")

    def test_duplicate_and_invalid_input_exit_1(self) -> None:
        self.assertEqual(create_user.main(["boss", "pw123456", "ADMIN"]), 0)
        self.assertEqual(create_user.main(["boss", "pw123456", "ADMIN"]), 1)
        self.assertEqual(create_user.main(["x", "pw123456"]), 1)
        self.assertEqual(self._count_users(), 1)


if __name__ == "__main__":
    unittest.main()
