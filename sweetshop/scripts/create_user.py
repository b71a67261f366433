"""
Create a user (e.g. the first admin; registration over HTTP only creates USER accounts).
Run from project root:
  python -m sweetshop.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m sweetshop.scripts.create_user admin your-secure-password ADMIN
"""
import argparse
import logging
import sys

from sweetshop.core.database import SessionLocal
from sweetshop.core.errors import DuplicateUsername, ValidationError
from sweetshop.models import Role
from sweetshop.services.users import register_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Sweet Shop user with a chosen role.")
    parser.add_argument("username", help="Username (3-50 chars)")
    parser.add_argument("password", help="Password (6-128 chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.USER.value,
        type=str.upper,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        user = register_user(db, args.username, args.password, role=Role(args.role))
    except (ValidationError, DuplicateUsername) as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
