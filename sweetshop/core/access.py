"""Per-operation access requirements and the single function that enforces them."""

import logging
from enum import Enum

from sweetshop.core.errors import Forbidden, Unauthenticated
from sweetshop.models.user import Role
from sweetshop.schemas.auth import Identity

logger = logging.getLogger(__name__)


class Requirement(str, Enum):
    """What a caller needs to invoke an operation."""

    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


ACCESS_POLICY: dict[str, Requirement] = {
    "health": Requirement.ANONYMOUS,
    "auth.register": Requirement.ANONYMOUS,
    "auth.login": Requirement.ANONYMOUS,
    "sweets.list": Requirement.AUTHENTICATED,
    "sweets.search": Requirement.AUTHENTICATED,
    "sweets.purchase": Requirement.AUTHENTICATED,
    "sweets.create": Requirement.ADMIN,
    "sweets.update": Requirement.ADMIN,
    "sweets.delete": Requirement.ADMIN,
    "sweets.restock": Requirement.ADMIN,
}


def authorize(identity: Identity | None, operation: str) -> None:
    """
    Check the caller against the requirement registered for operation.

    Raises Unauthenticated when an identity is needed and missing, Forbidden when
    the identity lacks the admin role. Unknown operations raise KeyError.
    """
    requirement = ACCESS_POLICY[operation]
    if requirement is Requirement.ANONYMOUS:
        return
    if identity is None:
        raise Unauthenticated("Not authenticated")
    if requirement is Requirement.ADMIN and not identity.has_role(Role.ADMIN.value):
        logger.info(
            "Access denied",
            extra={"operation": operation, "username": identity.username},
        )
        raise Forbidden("Admin access required")
