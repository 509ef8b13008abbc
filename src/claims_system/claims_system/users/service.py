from __future__ import annotations

import logging
from dataclasses import dataclass

from ..common.validators import is_blank, is_integer
from ..core.constants import ADMIN_ID_LENGTH, LECTURER_ID_LENGTH
from ..core.enums import ErrorCode, Role
from ..core.exceptions import AuthenticationError
from ..core.notifications import Notification
from .model import AdminIdentity, Identity
from .repository import ClaimantRepository

logger = logging.getLogger(__name__)

_ID_LENGTH_BY_ROLE = {
    Role.LECTURER: (LECTURER_ID_LENGTH, "Lecturer ID must be a numerical value with EXACTLY 4 digits (e.g., 1234)."),
    Role.ADMIN: (ADMIN_ID_LENGTH, "Admin ID must be a numerical value with EXACTLY 6 digits (e.g., 987654)."),
}


@dataclass(frozen=True)
class LoginResult:
    identity: Identity
    notification: Notification


class AuthService:
    """Use case: the login form's identity check.

    This is presentation-layer gating only, there is no credential store.
    """

    def __init__(self, claimants: ClaimantRepository):
        self._claimants = claimants

    @staticmethod
    def validate(first_name: str, last_name: str, unique_id: str, role: Role) -> None:
        """Apply the login rules in order; raise on the first one that fails."""
        if is_blank(first_name) or is_blank(last_name) or is_blank(unique_id):
            raise AuthenticationError(
                "All name, surname, and ID fields must be filled.",
                code=ErrorCode.MISSING_FIELD,
            )
        if not is_integer(unique_id):
            raise AuthenticationError("Unique ID must be numerical.", code=ErrorCode.NON_NUMERIC_ID)

        expected_length, message = _ID_LENGTH_BY_ROLE[Role(role)]
        if len(unique_id) != expected_length:
            raise AuthenticationError(message, code=ErrorCode.WRONG_ID_LENGTH)

    def login(self, first_name: str, last_name: str, unique_id: str, role: Role) -> LoginResult:
        self.validate(first_name, last_name, unique_id, role)
        first_name = first_name.strip()
        last_name = last_name.strip()

        if Role(role) == Role.LECTURER:
            active = self._claimants.get_active()
            claimant = self._claimants.update_identity(
                active.claimant_id,
                first_name=first_name,
                last_name=last_name,
                unique_id=unique_id,
            )
            logger.info("Lecturer %s logged in as claimant %s", claimant.name, claimant.claimant_id)
            return LoginResult(
                identity=claimant,
                notification=Notification.info("Success", f"Lecturer Login successful. Welcome, {claimant.name}."),
            )

        admin = AdminIdentity(first_name=first_name, last_name=last_name, unique_id=unique_id)
        logger.info("Admin %s logged in", admin.name)
        return LoginResult(
            identity=admin,
            notification=Notification.info("Success", f"Admin Login successful. Welcome, {admin.first_name}."),
        )
