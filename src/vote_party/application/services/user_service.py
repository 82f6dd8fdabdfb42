"""User Application Service - admin profile upkeep."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.shared.exceptions import InvalidUsernameError, NotFoundError
from ...domain.shared.messages import LogTemplates
from ...domain.shared.validators import validate_profile_username
from ...domain.users.entities import User

if TYPE_CHECKING:
    from ...domain.users.repository import UserRepository

logger = logging.getLogger(__name__)


class UserApplicationService:
    def __init__(self, *, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    async def upsert_profile(self, user_id: str, email: str, username: str) -> User:
        """Create or overwrite an admin's profile.

        Raises:
            InvalidUsernameError: If the username is not 3-30 letters, digits or underscores.
        """
        try:
            validate_profile_username(username)
        except ValueError as exc:
            raise InvalidUsernameError(str(exc)) from exc

        user = User(id=user_id, email=email, username=username)
        await self._user_repo.upsert(user)
        logger.info(LogTemplates.PROFILE_UPSERTED, user_id)
        return user

    async def get_profile(self, user_id: str) -> User:
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user
