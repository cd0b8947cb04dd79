from typing import Optional

from sqlalchemy import select, exists

from database.models.accounts import UserModel
from repositories.base import BaseRepository


class UserRepository(BaseRepository):
    """Data access for user accounts.

    Emails are expected to be normalized by the caller.
    """

    async def find_by_id(self, user_id: int) -> Optional[UserModel]:
        return await self._session.get(UserModel, user_id)

    async def find_by_email(self, email: str) -> Optional[UserModel]:
        result = await self._session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        return result.scalars().first()

    async def exists_by_email(self, email: str) -> bool:
        result = await self._session.execute(
            select(exists().where(UserModel.email == email))
        )
        return bool(result.scalar())

    async def save(self, user: UserModel) -> UserModel:
        return await self._add(user)
