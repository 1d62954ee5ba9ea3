import logging
from typing import Optional
from passlib.hash import bcrypt
from configs.settings import SUPERADMIN_LOGIN_ID, SUPERADMIN_PASSWORD
from configs.sqlalchemy import sqlalchemy_config
from database.models.user import AccountStatus, User, UserRole
from domains.auth.repository import UserRepository
from seed.factories.base import BaseFactory

logger = logging.getLogger(__name__)


class StaffUserFactory(BaseFactory):
    """Creates the superadmin account configured through the environment."""

    repository = UserRepository
    reset = False

    def __init__(
        self,
        login_id: str = SUPERADMIN_LOGIN_ID,
        password: Optional[str] = SUPERADMIN_PASSWORD,
    ) -> None:
        self.login_id = login_id
        self.password = password

    async def seed(self, count: Optional[int] = None) -> None:
        if not self.password:
            logger.warning("SUPERADMIN_PASSWORD is not set, skipping superadmin seed")
            return
        async with sqlalchemy_config.get_session() as session:
            repository = self.repository(session=session)
            if await repository.exists(User.login_id == self.login_id):
                logger.info("Superadmin %s already exists", self.login_id)
                return
            try:
                await repository.add(
                    User(
                        name="Super Admin",
                        password=bcrypt.hash(self.password),
                        role=UserRole.SUPERADMIN,
                        login_id=self.login_id,
                        status=AccountStatus.ACTIVE,
                    )
                )
            except Exception:
                await session.rollback()
                raise
            await session.commit()

    async def drop_all(self) -> None:
        async with sqlalchemy_config.get_session() as session:
            await self.repository(session=session).delete_where(
                User.login_id == self.login_id
            )
            await session.commit()
