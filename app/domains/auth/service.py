from collections.abc import AsyncGenerator
import logging
from passlib.hash import bcrypt
from advanced_alchemy.service import (
    SQLAlchemyAsyncRepositoryService,
)
from litestar.exceptions import NotAuthorizedException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from domains.auth.repository import UserRepository
from domains.auth.dtos import LoginReturnSchema, LoginSchema
from database.models.owner import Owner
from database.models.user import AccountStatus, User, UserRole, UserSchema
from security.oauth2 import create_user_token

logger = logging.getLogger(__name__)


class AuthService(SQLAlchemyAsyncRepositoryService[User]):
    repository_type = UserRepository

    async def login(self, data: LoginSchema) -> LoginReturnSchema:
        user = await self.get_one_or_none(User.login_id == data.login_id)
        if not user or not bcrypt.verify(data.password, user.password):
            raise NotAuthorizedException("Invalid credentials")
        if user.status != AccountStatus.ACTIVE:
            raise NotAuthorizedException("Account is not active")

        first_time = None
        if user.role == UserRole.OWNER:
            first_time = await self.repository.session.scalar(
                select(Owner.first_time).where(Owner.login_id == user.login_id)
            )
        logger.info("User %s logged in", user.login_id)
        return LoginReturnSchema(
            token=create_user_token(user),
            user=UserSchema.model_validate(user),
            first_time=first_time,
        )


async def provide_auth_service(
    db_session: AsyncSession,
) -> AsyncGenerator[AuthService, None]:
    async with AuthService.new(session=db_session) as service:
        yield service
