from datetime import timedelta
from typing import Any
import uuid
from litestar.security.jwt import Token, JWTAuth
from litestar.connection import ASGIConnection
from configs.settings import JWT_EXPIRATION_HOURS, JWT_SECRET
from database.models.user import User, UserRole


async def retrieve_user_handler(
    token: Token,
    connection: ASGIConnection[Any, Any, Any, Any],
) -> User | None:
    role = token.extras.get("role")
    if role is None:
        return None
    return User(
        id=uuid.UUID(token.sub),
        name=token.extras.get("name", ""),
        role=UserRole(role),
        login_id=token.extras.get("login_id"),
        location_code=token.extras.get("location_code"),
    )


oauth2_auth = JWTAuth[User](
    retrieve_user_handler=retrieve_user_handler,
    token_secret=JWT_SECRET,
    default_token_expiration=timedelta(hours=JWT_EXPIRATION_HOURS),
    exclude=[
        "/api/auth/",
        "/schema",
        "/metrics",
        "favicon.ico",
    ],
    exclude_opt_key="no_auth",
)


def create_user_token(user: User) -> str:
    return oauth2_auth.create_token(
        identifier=str(user.id),
        token_extras={
            "name": user.name,
            "role": UserRole(user.role).value,
            "login_id": user.login_id,
            "location_code": user.location_code,
        },
    )
