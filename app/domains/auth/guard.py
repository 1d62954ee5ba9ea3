from typing import Callable
from litestar.exceptions import NotAuthorizedException, PermissionDeniedException
from litestar.connection import ASGIConnection
from litestar.handlers.base import BaseRouteHandler
from database.models.user import UserRole

GuardRole = UserRole

ADMIN_ROLES = [GuardRole.ADMIN, GuardRole.SUPERADMIN]
STAFF_ROLES = [GuardRole.ADMIN, GuardRole.SUPERADMIN, GuardRole.AREA_MANAGER]


def login_guard(connection: ASGIConnection, _: BaseRouteHandler) -> None:
    if not connection.user:
        raise NotAuthorizedException("User is not logged in.")


def role_guard(
    allowed_roles: list[GuardRole],
) -> Callable[[ASGIConnection, BaseRouteHandler], None]:
    def guard(connection: ASGIConnection, _: BaseRouteHandler) -> None:
        if len(allowed_roles) == 0:
            return
        if not connection.user:
            raise NotAuthorizedException("User is not logged in.")
        if connection.user.role not in allowed_roles:
            raise PermissionDeniedException("You are not authorized to use this feature")

    return guard
