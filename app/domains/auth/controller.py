from litestar import Controller, post
from litestar.di import Provide
from domains.auth.dtos import LoginReturnSchema, LoginSchema
from domains.auth.service import AuthService, provide_auth_service


class AuthController(Controller):

    path = "/api/auth"
    tags = ["Authorization"]
    dependencies = {
        "auth_service": Provide(provide_auth_service),
    }

    @post(
        "/login",
        status_code=200,
        response_description="Login successfully",
        no_auth=True,
    )
    async def login(
        self, data: LoginSchema, auth_service: AuthService
    ) -> LoginReturnSchema:
        return await auth_service.login(data)
