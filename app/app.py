import logging
from advanced_alchemy.exceptions import IntegrityError as RepositoryIntegrityError
from dotenv import load_dotenv
from litestar import Litestar, MediaType, Request, Response
from litestar.exceptions import HTTPException, ValidationException
from litestar.plugins.prometheus import PrometheusConfig, PrometheusController
from litestar.plugins.pydantic import PydanticPlugin
from litestar.plugins.sqlalchemy import SQLAlchemyPlugin
from litestar.middleware.logging import LoggingMiddlewareConfig
from litestar.plugins.structlog import StructlogConfig, StructlogPlugin
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from litestar.types import ControllerRouterHandler
from sqlalchemy.exc import IntegrityError
from configs import openapi
from configs.settings import DEBUG, SEED_DEMO_DATA, SEED_VISIT_REPORTS
from configs.sqlalchemy import sqlalchemy_config
from database.models.base import schema_type_encoders
from domains.admin.controller import AdminController
from domains.auth.controller import AuthController
from domains.notification.controller import NotificationController
from domains.owners.controller import OwnerController
from domains.properties.controller import PropertyController
from domains.rooms.controller import RoomController
from domains.tenants.controller import TenantController
from security.oauth2 import oauth2_auth
from seed.factories.staff import StaffUserFactory
from seed.factories.visit_report import VisitReportFactory
from seed.seed import Seeder

load_dotenv()

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, **extra) -> Response:
    return Response(
        media_type=MediaType.JSON,
        content={"success": False, "message": message, **extra},
        status_code=status_code,
    )


def validation_exception_handler(
    request: Request, exc: ValidationException
) -> Response:
    if isinstance(exc.extra, list) and len(exc.extra) > 0:
        return _error_response(
            HTTP_400_BAD_REQUEST,
            "Bad request",
            details=[
                {
                    "field": error.get("key", error.get("loc")),
                    "msg": error.get("message", error.get("msg")),
                }
                for error in exc.extra
                if isinstance(error, dict)
            ],
        )
    return _error_response(HTTP_400_BAD_REQUEST, exc.detail)


def http_exception_handler(request: Request, exc: HTTPException) -> Response:
    return _error_response(exc.status_code, exc.detail)


def integrity_error_handler(request: Request, exc: Exception) -> Response:
    logger.warning("Integrity error on %s: %s", request.url.path, exc)
    return _error_response(HTTP_409_CONFLICT, "Resource already exists")


def internal_error_handler(request: Request, exc: Exception) -> Response:
    logger.exception("Unhandled error on %s", request.url.path, exc_info=exc)
    return _error_response(HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


routes: list[ControllerRouterHandler] = [
    AuthController,
    AdminController,
    OwnerController,
    PropertyController,
    RoomController,
    TenantController,
    NotificationController,
    PrometheusController,
]
prometheus_config = PrometheusConfig(group_path=True)
# Bodies carry passwords (login, upsert) and the generated temp password.
logging_middleware_config = LoggingMiddlewareConfig(
    request_log_fields=["path", "method", "query", "path_params"],
    response_log_fields=["status_code"],
)
structlog_plugin = StructlogPlugin(
    config=StructlogConfig(middleware_logging_config=logging_middleware_config)
)
seeder = Seeder()


async def on_startup() -> None:
    if not SEED_DEMO_DATA:
        return
    await seeder.seed_all(
        factory_classes=[
            (StaffUserFactory, 1),
            (VisitReportFactory, SEED_VISIT_REPORTS),
        ]
    )


app = Litestar(
    route_handlers=routes,
    openapi_config=openapi.config,
    on_app_init=[oauth2_auth.on_app_init],
    on_startup=[on_startup],
    middleware=[prometheus_config.middleware],
    debug=DEBUG,
    type_encoders=schema_type_encoders,
    exception_handlers={
        ValidationException: validation_exception_handler,
        HTTPException: http_exception_handler,
        RepositoryIntegrityError: integrity_error_handler,
        IntegrityError: integrity_error_handler,
        Exception: internal_error_handler,
    },
    plugins=[
        SQLAlchemyPlugin(config=sqlalchemy_config),
        PydanticPlugin(prefer_alias=True),
        structlog_plugin,
    ],
)
