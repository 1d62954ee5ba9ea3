from typing import Any
from litestar import Controller, Request, get
from litestar.di import Provide
from litestar.security.jwt import Token
from database.models.notification import NotificationSchema
from database.models.user import User
from domains.auth.guard import login_guard
from domains.notification.dtos import NotificationListSchema
from domains.notification.service import (
    NotificationService,
    provide_notification_service,
)


class NotificationController(Controller):
    path = "/api/notifications"
    tags = ["Notification"]
    dependencies = {
        "notification_service": Provide(provide_notification_service),
    }

    @get("/", guards=[login_guard])
    async def list_notifications(
        self,
        notification_service: NotificationService,
        request: Request[User, Token, Any],
    ) -> NotificationListSchema:
        notifications = await notification_service.list_for_recipient(request.user.id)
        return NotificationListSchema(
            notifications=[
                NotificationSchema.model_validate(item) for item in notifications
            ]
        )
