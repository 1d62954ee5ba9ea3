from collections.abc import AsyncGenerator
import logging
import uuid
from advanced_alchemy.filters import OrderBy
from advanced_alchemy.repository import SQLAlchemyAsyncRepository
from advanced_alchemy.service import SQLAlchemyAsyncRepositoryService
from sqlalchemy.ext.asyncio import AsyncSession
from database.models.notification import Notification

logger = logging.getLogger(__name__)


class NotificationRepository(SQLAlchemyAsyncRepository[Notification]):
    model_type = Notification


class NotificationService(SQLAlchemyAsyncRepositoryService[Notification]):
    repository_type = NotificationRepository

    async def notify(
        self, recipient_id: uuid.UUID, type: str, message: str
    ) -> Notification:
        notification = await self.create(
            {"recipient_id": recipient_id, "type": type, "message": message},
            auto_refresh=True,
        )
        logger.info("Queued %s notification for user %s", type, recipient_id)
        return notification

    async def list_for_recipient(self, recipient_id: uuid.UUID) -> list[Notification]:
        return list(
            await self.list(
                Notification.recipient_id == recipient_id,
                OrderBy(field_name="created_at", sort_order="desc"),
            )
        )


async def provide_notification_service(
    db_session: AsyncSession,
) -> AsyncGenerator[NotificationService, None]:
    async with NotificationService.new(session=db_session) as service:
        yield service
