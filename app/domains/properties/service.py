from collections.abc import AsyncGenerator
import logging
from typing import Optional
import uuid
from advanced_alchemy.filters import OrderBy
from advanced_alchemy.repository import SQLAlchemyAsyncRepository
from advanced_alchemy.service import SQLAlchemyAsyncRepositoryService
from litestar.exceptions import NotFoundException
from sqlalchemy.ext.asyncio import AsyncSession
from database.models.property import Property, PropertyStatus
from database.models.user import User

logger = logging.getLogger(__name__)


class PropertyRepository(SQLAlchemyAsyncRepository[Property]):
    model_type = Property


class PropertyService(SQLAlchemyAsyncRepositoryService[Property]):
    repository_type = PropertyRepository

    async def list_with_owner(self) -> list[Property]:
        return list(
            await self.list(OrderBy(field_name="created_at", sort_order="desc"))
        )

    async def create_for_owner(
        self,
        owner: User,
        title: Optional[str],
        address: Optional[str],
        location_code: Optional[str],
    ) -> Property:
        property = Property(
            title=title,
            address=address,
            location_code=location_code,
            status=PropertyStatus.INACTIVE,
            is_published=False,
        )
        property.assign_owner(owner)
        return await self.create(property, auto_refresh=True)

    async def publish(self, property_id: uuid.UUID) -> Property:
        property = await self.get_one_or_none(Property.id == property_id)
        if not property:
            raise NotFoundException("Property not found")
        property.status = PropertyStatus.ACTIVE
        property.is_published = True
        property = await self.update(property, auto_refresh=True)
        logger.info("Published property %s", property_id)
        return property


async def provide_property_service(
    db_session: AsyncSession,
) -> AsyncGenerator[PropertyService, None]:

    async with PropertyService.new(session=db_session) as service:
        yield service
