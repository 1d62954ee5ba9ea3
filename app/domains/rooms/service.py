from collections.abc import AsyncGenerator
from typing import Optional
import uuid
from advanced_alchemy.filters import OrderBy
from advanced_alchemy.repository import SQLAlchemyAsyncRepository
from advanced_alchemy.service import SQLAlchemyAsyncRepositoryService
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from database.filters import combine, prefix_match
from database.models.property import Property, PropertyStatus
from database.models.room import Room


class RoomRepository(SQLAlchemyAsyncRepository[Room]):
    model_type = Room


class RoomService(SQLAlchemyAsyncRepositoryService[Room]):
    repository_type = RoomRepository

    async def properties_for_owner(self, owner_login_id: str) -> list[Property]:
        query = (
            select(Property)
            .where(Property.owner_login_id == owner_login_id)
            .order_by(Property.created_at.desc())
        )
        return list((await self.repository.session.scalars(query)).unique().all())

    async def list_for_properties(self, property_ids: list[uuid.UUID]) -> list[Room]:
        if not property_ids:
            return []
        return list(
            await self.list(
                Room.property_id.in_(property_ids),
                OrderBy(field_name="created_at", sort_order="desc"),
            )
        )

    async def list_public(self, location_code: Optional[str] = None) -> list[Room]:
        """Rooms tenants can browse: those of published, active properties."""
        published = select(Property.id).where(
            Property.is_published.is_(True),
            Property.status == PropertyStatus.ACTIVE,
            *combine(prefix_match(Property.location_code, location_code)),
        )
        return list(
            await self.list(
                Room.property_id.in_(published),
                OrderBy(field_name="created_at", sort_order="desc"),
            )
        )


async def provide_room_service(
    db_session: AsyncSession,
) -> AsyncGenerator[RoomService, None]:
    async with RoomService.new(session=db_session) as service:
        yield service
