from collections.abc import AsyncGenerator
from datetime import datetime
import logging
from typing import Any, Optional
import uuid
from advanced_alchemy.filters import OrderBy
from advanced_alchemy.repository import SQLAlchemyAsyncRepository
from advanced_alchemy.service import SQLAlchemyAsyncRepositoryService
from litestar.exceptions import NotFoundException, ValidationException
from passlib.hash import bcrypt
from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from database.filters import combine, exact_match, prefix_match, search_any
from database.models.owner import KycStatus, Owner
from database.models.property import Property
from database.models.room import Room
from database.models.user import User, UserRole
from domains.notification.service import NotificationService
from domains.owners.dtos import OwnerCreateSchema, OwnerWriteSchema
from domains.rooms.service import RoomService
from utils.exceptions import ConflictException

logger = logging.getLogger(__name__)

KYC_DECISIONS = (KycStatus.VERIFIED, KycStatus.REJECTED)


class OwnerRepository(SQLAlchemyAsyncRepository[Owner]):
    model_type = Owner


class OwnerService(SQLAlchemyAsyncRepositoryService[Owner]):
    repository_type = OwnerRepository

    async def search(
        self,
        location_code: Optional[str] = None,
        kyc_status: Optional[KycStatus] = None,
        search: Optional[str] = None,
    ) -> list[Owner]:
        filters = combine(
            prefix_match(Owner.location_code, location_code),
            exact_match(Owner.kyc_status, kyc_status),
            search_any(
                search,
                Owner.name,
                Owner.login_id,
                Owner.phone,
                Owner.profile["name"].as_string(),
            ),
        )
        return list(
            await self.list(
                *filters, OrderBy(field_name="created_at", sort_order="desc")
            )
        )

    async def get_by_login_id(self, login_id: str) -> Owner:
        owner = await self.get_one_or_none(Owner.login_id == login_id)
        if not owner:
            raise NotFoundException(f"Owner not found: {login_id}")
        return owner

    async def get_by_reference(self, reference: str) -> Owner:
        """Look an owner up by primary key or by login id."""
        condition = Owner.login_id == reference
        try:
            condition = or_(condition, Owner.id == uuid.UUID(reference))
        except ValueError:
            pass
        owner = await self.get_one_or_none(condition)
        if not owner:
            raise NotFoundException("Owner not found")
        return owner

    async def create_owner(self, data: OwnerCreateSchema) -> tuple[Owner, bool]:
        """Create an owner; an existing ``loginId`` is returned untouched."""
        existing = await self.get_one_or_none(Owner.login_id == data.login_id)
        if existing:
            logger.info("Owner %s already exists, returning it", data.login_id)
            return existing, False
        values = self._owner_values(data)
        values["login_id"] = data.login_id
        user = await self._owner_account(data.login_id)
        values["user_id"] = user.id if user else None
        owner = await self.create(values, auto_refresh=True)
        logger.info("Owner %s created", owner.login_id)
        return owner, True

    async def upsert_owner(self, login_id: str, data: OwnerWriteSchema) -> Owner:
        values = self._owner_values(data)
        owner = await self.get_one_or_none(Owner.login_id == login_id)
        if owner is None:
            user = await self._owner_account(login_id)
            owner = await self.create(
                {**values, "login_id": login_id, "user_id": user.id if user else None},
                auto_refresh=True,
            )
            logger.info("Owner %s created by upsert", login_id)
        else:
            owner = await self.update(values, item_id=owner.id, auto_refresh=True)
        if "password" in values:
            await self._rotate_user_password(owner, values["password"])
        return owner

    async def update_kyc(
        self, reference: str, status: str, rejection_reason: Optional[str] = None
    ) -> Owner:
        try:
            kyc_status = KycStatus(status)
        except ValueError:
            kyc_status = None
        if kyc_status not in KYC_DECISIONS:
            raise ValidationException("Invalid status")

        owner = await self.get_by_reference(reference)
        owner.kyc_status = kyc_status
        if kyc_status == KycStatus.VERIFIED:
            owner.kyc_verified_at = datetime.now()
            owner.kyc_rejection_reason = None
            owner.is_active = True
        else:
            owner.kyc_rejection_reason = rejection_reason
            owner.is_active = False
        owner = await self.update(owner, auto_refresh=True)
        logger.info("Owner %s KYC set to %s", owner.login_id, kyc_status.value)

        if owner.user_id:
            notification_service = NotificationService(session=self.repository.session)
            await notification_service.notify(
                recipient_id=owner.user_id,
                type="kyc_update",
                message=f"Your KYC has been {kyc_status.value}.",
            )
        return owner

    async def rooms_for_owner(self, login_id: str) -> tuple[list[Property], list[Room]]:
        room_service = RoomService(session=self.repository.session)
        properties = await room_service.properties_for_owner(login_id)
        rooms = await room_service.list_for_properties([item.id for item in properties])
        return properties, rooms

    def _owner_values(self, data: OwnerWriteSchema) -> dict[str, Any]:
        values = data.model_dump(
            exclude={"credentials"}, exclude_unset=True, by_alias=False
        )
        credentials = data.credentials
        if credentials is not None:
            if credentials.password:
                values["password"] = bcrypt.hash(credentials.password)
                values["first_time"] = False
                values["password_set"] = True
            elif credentials.first_time is not None:
                values["first_time"] = credentials.first_time
        return values

    async def _owner_account(self, login_id: str) -> Optional[User]:
        """The owner User behind ``login_id``; staff and tenant ids are refused."""
        user = await self.repository.session.scalar(
            select(User).where(User.login_id == login_id)
        )
        if user is not None and user.role != UserRole.OWNER:
            raise ConflictException(f"Login id {login_id} is not an owner account")
        return user

    async def _rotate_user_password(self, owner: Owner, password_hash: str) -> None:
        # Only the linked owner account; never look users up by login id here.
        if not owner.user_id:
            return
        await self.repository.session.execute(
            update(User)
            .where(User.id == owner.user_id, User.role == UserRole.OWNER)
            .values(password=password_hash, updated_at=datetime.now())
        )
        logger.info("Rotated password for owner %s", owner.login_id)


async def provide_owner_service(
    db_session: AsyncSession,
) -> AsyncGenerator[OwnerService, None]:
    async with OwnerService.new(session=db_session) as service:
        yield service
