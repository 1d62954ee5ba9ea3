from __future__ import annotations
from typing import Optional
import uuid
from sqlalchemy import ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column
from database.models.base import BaseModel, BaseSchema, enum_type
from database.models.user import AccountStatus


class Tenant(BaseModel):
    __tablename__ = "tenants"
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    location_code: Mapped[Optional[str]] = mapped_column(
        String(32), nullable=True, index=True
    )
    status: Mapped[AccountStatus] = mapped_column(
        enum_type(AccountStatus), default=AccountStatus.ACTIVE, nullable=False
    )
    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    room_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("rooms.id", ondelete="SET NULL"),
        nullable=True,
    )


class TenantSchema(BaseSchema):
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    location_code: Optional[str] = None
    status: AccountStatus
    user_id: Optional[uuid.UUID] = None
    room_id: Optional[uuid.UUID] = None
