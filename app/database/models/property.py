from __future__ import annotations
import enum
from typing import TYPE_CHECKING, Optional
import uuid
from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from database.models.base import BaseModel, BaseSchema, enum_type
from database.models.user import UserSummarySchema

if TYPE_CHECKING:
    from database.models.room import Room
    from database.models.user import User


class PropertyStatus(str, enum.Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"


class Property(BaseModel):
    __tablename__ = "properties"
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location_code: Mapped[Optional[str]] = mapped_column(
        String(32), nullable=True, index=True
    )
    status: Mapped[PropertyStatus] = mapped_column(
        enum_type(PropertyStatus),
        nullable=False,
        default=PropertyStatus.INACTIVE,
    )
    is_published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )
    owner_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    # Copy of the owner's login id, kept for lookups without a join.
    owner_login_id: Mapped[Optional[str]] = mapped_column(
        String(64), nullable=True, index=True
    )
    owner: Mapped[Optional["User"]] = relationship("User", lazy="joined")
    rooms: Mapped[list["Room"]] = relationship(
        "Room", back_populates="property", lazy="raise", passive_deletes=True
    )

    def assign_owner(self, user: "User") -> None:
        """Point the property at ``user``; the only writer of both owner fields."""
        self.owner = user
        self.owner_id = user.id
        self.owner_login_id = user.login_id


class PropertySchema(BaseSchema):
    title: Optional[str] = None
    address: Optional[str] = None
    location_code: Optional[str] = None
    status: PropertyStatus
    is_published: bool
    owner_id: Optional[uuid.UUID] = None
    owner_login_id: Optional[str] = None
    owner: Optional[UserSummarySchema] = None


class PropertySummarySchema(BaseSchema):
    title: Optional[str] = None
    owner_login_id: Optional[str] = None
