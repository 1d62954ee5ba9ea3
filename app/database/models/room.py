from __future__ import annotations
import enum
from typing import TYPE_CHECKING, Optional
import uuid
from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from database.models.base import BaseModel, BaseSchema, enum_type
from database.models.property import PropertySummarySchema

if TYPE_CHECKING:
    from database.models.property import Property


class RoomStatus(str, enum.Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"


class Room(BaseModel):
    __tablename__ = "rooms"
    property_id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    rent: Mapped[Optional[float]] = mapped_column(
        Numeric(12, 2, asdecimal=False), nullable=True
    )
    capacity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    status: Mapped[RoomStatus] = mapped_column(
        enum_type(RoomStatus), default=RoomStatus.AVAILABLE, nullable=False
    )
    property: Mapped["Property"] = relationship(
        "Property", back_populates="rooms", lazy="joined"
    )


class RoomSchema(BaseSchema):
    property_id: uuid.UUID
    title: str
    rent: Optional[float] = None
    capacity: int
    status: RoomStatus
    property: Optional[PropertySummarySchema] = None
