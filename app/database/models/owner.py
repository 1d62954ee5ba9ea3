from __future__ import annotations
import enum
from datetime import datetime
from typing import Any, Optional
import uuid
from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column
from litestar.dto import dto_field
from database.models.base import BaseModel, BaseSchema, CamelSchema, enum_type


class KycStatus(str, enum.Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class Owner(BaseModel):
    __tablename__ = "owners"
    login_id: Mapped[str] = mapped_column(
        String(64), unique=True, nullable=False, index=True
    )
    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location_code: Mapped[Optional[str]] = mapped_column(
        String(32), nullable=True, index=True
    )
    profile: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON, nullable=True)

    # credentials
    password: Mapped[Optional[str]] = mapped_column(
        Text, nullable=True, info=dto_field("private")
    )
    first_time: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    password_set: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # kyc
    kyc_status: Mapped[KycStatus] = mapped_column(
        enum_type(KycStatus), default=KycStatus.PENDING, nullable=False, index=True
    )
    kyc_verified_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True
    )
    kyc_rejection_reason: Mapped[Optional[str]] = mapped_column(
        String(500), nullable=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    @property
    def credentials(self) -> dict[str, Any]:
        return {"first_time": self.first_time, "password_set": self.password_set}

    @property
    def kyc(self) -> dict[str, Any]:
        return {
            "status": self.kyc_status,
            "verified_at": self.kyc_verified_at,
            "rejection_reason": self.kyc_rejection_reason,
        }


class CredentialsSchema(CamelSchema):
    first_time: bool = False
    password_set: bool = False


class KycSchema(CamelSchema):
    status: KycStatus = KycStatus.PENDING
    verified_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None


class OwnerSchema(BaseSchema):
    login_id: str
    user_id: Optional[uuid.UUID] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    location_code: Optional[str] = None
    profile: Optional[dict[str, Any]] = None
    credentials: CredentialsSchema
    kyc: KycSchema
    is_active: bool = False
