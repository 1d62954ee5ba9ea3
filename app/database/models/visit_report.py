from __future__ import annotations
import enum
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional
import uuid
from sqlalchemy import JSON, DateTime, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from database.models.base import BaseModel, BaseSchema, CamelSchema, enum_type
from database.models.user import UserSummarySchema

if TYPE_CHECKING:
    from database.models.user import User


class VisitStatus(str, enum.Enum):
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"


class VisitReport(BaseModel):
    __tablename__ = "visit_reports"
    property_info: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=dict
    )
    status: Mapped[VisitStatus] = mapped_column(
        enum_type(VisitStatus),
        nullable=False,
        default=VisitStatus.SUBMITTED,
        index=True,
    )
    area_manager_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    area_manager: Mapped[Optional["User"]] = relationship("User", lazy="joined")
    generated_login_id: Mapped[Optional[str]] = mapped_column(
        String(64), nullable=True
    )
    # Returned once to the approving admin; the owner rotates it on first login.
    generated_temp_password: Mapped[Optional[str]] = mapped_column(
        String(64), nullable=True
    )
    property_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("properties.id", ondelete="SET NULL"),
        nullable=True,
    )
    reviewed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    @property
    def location_code(self) -> Optional[str]:
        return (self.property_info or {}).get("locationCode")

    @property
    def generated_credentials(self) -> Optional[dict[str, str]]:
        if not self.generated_login_id:
            return None
        return {
            "login_id": self.generated_login_id,
            "temp_password": self.generated_temp_password,
        }


class GeneratedCredentialsSchema(CamelSchema):
    login_id: str
    temp_password: Optional[str] = None


class VisitReportSchema(BaseSchema):
    property_info: dict[str, Any]
    status: VisitStatus
    area_manager_id: Optional[uuid.UUID] = None
    area_manager: Optional[UserSummarySchema] = None
    generated_credentials: Optional[GeneratedCredentialsSchema] = None
    property_id: Optional[uuid.UUID] = None
    reviewed_at: Optional[datetime] = None
