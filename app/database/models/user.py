from __future__ import annotations
import enum
from typing import Optional
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from litestar.dto import dto_field
from database.models.base import BaseModel, BaseSchema, enum_type


class UserRole(str, enum.Enum):
    OWNER = "owner"
    TENANT = "tenant"
    AREA_MANAGER = "areamanager"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


class AccountStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class User(BaseModel):
    __tablename__ = "users"
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    password: Mapped[str] = mapped_column(
        Text, nullable=False, info=dto_field("write-only")
    )
    role: Mapped[UserRole] = mapped_column(
        enum_type(UserRole), nullable=False, default=UserRole.TENANT
    )
    login_id: Mapped[Optional[str]] = mapped_column(
        String(64), unique=True, nullable=True, index=True
    )
    location_code: Mapped[Optional[str]] = mapped_column(
        String(32), nullable=True, index=True
    )
    status: Mapped[AccountStatus] = mapped_column(
        enum_type(AccountStatus), nullable=False, default=AccountStatus.ACTIVE
    )


class UserSchema(BaseSchema):
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    role: UserRole
    login_id: Optional[str] = None
    location_code: Optional[str] = None
    status: AccountStatus


class UserSummarySchema(BaseSchema):
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
