from typing import Any, Optional
from pydantic import Field, field_validator
from database.models.base import CamelSchema
from database.models.owner import OwnerSchema
from database.models.property import PropertySummarySchema
from database.models.room import RoomSchema


class CredentialsInput(CamelSchema):
    password: Optional[str] = Field(None, min_length=4, max_length=128)
    first_time: Optional[bool] = None


class OwnerWriteSchema(CamelSchema):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    location_code: Optional[str] = None
    profile: Optional[dict[str, Any]] = None
    credentials: Optional[CredentialsInput] = None


class OwnerCreateSchema(OwnerWriteSchema):
    login_id: str = Field(..., min_length=1, max_length=64)

    @field_validator("login_id")
    def validate_login_id(cls, v):
        if not v.strip():
            raise ValueError("loginId cannot be blank")
        return v.strip()


class KycUpdateSchema(CamelSchema):
    status: str
    rejection_reason: Optional[str] = Field(None, max_length=500)


class OwnerListSchema(CamelSchema):
    success: bool = True
    owners: list[OwnerSchema]


class KycUpdateReturnSchema(CamelSchema):
    success: bool = True
    message: str
    owner: OwnerSchema


class OwnerRoomsSchema(CamelSchema):
    properties: list[PropertySummarySchema]
    rooms: list[RoomSchema]
