from typing import Optional
from pydantic import Field
from database.models.base import CamelSchema
from database.models.user import UserSchema


class LoginSchema(CamelSchema):
    login_id: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)


class LoginReturnSchema(CamelSchema):
    success: bool = True
    token: str
    user: UserSchema
    first_time: Optional[bool] = None
