import datetime
import enum
from typing import Any, Optional
from litestar.plugins.sqlalchemy import base
from sqlalchemy import DateTime, Enum
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column
from litestar.dto import dto_field
from pydantic import BaseModel as _BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
import uuid


class BaseModel(base.DefaultBase):
    __abstract__ = True
    id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        nullable=False,
        unique=True,
        primary_key=True,
        info=dto_field("read-only"),
        default=uuid.uuid4,
    )
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime, default=datetime.datetime.now, info=dto_field("read-only")
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime,
        default=datetime.datetime.now,
        onupdate=datetime.datetime.now,
        info=dto_field("read-only"),
    )


def enum_type(enum_class: type[enum.Enum]) -> Enum:
    """Store an enum by its value in a plain string column."""
    return Enum(
        enum_class,
        native_enum=False,
        length=32,
        values_callable=lambda members: [member.value for member in members],
    )


class BaseSchema(_BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )
    id: Optional[uuid.UUID] = None
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None


class CamelSchema(_BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


def camel_dump(schema: _BaseModel) -> dict[str, Any]:
    return schema.model_dump(mode="json", by_alias=True)


# Keyed on our own schema classes so they win the MRO lookup over any
# plugin-registered ``pydantic.BaseModel`` encoder.
schema_type_encoders = {BaseSchema: camel_dump, CamelSchema: camel_dump}
