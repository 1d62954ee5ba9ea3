from database.models.base import CamelSchema
from database.models.property import PropertySchema


class PropertyListSchema(CamelSchema):
    success: bool = True
    properties: list[PropertySchema]


class PropertyReturnSchema(CamelSchema):
    success: bool = True
    property: PropertySchema
