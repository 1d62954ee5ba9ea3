from database.models.base import CamelSchema
from database.models.tenant import TenantSchema


class TenantListSchema(CamelSchema):
    success: bool = True
    tenants: list[TenantSchema]
