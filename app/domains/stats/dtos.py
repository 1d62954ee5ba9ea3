from typing import Optional
from database.models.base import CamelSchema


class LocationCountSchema(CamelSchema):
    location_code: Optional[str] = None
    count: int


class StatsSchema(CamelSchema):
    total_properties: int
    pending_visits: int
    active_owners: int
    pending_owners: int
    active_tenants: int
    total_visits: int
    properties_by_location: list[LocationCountSchema]


class StatsReturnSchema(CamelSchema):
    success: bool = True
    stats: StatsSchema
