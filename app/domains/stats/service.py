"""
Dashboard counters for the admin panel.

Every figure is its own query, so the numbers are individually correct but
not a consistent snapshot of one moment.
"""
from typing import Any, Optional
from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from database.filters import combine, prefix_match
from database.models.owner import KycStatus, Owner
from database.models.property import Property
from database.models.tenant import Tenant
from database.models.user import AccountStatus
from database.models.visit_report import VisitReport, VisitStatus
from domains.stats.dtos import LocationCountSchema, StatsSchema


class StatsService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _count(self, model: Any, *conditions: Optional[ColumnElement[bool]]) -> int:
        query = select(func.count()).select_from(model).where(*combine(*conditions))
        return (await self.session.scalar(query)) or 0

    async def properties_by_location(
        self, area_code: Optional[str] = None
    ) -> list[LocationCountSchema]:
        query = (
            select(Property.location_code, func.count(Property.id).label("property_count"))
            .where(*combine(prefix_match(Property.location_code, area_code)))
            .group_by(Property.location_code)
            .order_by(Property.location_code)
        )
        result = (await self.session.execute(query)).fetchall()
        return [
            LocationCountSchema(location_code=row[0], count=row[1]) for row in result
        ]

    async def dashboard(self, area_code: Optional[str] = None) -> StatsSchema:
        visit_area = prefix_match(
            VisitReport.property_info["locationCode"].as_string(), area_code
        )
        return StatsSchema(
            total_properties=await self._count(
                Property, prefix_match(Property.location_code, area_code)
            ),
            pending_visits=await self._count(
                VisitReport, visit_area, VisitReport.status == VisitStatus.SUBMITTED
            ),
            active_owners=await self._count(
                Owner,
                prefix_match(Owner.location_code, area_code),
                Owner.kyc_status == KycStatus.VERIFIED,
            ),
            pending_owners=await self._count(
                Owner,
                prefix_match(Owner.location_code, area_code),
                Owner.kyc_status == KycStatus.PENDING,
            ),
            active_tenants=await self._count(
                Tenant,
                prefix_match(Tenant.location_code, area_code),
                Tenant.status == AccountStatus.ACTIVE,
            ),
            total_visits=await self._count(VisitReport, visit_area),
            properties_by_location=await self.properties_by_location(area_code),
        )


async def provide_stats_service(db_session: AsyncSession) -> StatsService:
    return StatsService(session=db_session)
