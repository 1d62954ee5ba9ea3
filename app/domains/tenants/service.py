from collections.abc import AsyncGenerator
from typing import Optional
from advanced_alchemy.filters import OrderBy
from advanced_alchemy.repository import SQLAlchemyAsyncRepository
from advanced_alchemy.service import SQLAlchemyAsyncRepositoryService
from sqlalchemy.ext.asyncio import AsyncSession
from database.filters import combine, exact_match, prefix_match, search_any
from database.models.tenant import Tenant
from database.models.user import AccountStatus


class TenantRepository(SQLAlchemyAsyncRepository[Tenant]):
    model_type = Tenant


class TenantService(SQLAlchemyAsyncRepositoryService[Tenant]):
    repository_type = TenantRepository

    async def search(
        self,
        location_code: Optional[str] = None,
        status: Optional[AccountStatus] = None,
        search: Optional[str] = None,
    ) -> list[Tenant]:
        filters = combine(
            prefix_match(Tenant.location_code, location_code),
            exact_match(Tenant.status, status),
            search_any(search, Tenant.name, Tenant.phone, Tenant.email),
        )
        return list(
            await self.list(
                *filters, OrderBy(field_name="created_at", sort_order="desc")
            )
        )


async def provide_tenant_service(
    db_session: AsyncSession,
) -> AsyncGenerator[TenantService, None]:
    async with TenantService.new(session=db_session) as service:
        yield service
