from typing import Optional
from litestar import Controller, get
from litestar.di import Provide
from litestar.params import Parameter
from database.models.tenant import TenantSchema
from database.models.user import AccountStatus
from domains.auth.guard import STAFF_ROLES, role_guard
from domains.tenants.dtos import TenantListSchema
from domains.tenants.service import TenantService, provide_tenant_service


class TenantController(Controller):
    path = "/api/tenants"
    tags = ["Tenant"]
    dependencies = {"tenant_service": Provide(provide_tenant_service)}

    @get("/", guards=[role_guard(STAFF_ROLES)])
    async def list_tenants(
        self,
        tenant_service: TenantService,
        location_code: Optional[str] = Parameter(None, query="locationCode"),
        status: Optional[AccountStatus] = Parameter(None, query="status"),
        search: Optional[str] = Parameter(None, query="search"),
    ) -> TenantListSchema:
        tenants = await tenant_service.search(
            location_code=location_code, status=status, search=search
        )
        return TenantListSchema(
            tenants=[TenantSchema.model_validate(tenant) for tenant in tenants]
        )
