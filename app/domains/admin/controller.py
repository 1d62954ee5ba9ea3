from typing import Optional
import uuid
from litestar import Controller, get, post
from litestar.di import Provide
from litestar.params import Parameter
from litestar.status_codes import HTTP_200_OK
from configs.settings import ApprovalPolicy, provide_approval_policy
from database.models.visit_report import VisitReportSchema, VisitStatus
from domains.auth.guard import ADMIN_ROLES, STAFF_ROLES, role_guard
from domains.stats.dtos import StatsReturnSchema
from domains.stats.service import StatsService, provide_stats_service
from domains.visits.dtos import ApprovalReturnSchema, RejectReturnSchema, VisitListSchema
from domains.visits.service import VisitReportService, provide_visit_service


class AdminController(Controller):
    path = "/api/admin"
    tags = ["Admin"]

    dependencies = {
        "visit_service": Provide(provide_visit_service),
        "stats_service": Provide(provide_stats_service),
        "approval_policy": Provide(provide_approval_policy, sync_to_thread=False),
    }

    @get("/visits", guards=[role_guard(STAFF_ROLES)])
    async def list_visits(
        self,
        visit_service: VisitReportService,
        status: Optional[VisitStatus] = Parameter(None, query="status"),
    ) -> VisitListSchema:
        visits = await visit_service.list_visits(status=status)
        return VisitListSchema(
            visits=[VisitReportSchema.model_validate(visit) for visit in visits]
        )

    @post(
        "/approve-visit/{visit_id:uuid}",
        status_code=HTTP_200_OK,
        guards=[role_guard(ADMIN_ROLES)],
    )
    async def approve_visit(
        self,
        visit_id: uuid.UUID,
        visit_service: VisitReportService,
        approval_policy: ApprovalPolicy,
    ) -> ApprovalReturnSchema:
        result = await visit_service.approve(visit_id, policy=approval_policy)
        return ApprovalReturnSchema(
            login_id=result.login_id,
            temp_password=result.temp_password,
            property_id=result.visit.property_id,
            visit=VisitReportSchema.model_validate(result.visit),
        )

    @post(
        "/reject-visit/{visit_id:uuid}",
        status_code=HTTP_200_OK,
        guards=[role_guard(ADMIN_ROLES)],
    )
    async def reject_visit(
        self, visit_id: uuid.UUID, visit_service: VisitReportService
    ) -> RejectReturnSchema:
        visit = await visit_service.reject(visit_id)
        return RejectReturnSchema(visit=VisitReportSchema.model_validate(visit))

    @get("/stats", guards=[role_guard(STAFF_ROLES)])
    async def get_stats(
        self,
        stats_service: StatsService,
        area_code: Optional[str] = Parameter(
            None, query="areaCode", description="Location code prefix"
        ),
    ) -> StatsReturnSchema:
        return StatsReturnSchema(stats=await stats_service.dashboard(area_code))
