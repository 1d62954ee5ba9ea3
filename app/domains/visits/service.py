"""
Review of field visit reports.

Approving a report turns it into a live owner account: a User to log in
with, an Owner profile awaiting KYC and an inactive Property. The status
change is a single conditional UPDATE, so two admins approving the same
report at once cannot both get past it, and every write happens in the
request's transaction, so a failure part way through leaves nothing behind.
"""
from collections.abc import AsyncGenerator
from dataclasses import dataclass
from datetime import datetime
import logging
from typing import Optional
import uuid
from advanced_alchemy.filters import OrderBy
from advanced_alchemy.repository import SQLAlchemyAsyncRepository
from advanced_alchemy.service import SQLAlchemyAsyncRepositoryService
from litestar.exceptions import NotFoundException
from passlib.hash import bcrypt
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from configs.settings import ApprovalPolicy, approval_policy
from database.filters import combine, exact_match
from database.models.owner import KycStatus, Owner
from database.models.user import AccountStatus, User, UserRole
from database.models.visit_report import VisitReport, VisitStatus
from domains.auth.repository import UserRepository
from domains.owners.service import OwnerService
from domains.properties.service import PropertyService
from domains.visits.credentials import LoginIdGenerator, generate_temp_password
from utils.exceptions import ConflictException

logger = logging.getLogger(__name__)


@dataclass
class ApprovalResult:
    login_id: str
    temp_password: str
    visit: VisitReport


class VisitReportRepository(SQLAlchemyAsyncRepository[VisitReport]):
    model_type = VisitReport


class VisitReportService(SQLAlchemyAsyncRepositoryService[VisitReport]):
    repository_type = VisitReportRepository
    policy: ApprovalPolicy = approval_policy

    async def list_visits(self, status: Optional[VisitStatus] = None) -> list[VisitReport]:
        return list(
            await self.list(
                *combine(exact_match(VisitReport.status, status)),
                OrderBy(field_name="created_at", sort_order="desc"),
            )
        )

    async def _transition(
        self, visit_id: uuid.UUID, target: VisitStatus
    ) -> VisitReport:
        """Move a submitted report to ``target`` or explain why it cannot move."""
        result = await self.repository.session.execute(
            update(VisitReport)
            .where(
                VisitReport.id == visit_id,
                VisitReport.status == VisitStatus.SUBMITTED,
            )
            .values(status=target, reviewed_at=datetime.now(), updated_at=datetime.now())
            .execution_options(synchronize_session=False)
        )
        visit = await self.get_one_or_none(VisitReport.id == visit_id)
        if visit is None:
            raise NotFoundException("Visit report not found")
        await self.repository.session.refresh(visit)
        if result.rowcount == 0:
            if target == VisitStatus.REJECTED and visit.status == VisitStatus.REJECTED:
                return visit
            raise ConflictException(f"Visit report is already {visit.status.value}")
        return visit

    async def approve(
        self, visit_id: uuid.UUID, policy: Optional[ApprovalPolicy] = None
    ) -> ApprovalResult:
        policy = policy or self.policy
        session = self.repository.session
        visit = await self._transition(visit_id, VisitStatus.APPROVED)
        info = visit.property_info or {}
        location_code = info.get("locationCode")

        login_id = await LoginIdGenerator(session, policy).generate(location_code)
        temp_password = generate_temp_password(policy.temp_password_length)
        password_hash = bcrypt.hash(temp_password)

        user = await UserRepository(session=session).add(
            User(
                name=info.get("ownerName") or policy.default_owner_name,
                phone=info.get("contactPhone") or policy.default_owner_phone,
                email=info.get("ownerEmail"),
                password=password_hash,
                role=UserRole.OWNER,
                login_id=login_id,
                location_code=location_code,
                status=AccountStatus.ACTIVE,
            )
        )
        await OwnerService(session=session).create(
            Owner(
                login_id=login_id,
                user_id=user.id,
                name=info.get("ownerName"),
                email=info.get("ownerEmail"),
                phone=info.get("contactPhone"),
                address=info.get("address"),
                location_code=location_code,
                password=password_hash,
                first_time=True,
                password_set=False,
                kyc_status=KycStatus.PENDING,
                is_active=False,
            )
        )
        property = await PropertyService(session=session).create_for_owner(
            user,
            title=info.get("name"),
            address=info.get("address"),
            location_code=location_code,
        )

        visit.generated_login_id = login_id
        visit.generated_temp_password = temp_password
        visit.property_id = property.id
        visit = await self.update(visit, auto_refresh=True)
        logger.info(
            "Approved visit %s as owner %s with property %s",
            visit_id,
            login_id,
            property.id,
        )
        return ApprovalResult(login_id=login_id, temp_password=temp_password, visit=visit)

    async def reject(self, visit_id: uuid.UUID) -> VisitReport:
        visit = await self._transition(visit_id, VisitStatus.REJECTED)
        logger.info("Rejected visit %s", visit_id)
        return visit


async def provide_visit_service(
    db_session: AsyncSession,
) -> AsyncGenerator[VisitReportService, None]:
    async with VisitReportService.new(session=db_session) as service:
        yield service
