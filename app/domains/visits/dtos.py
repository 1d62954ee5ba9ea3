import uuid
from typing import Optional
from database.models.base import CamelSchema
from database.models.visit_report import VisitReportSchema


class ApprovalReturnSchema(CamelSchema):
    success: bool = True
    message: str = "Approved"
    login_id: str
    temp_password: str
    property_id: Optional[uuid.UUID] = None
    visit: VisitReportSchema


class RejectReturnSchema(CamelSchema):
    success: bool = True
    message: str = "Rejected"
    visit: VisitReportSchema


class VisitListSchema(CamelSchema):
    success: bool = True
    visits: list[VisitReportSchema]
