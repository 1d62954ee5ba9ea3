from typing import Optional
from litestar import Controller, Response, get, patch, post
from litestar.di import Provide
from litestar.params import Parameter
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED
from database.models.owner import KycStatus, OwnerSchema
from database.models.property import PropertySummarySchema
from database.models.room import RoomSchema
from domains.auth.guard import STAFF_ROLES, GuardRole, login_guard, role_guard
from domains.owners.dtos import (
    KycUpdateReturnSchema,
    KycUpdateSchema,
    OwnerCreateSchema,
    OwnerListSchema,
    OwnerRoomsSchema,
    OwnerWriteSchema,
)
from domains.owners.service import OwnerService, provide_owner_service


class OwnerController(Controller):
    path = "/api/owners"
    tags = ["Owner"]
    dependencies = {"owner_service": Provide(provide_owner_service)}

    @post("/", guards=[role_guard(STAFF_ROLES)])
    async def create_owner(
        self, data: OwnerCreateSchema, owner_service: OwnerService
    ) -> Response[OwnerSchema]:
        owner, created = await owner_service.create_owner(data)
        return Response(
            content=OwnerSchema.model_validate(owner),
            status_code=HTTP_201_CREATED if created else HTTP_200_OK,
        )

    @get("/", guards=[role_guard(STAFF_ROLES)])
    async def list_owners(
        self,
        owner_service: OwnerService,
        location_code: Optional[str] = Parameter(
            None, query="locationCode", description="Area code prefix"
        ),
        kyc_status: Optional[KycStatus] = Parameter(None, query="kycStatus"),
        kyc: Optional[KycStatus] = Parameter(None, query="kyc"),
        search: Optional[str] = Parameter(
            None, description="Matches name, loginId, phone or profile name"
        ),
    ) -> OwnerListSchema:
        owners = await owner_service.search(
            location_code=location_code,
            kyc_status=kyc_status or kyc,
            search=search,
        )
        return OwnerListSchema(
            owners=[OwnerSchema.model_validate(owner) for owner in owners]
        )

    @get("/{login_id:str}", guards=[login_guard])
    async def get_owner(
        self, login_id: str, owner_service: OwnerService
    ) -> OwnerSchema:
        return OwnerSchema.model_validate(
            await owner_service.get_by_login_id(login_id)
        )

    @patch(
        "/{login_id:str}/kyc",
        guards=[role_guard([GuardRole.SUPERADMIN])],
        description="Accepts the owner login id or its id",
    )
    async def update_owner_kyc(
        self, login_id: str, data: KycUpdateSchema, owner_service: OwnerService
    ) -> KycUpdateReturnSchema:
        owner = await owner_service.update_kyc(
            login_id, status=data.status, rejection_reason=data.rejection_reason
        )
        return KycUpdateReturnSchema(
            message=f"Owner KYC {owner.kyc_status.value}",
            owner=OwnerSchema.model_validate(owner),
        )

    @patch("/{login_id:str}", no_auth=True)
    async def upsert_owner(
        self, login_id: str, data: OwnerWriteSchema, owner_service: OwnerService
    ) -> OwnerSchema:
        return OwnerSchema.model_validate(
            await owner_service.upsert_owner(login_id, data)
        )

    @get("/{login_id:str}/rooms", no_auth=True)
    async def get_owner_rooms(
        self, login_id: str, owner_service: OwnerService
    ) -> OwnerRoomsSchema:
        properties, rooms = await owner_service.rooms_for_owner(login_id)
        return OwnerRoomsSchema(
            properties=[PropertySummarySchema.model_validate(p) for p in properties],
            rooms=[RoomSchema.model_validate(room) for room in rooms],
        )
