from typing import Optional
from litestar import Controller, get
from litestar.di import Provide
from litestar.params import Parameter
from database.models.room import RoomSchema
from domains.rooms.dtos import RoomListSchema
from domains.rooms.service import RoomService, provide_room_service


class RoomController(Controller):
    path = "/api/rooms"
    tags = ["Room"]
    dependencies = {"room_service": Provide(provide_room_service)}

    @get("/", no_auth=True, description="Rooms of published properties")
    async def list_rooms(
        self,
        room_service: RoomService,
        location_code: Optional[str] = Parameter(
            None, query="locationCode", description="Area code prefix"
        ),
    ) -> RoomListSchema:
        rooms = await room_service.list_public(location_code=location_code)
        return RoomListSchema(rooms=[RoomSchema.model_validate(room) for room in rooms])
