from database.models.base import CamelSchema
from database.models.room import RoomSchema


class RoomListSchema(CamelSchema):
    success: bool = True
    rooms: list[RoomSchema]
