import uuid
from litestar import Controller, post, get
from litestar.di import Provide
from litestar.status_codes import HTTP_200_OK
from database.models.property import PropertySchema
from domains.auth.guard import GuardRole, login_guard, role_guard
from domains.properties.dtos import PropertyListSchema, PropertyReturnSchema
from domains.properties.service import PropertyService, provide_property_service


class PropertyController(Controller):
    path = "/api/properties"
    tags = ["Property"]

    dependencies = {"property_service": Provide(provide_property_service)}

    @get("/", guards=[login_guard], description="All properties, newest first")
    async def get_properties(
        self, property_service: PropertyService
    ) -> PropertyListSchema:
        properties = await property_service.list_with_owner()
        return PropertyListSchema(
            properties=[PropertySchema.model_validate(item) for item in properties]
        )

    @post(
        "/{property_id:uuid}/publish",
        status_code=HTTP_200_OK,
        guards=[role_guard([GuardRole.SUPERADMIN])],
    )
    async def publish_property(
        self, property_id: uuid.UUID, property_service: PropertyService
    ) -> PropertyReturnSchema:
        property = await property_service.publish(property_id)
        return PropertyReturnSchema(property=PropertySchema.model_validate(property))
