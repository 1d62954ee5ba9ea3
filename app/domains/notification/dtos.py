from database.models.base import CamelSchema
from database.models.notification import NotificationSchema


class NotificationListSchema(CamelSchema):
    success: bool = True
    notifications: list[NotificationSchema]
