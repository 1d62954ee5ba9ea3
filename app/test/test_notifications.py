from database.models.notification import Notification
from database.models.user import UserRole
from helpers import insert


async def test_lists_only_own_notifications(test_client, make_user, auth_headers):
    owner = await make_user(role=UserRole.OWNER)
    someone_else = await make_user(role=UserRole.OWNER)
    await insert(
        Notification(recipient_id=owner.id, type="kyc_update", message="Your KYC has been verified."),
        Notification(recipient_id=someone_else.id, type="kyc_update", message="Not yours"),
    )

    response = await test_client.get("/api/notifications", headers=auth_headers(owner))

    assert response.status_code == 200
    [notification] = response.json()["notifications"]
    assert notification["type"] == "kyc_update"
    assert notification["read"] is False


async def test_notifications_require_login(test_client):
    response = await test_client.get("/api/notifications")

    assert response.status_code == 401
