from passlib.hash import bcrypt
from sqlalchemy import select
from database.models.notification import Notification
from database.models.owner import KycStatus, Owner
from database.models.property import Property, PropertyStatus
from database.models.room import Room
from database.models.user import User, UserRole
from helpers import fetch_all, fetch_one, insert


async def seed_owners() -> None:
    await insert(
        Owner(login_id="KO0001", name="Asha Rao", location_code="KO", phone="900001"),
        Owner(login_id="KO0102", name="Ravi", location_code="ko01", phone="900002"),
        Owner(
            login_id="KO9903",
            name="Meera",
            location_code="KO99",
            kyc_status=KycStatus.VERIFIED,
            profile={"name": "Sunrise Homes"},
        ),
        Owner(login_id="XK0104", name="Kiran", location_code="XK01", phone="900004"),
    )


async def list_owner_ids(test_client, headers, **params) -> list[str]:
    response = await test_client.get("/api/owners", params=params, headers=headers)
    assert response.status_code == 200
    return sorted(owner["loginId"] for owner in response.json()["owners"])


async def test_location_filter_is_case_insensitive_prefix(
    test_client, make_user, auth_headers
):
    headers = auth_headers(await make_user(role=UserRole.AREA_MANAGER))
    await seed_owners()

    assert await list_owner_ids(test_client, headers, locationCode="KO") == [
        "KO0001",
        "KO0102",
        "KO9903",
    ]
    assert await list_owner_ids(test_client, headers, locationCode="ko01") == ["KO0102"]
    assert await list_owner_ids(test_client, headers) == [
        "KO0001",
        "KO0102",
        "KO9903",
        "XK0104",
    ]


async def test_search_and_kyc_filters(test_client, make_user, auth_headers):
    headers = auth_headers(await make_user(role=UserRole.ADMIN))
    await seed_owners()

    assert await list_owner_ids(test_client, headers, search="asha") == ["KO0001"]
    assert await list_owner_ids(test_client, headers, search="9000") == [
        "KO0001",
        "KO0102",
        "XK0104",
    ]
    assert await list_owner_ids(test_client, headers, search="sunrise") == ["KO9903"]
    assert await list_owner_ids(test_client, headers, kycStatus="verified") == ["KO9903"]
    assert await list_owner_ids(test_client, headers, kyc="verified") == ["KO9903"]
    assert await list_owner_ids(test_client, headers, search="%") == []


async def test_owner_listing_requires_staff(test_client, make_user, auth_headers):
    tenant = await make_user(role=UserRole.TENANT)

    anonymous = await test_client.get("/api/owners")
    forbidden = await test_client.get("/api/owners", headers=auth_headers(tenant))

    assert anonymous.status_code == 401
    assert forbidden.status_code == 403


async def test_create_owner_is_idempotent(test_client, make_user, auth_headers):
    headers = auth_headers(await make_user(role=UserRole.ADMIN))
    payload = {"loginId": "KO1234", "name": "Asha", "locationCode": "KO"}

    created = await test_client.post("/api/owners", json=payload, headers=headers)
    repeated = await test_client.post(
        "/api/owners", json={**payload, "name": "Changed"}, headers=headers
    )

    assert created.status_code == 201
    assert created.json()["credentials"] == {"firstTime": False, "passwordSet": False}
    assert created.json()["kyc"]["status"] == "pending"
    assert "password" not in created.json()
    assert repeated.status_code == 200
    assert repeated.json()["name"] == "Asha"


async def test_create_owner_rejects_blank_login_id(test_client, make_user, auth_headers):
    headers = auth_headers(await make_user(role=UserRole.ADMIN))

    response = await test_client.post(
        "/api/owners", json={"loginId": "   "}, headers=headers
    )

    assert response.status_code == 400
    assert response.json()["success"] is False


async def test_get_owner_by_login_id(test_client, make_user, auth_headers):
    headers = auth_headers(await make_user(role=UserRole.OWNER))
    await seed_owners()

    found = await test_client.get("/api/owners/KO0001", headers=headers)
    missing = await test_client.get("/api/owners/NOPE", headers=headers)

    assert found.status_code == 200
    assert found.json()["name"] == "Asha Rao"
    assert missing.status_code == 404


async def test_kyc_verify_activates_owner_and_notifies(
    test_client, make_user, auth_headers
):
    superadmin = await make_user(role=UserRole.SUPERADMIN)
    owner_user = await make_user(role=UserRole.OWNER, login_id="KO0001")
    owner = Owner(login_id="KO0001", user_id=owner_user.id, location_code="KO")
    await insert(owner)

    response = await test_client.patch(
        f"/api/owners/{owner.id}/kyc",
        json={"status": "verified"},
        headers=auth_headers(superadmin),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["owner"]["kyc"]["status"] == "verified"
    assert body["owner"]["kyc"]["verifiedAt"] is not None
    assert body["owner"]["isActive"] is True
    notification = await fetch_one(select(Notification))
    assert notification.recipient_id == owner_user.id
    assert notification.type == "kyc_update"


async def test_kyc_reject_by_login_id_keeps_reason(test_client, make_user, auth_headers):
    superadmin = await make_user(role=UserRole.SUPERADMIN)
    await insert(Owner(login_id="KO0001", is_active=True))

    response = await test_client.patch(
        "/api/owners/KO0001/kyc",
        json={"status": "rejected", "rejectionReason": "Blurry ID"},
        headers=auth_headers(superadmin),
    )

    assert response.status_code == 200
    owner = await fetch_one(select(Owner))
    assert owner.kyc_status == KycStatus.REJECTED
    assert owner.kyc_rejection_reason == "Blurry ID"
    assert owner.is_active is False


async def test_kyc_rejects_unknown_status_and_non_superadmins(
    test_client, make_user, auth_headers
):
    superadmin = await make_user(role=UserRole.SUPERADMIN)
    admin = await make_user(role=UserRole.ADMIN)
    await insert(Owner(login_id="KO0001"))

    invalid = await test_client.patch(
        "/api/owners/KO0001/kyc",
        json={"status": "pending"},
        headers=auth_headers(superadmin),
    )
    forbidden = await test_client.patch(
        "/api/owners/KO0001/kyc",
        json={"status": "verified"},
        headers=auth_headers(admin),
    )
    missing = await test_client.patch(
        "/api/owners/KO9999/kyc",
        json={"status": "verified"},
        headers=auth_headers(superadmin),
    )

    assert invalid.status_code == 400
    assert invalid.json()["message"] == "Invalid status"
    assert forbidden.status_code == 403
    assert missing.status_code == 404
    owner = await fetch_one(select(Owner))
    assert owner.kyc_status == KycStatus.PENDING


async def test_upsert_sets_password_and_rotates_user_login(
    test_client, make_user
):
    owner_user = await make_user(role=UserRole.OWNER, login_id="KO0001", password="temp1234")
    await insert(
        Owner(login_id="KO0001", user_id=owner_user.id, first_time=True, password="x")
    )

    response = await test_client.patch(
        "/api/owners/KO0001",
        json={"name": "Asha", "credentials": {"password": "n3wpass!"}},
    )

    assert response.status_code == 200
    assert response.json()["credentials"] == {"firstTime": False, "passwordSet": True}
    user = await fetch_one(select(User).where(User.login_id == "KO0001"))
    assert bcrypt.verify("n3wpass!", user.password)
    login = await test_client.post(
        "/api/auth/login", json={"loginId": "KO0001", "password": "n3wpass!"}
    )
    assert login.status_code == 200
    assert login.json()["firstTime"] is False


async def test_upsert_creates_missing_owner(test_client):
    response = await test_client.patch(
        "/api/owners/KO7777", json={"name": "New", "profile": {"name": "New Homes"}}
    )

    assert response.status_code == 200
    owner = await fetch_one(select(Owner))
    assert owner.login_id == "KO7777"
    assert owner.profile == {"name": "New Homes"}


async def test_owner_rooms(test_client):
    property = Property(
        title="Green PG", owner_login_id="KO0001", status=PropertyStatus.ACTIVE
    )
    other = Property(title="Elsewhere", owner_login_id="KO0002")
    await insert(property, other)
    await insert(
        Room(property_id=property.id, title="Room 1", rent=5000),
        Room(property_id=other.id, title="Room 2", rent=6000),
    )

    response = await test_client.get("/api/owners/KO0001/rooms")

    assert response.status_code == 200
    body = response.json()
    assert [p["title"] for p in body["properties"]] == ["Green PG"]
    assert [r["title"] for r in body["rooms"]] == ["Room 1"]
    assert body["rooms"][0]["property"]["title"] == "Green PG"


async def test_upsert_cannot_take_over_staff_login(test_client, make_user):
    await make_user(role=UserRole.SUPERADMIN, login_id="superadmin", password="realpass1")

    response = await test_client.patch(
        "/api/owners/superadmin", json={"credentials": {"password": "pwned123"}}
    )
    stolen = await test_client.post(
        "/api/auth/login", json={"loginId": "superadmin", "password": "pwned123"}
    )
    genuine = await test_client.post(
        "/api/auth/login", json={"loginId": "superadmin", "password": "realpass1"}
    )

    assert response.status_code == 409
    assert stolen.status_code == 401
    assert genuine.status_code == 200
    assert await fetch_all(select(Owner)) == []


async def test_create_owner_refuses_staff_login_id(test_client, make_user, auth_headers):
    admin = await make_user(role=UserRole.ADMIN, login_id="admin1")

    response = await test_client.post(
        "/api/owners", json={"loginId": "admin1"}, headers=auth_headers(admin)
    )

    assert response.status_code == 409
    assert await fetch_all(select(Owner)) == []


async def test_unlinked_owner_password_does_not_touch_users(test_client, make_user):
    await make_user(role=UserRole.ADMIN, login_id="KO0001", password="adminpass")
    await insert(Owner(login_id="KO0001"))

    response = await test_client.patch(
        "/api/owners/KO0001", json={"credentials": {"password": "n3wpass!"}}
    )

    assert response.status_code == 200
    user = await fetch_one(select(User).where(User.login_id == "KO0001"))
    assert bcrypt.verify("adminpass", user.password)
