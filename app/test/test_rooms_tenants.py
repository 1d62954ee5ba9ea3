from database.models.property import Property, PropertyStatus
from database.models.room import Room
from database.models.tenant import Tenant
from database.models.user import AccountStatus, UserRole
from helpers import insert


async def test_public_rooms_only_from_published_properties(test_client):
    live = Property(
        title="Live", location_code="KO01", status=PropertyStatus.ACTIVE, is_published=True
    )
    elsewhere = Property(
        title="Far", location_code="PU01", status=PropertyStatus.ACTIVE, is_published=True
    )
    draft = Property(title="Draft", location_code="KO01")
    await insert(live, elsewhere, draft)
    await insert(
        Room(property_id=live.id, title="Live room"),
        Room(property_id=elsewhere.id, title="Far room"),
        Room(property_id=draft.id, title="Draft room"),
    )

    everything = await test_client.get("/api/rooms")
    kolkata = await test_client.get("/api/rooms", params={"locationCode": "ko"})

    assert everything.status_code == 200
    assert sorted(r["title"] for r in everything.json()["rooms"]) == [
        "Far room",
        "Live room",
    ]
    assert [r["title"] for r in kolkata.json()["rooms"]] == ["Live room"]


async def test_tenant_filters(test_client, make_user, auth_headers):
    headers = auth_headers(await make_user(role=UserRole.AREA_MANAGER))
    await insert(
        Tenant(name="Priya", phone="8000001", location_code="KO01"),
        Tenant(name="Arjun", phone="8000002", location_code="KO02", status=AccountStatus.INACTIVE),
        Tenant(name="Neha", email="neha@example.com", location_code="PU01"),
    )

    by_area = await test_client.get(
        "/api/tenants", params={"locationCode": "KO"}, headers=headers
    )
    active = await test_client.get(
        "/api/tenants", params={"locationCode": "KO", "status": "active"}, headers=headers
    )
    searched = await test_client.get(
        "/api/tenants", params={"search": "NEHA@"}, headers=headers
    )

    assert sorted(t["name"] for t in by_area.json()["tenants"]) == ["Arjun", "Priya"]
    assert [t["name"] for t in active.json()["tenants"]] == ["Priya"]
    assert [t["name"] for t in searched.json()["tenants"]] == ["Neha"]


async def test_tenants_hidden_from_owners(test_client, make_user, auth_headers):
    owner = await make_user(role=UserRole.OWNER)

    response = await test_client.get("/api/tenants", headers=auth_headers(owner))

    assert response.status_code == 403
