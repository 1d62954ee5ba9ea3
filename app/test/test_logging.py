from app import logging_middleware_config
from database.models.user import UserRole


def test_request_and_response_bodies_are_not_logged():
    assert "body" not in logging_middleware_config.request_log_fields
    assert "body" not in logging_middleware_config.response_log_fields


async def test_passwords_stay_out_of_logs(
    test_client, make_user, make_visit, auth_headers, capfd
):
    admin = await make_user(role=UserRole.ADMIN, login_id="admin1", password="adm1nSecret")
    visit = await make_visit(locationCode="KO", ownerName="Asha")

    approval = await test_client.post(
        f"/api/admin/approve-visit/{visit.id}", headers=auth_headers(admin)
    )
    await test_client.post(
        "/api/auth/login", json={"loginId": "admin1", "password": "adm1nSecret"}
    )
    await test_client.patch(
        f"/api/owners/{approval.json()['loginId']}",
        json={"credentials": {"password": "r0tatedPass"}},
    )

    captured = capfd.readouterr()
    output = captured.out + captured.err
    assert approval.status_code == 200
    assert approval.json()["tempPassword"] not in output
    assert "adm1nSecret" not in output
    assert "r0tatedPass" not in output
