"""
Tests for company membership management.
"""
from careerpages.db.models.user import User, UserRole


def test_admin_lists_members(client, acme, acme_editor, admin_headers):
    response = client.get("/api/companies/acme/users", headers=admin_headers)
    assert response.status_code == 200
    assert [u["email"] for u in response.json()["users"]] == ["alice@acme.com", "eddie@acme.com"]


def test_editor_cannot_manage_members(client, acme, editor_headers):
    assert client.get("/api/companies/acme/users", headers=editor_headers).status_code == 403
    response = client.post(
        "/api/companies/acme/users",
        json={"email": "new@acme.com", "password": "testpass123"},
        headers=editor_headers,
    )
    assert response.status_code == 403


def test_team_roster_is_visible_to_editors(client, acme, acme_editor, editor_headers):
    response = client.get("/api/companies/acme/team", headers=editor_headers)
    assert response.status_code == 200
    assert {m["email"] for m in response.json()} == {"alice@acme.com", "eddie@acme.com"}


def test_add_member(client, acme, admin_headers, db_session):
    response = client.post(
        "/api/companies/acme/users",
        json={"email": "New@Acme.com", "password": "testpass123", "name": "Newbie"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    assert response.json()["role"] == "EDITOR"

    user = db_session.query(User).filter(User.email == "new@acme.com").one()
    assert user.company_id == acme.id


def test_add_member_with_taken_email(client, acme, globex, admin_headers):
    response = client.post(
        "/api/companies/acme/users",
        json={"email": "gina@globex.com", "password": "testpass123"},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "User with this email already exists"


def test_change_role(client, acme, acme_editor, admin_headers):
    response = client.patch(
        f"/api/companies/acme/users/{acme_editor.id}",
        json={"role": "ADMIN"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["role"] == "ADMIN"


def test_last_admin_cannot_be_demoted(client, acme, acme_admin, admin_headers):
    response = client.patch(
        f"/api/companies/acme/users/{acme_admin.id}",
        json={"role": "EDITOR"},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_admin_may_step_down_when_another_admin_exists(client, acme, acme_admin, make_member, admin_headers):
    make_member(acme, "second@acme.com", role=UserRole.ADMIN)
    response = client.patch(
        f"/api/companies/acme/users/{acme_admin.id}",
        json={"role": "EDITOR"},
        headers=admin_headers,
    )
    assert response.status_code == 200


def test_admin_cannot_remove_self(client, acme, acme_admin, admin_headers, db_session):
    response = client.delete(f"/api/companies/acme/users/{acme_admin.id}", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "You cannot remove yourself"
    db_session.expire_all()
    assert db_session.get(User, acme_admin.id) is not None


def test_remove_member(client, acme, acme_editor, admin_headers, db_session):
    response = client.delete(f"/api/companies/acme/users/{acme_editor.id}", headers=admin_headers)
    assert response.status_code == 200
    db_session.expire_all()
    assert db_session.query(User).filter(User.email == "eddie@acme.com").first() is None


def test_member_of_other_company_is_not_found(client, acme, globex, globex_admin, admin_headers):
    response = client.delete(f"/api/companies/acme/users/{globex_admin.id}", headers=admin_headers)
    assert response.status_code == 404
