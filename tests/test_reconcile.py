"""
Tests for create/update/delete-by-absence reconciliation of sections and jobs.
"""
from careerpages.db.models.job import Job
from careerpages.db.models.section import PageSection


def load_bundle(client, headers):
    return client.get("/api/companies/acme", headers=headers).json()


def test_resubmitting_the_same_list_is_idempotent(client, acme, admin_headers, db_session):
    bundle = load_bundle(client, admin_headers)
    payload = {"sections": bundle["sections"]}

    first = client.put("/api/companies/acme", json=payload, headers=admin_headers).json()
    second = client.put("/api/companies/acme", json={"sections": first["sections"]}, headers=admin_headers).json()

    ids = lambda b: [s["id"] for s in b["sections"]]
    assert ids(first) == ids(bundle) == ids(second)
    assert db_session.query(PageSection).filter(PageSection.company_id == acme.id).count() == 3


def test_absent_ids_are_deleted_and_new_entries_created(client, acme, admin_headers):
    bundle = load_bundle(client, admin_headers)
    kept = bundle["sections"][0]
    kept["title"] = "Who We Are"
    new = {"type": "VALUES", "title": "Values", "content": "<p>Be kind</p>", "order": 5, "column_group": 9}

    saved = client.put("/api/companies/acme", json={"sections": [kept, new]}, headers=admin_headers).json()

    titles = [s["title"] for s in saved["sections"]]
    assert titles == ["Who We Are", "Values"]
    assert saved["sections"][0]["id"] == kept["id"]
    assert saved["sections"][1]["layout"] == "FULL_WIDTH"
    assert saved["sections"][1]["column_index"] == 0


def test_unknown_section_id_is_rejected(client, acme, admin_headers):
    bundle = load_bundle(client, admin_headers)
    bogus = dict(bundle["sections"][0], id=99999)
    response = client.put("/api/companies/acme", json={"sections": [bogus]}, headers=admin_headers)
    assert response.status_code == 400


def test_other_tenants_section_cannot_be_overwritten(client, acme, globex, admin_headers, globex_headers, db_session):
    theirs = client.get("/api/companies/globex", headers=globex_headers).json()["sections"][0]
    response = client.put(
        "/api/companies/acme",
        json={"sections": [dict(theirs, title="Stolen")]},
        headers=admin_headers,
    )
    assert response.status_code == 400

    db_session.expire_all()
    assert db_session.get(PageSection, theirs["id"]).title == theirs["title"]


def test_failed_save_leaves_draft_untouched(client, acme, admin_headers, db_session):
    bundle = load_bundle(client, admin_headers)
    job = {"title": "Engineer", "department": "Eng", "location": "Remote", "description": "x"}
    bogus_section = dict(bundle["sections"][0], id=424242)

    response = client.put(
        "/api/companies/acme",
        json={"jobs": [job], "sections": [bogus_section]},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert db_session.query(Job).filter(Job.company_id == acme.id).count() == 0


def test_job_defaults_on_create(client, acme, admin_headers):
    job = {"title": "Engineer", "department": "Eng", "location": "Remote", "requirements": None}
    saved = client.put("/api/companies/acme", json={"jobs": [job]}, headers=admin_headers).json()

    created = saved["jobs"][0]
    assert created["requirements"] == ""
    assert created["description"] == ""
    assert created["is_active"] is True
    assert created["location_type"] == "ONSITE"
