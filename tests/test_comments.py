"""
Tests for section comment threads and @mention extraction.
"""
from types import SimpleNamespace

from careerpages.services.comment_service import extract_mentions

ROSTER = [
    SimpleNamespace(name="Jane Doe", email="jane@acme.com"),
    SimpleNamespace(name="Jane", email="jane.short@acme.com"),
    SimpleNamespace(name=None, email="bob@acme.com"),
]


def test_multi_word_name_resolves():
    assert extract_mentions("ping @Jane Doe and @ghost123", ROSTER) == ["jane@acme.com"]


def test_longest_name_wins_and_shorter_still_matches_alone():
    assert extract_mentions("@Jane, then @Jane Doe", ROSTER) == ["jane.short@acme.com", "jane@acme.com"]


def test_email_mentions_and_dedup():
    assert extract_mentions("@bob@acme.com please, @bob@acme.com!", ROSTER) == ["bob@acme.com"]


def test_matching_is_case_sensitive():
    assert extract_mentions("hey @jane doe", ROSTER) == []


def test_name_must_end_on_word_boundary():
    assert extract_mentions("@Janet", ROSTER) == []


def test_virtual_anchor_thread(client, acme, acme_editor, admin_headers, editor_headers):
    response = client.post(
        "/api/sections/header/comments",
        json={"content": "Logo looks off, @Eddie Editor can you check?"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    comment = response.json()
    assert comment["section_id"] == "header"
    assert comment["user_name"] == "Alice Admin"
    assert comment["mentions"] == ["eddie@acme.com"]

    client.post("/api/sections/header/comments", json={"content": "On it"}, headers=editor_headers)

    thread = client.get("/api/sections/header/comments", headers=editor_headers).json()
    assert [c["content"] for c in thread] == ["Logo looks off, @Eddie Editor can you check?", "On it"]
    assert thread[1]["mentions"] is None


def test_virtual_anchor_is_scoped_per_company(client, acme, globex, admin_headers, globex_headers):
    client.post("/api/sections/footer/comments", json={"content": "acme only"}, headers=admin_headers)
    assert client.get("/api/sections/footer/comments", headers=globex_headers).json() == []


def test_section_anchor_of_other_company_is_denied(client, acme, globex, admin_headers, globex_headers):
    section_id = client.get("/api/companies/acme", headers=admin_headers).json()["sections"][0]["id"]

    response = client.post(f"/api/sections/{section_id}/comments", json={"content": "hi"}, headers=globex_headers)
    assert response.status_code == 403
    assert client.get(f"/api/sections/{section_id}/comments", headers=globex_headers).status_code == 403


def test_unknown_section_is_404(client, acme, admin_headers):
    response = client.get("/api/sections/987654/comments", headers=admin_headers)
    assert response.status_code == 404


def test_empty_comment_is_rejected(client, acme, admin_headers):
    response = client.post("/api/sections/header/comments", json={"content": "   "}, headers=admin_headers)
    assert response.status_code == 400


def test_comments_require_a_session(client, acme):
    assert client.get("/api/sections/header/comments").status_code == 401


def test_unknown_mention_stays_literal(client, acme, make_member, admin_headers):
    make_member(acme, "jane@acme.com", name="Jane Doe")
    response = client.post(
        "/api/sections/jobs-list/comments",
        json={"content": "ping @Jane Doe and @ghost123"},
        headers=admin_headers,
    )
    assert response.json()["mentions"] == ["jane@acme.com"]
    assert response.json()["content"] == "ping @Jane Doe and @ghost123"
