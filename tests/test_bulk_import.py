"""
Tests for CSV bulk job import.
"""
from datetime import datetime, timezone

import pytest

from careerpages.core.errors import ValidationError
from careerpages.db.models.job import Job, JobType, LocationType
from careerpages.services.bulk_import_service import (
    build_job_fields,
    find_invalid_rows,
    map_job_type,
    map_location_type,
    normalize_header,
    posted_at_for,
    parse_csv,
)

CSV = (
    "Title, Work Policy ,Location,Department,Employment Type,Experience Level,Salary Range\n"
    "Backend Engineer,Remote,Berlin,Engineering,Full time,Senior,EUR 80K\n"
    "\n"
    "Designer,Hybrid,Boston,Design,Part time,,\n"
)


def upload(client, headers, content, slug="acme"):
    return client.post(
        "/api/jobs/bulk-upload",
        data={"company_slug": slug},
        files={"file": ("jobs.csv", content, "text/csv")},
        headers=headers,
    )


def test_headers_are_normalized():
    assert normalize_header("  Work Policy ") == "work_policy"
    assert normalize_header("Salary\tRange") == "salary_range"


def test_blank_lines_are_skipped():
    rows = parse_csv(CSV)
    assert [r["title"] for r in rows] == ["Backend Engineer", "Designer"]


def test_empty_file_is_rejected():
    with pytest.raises(ValidationError):
        parse_csv("\n\n")


def test_invalid_rows_use_spreadsheet_numbering():
    rows = [
        {"title": "A", "work_policy": "Remote", "location": "X", "department": "D"},
        {"title": "", "work_policy": "Remote", "location": "X", "department": "D"},
        {"title": "C", "work_policy": "Remote", "location": "X"},
    ]
    assert find_invalid_rows(rows) == [3, 4]


@pytest.mark.parametrize("policy,expected", [
    ("Fully Remote", LocationType.REMOTE),
    ("hybrid (3 days)", LocationType.HYBRID),
    ("On-site", LocationType.ONSITE),
    ("", LocationType.ONSITE),
])
def test_work_policy_mapping(policy, expected):
    assert map_location_type(policy) == expected


def test_employment_type_mapping_falls_back_to_job_type():
    assert map_job_type("Part time", None) == JobType.PART_TIME
    assert map_job_type(None, "Contract") == JobType.CONTRACT
    assert map_job_type("Internship", None) == JobType.INTERNSHIP
    assert map_job_type("", "") == JobType.FULL_TIME


def test_generated_description_and_requirements():
    now = datetime(2026, 3, 1, tzinfo=timezone.utc)
    fields = build_job_fields(
        {"title": "Designer", "work_policy": "Hybrid", "location": "Boston", "department": "Design",
         "posted_days_ago": "3"},
        now,
    )
    assert fields["description"] == (
        "We are hiring a Designer to join our Design team in Boston. This is a Hybrid position."
    )
    assert fields["requirements"] == "Experience Level: Not specified. Full time position."
    assert fields["salary"] is None
    assert fields["posted_at"] == datetime(2026, 2, 26, tzinfo=timezone.utc)


def test_upload_creates_jobs(client, acme, editor_headers, db_session):
    response = upload(client, editor_headers, CSV)
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["count"] == 2
    assert body["skipped"] == 0

    jobs = db_session.query(Job).filter(Job.company_id == acme.id).order_by(Job.title).all()
    assert [(j.title, j.location_type, j.job_type, j.salary) for j in jobs] == [
        ("Backend Engineer", "REMOTE", "FULL_TIME", "EUR 80K"),
        ("Designer", "HYBRID", "PART_TIME", None),
    ]


def test_duplicates_are_skipped_not_errors(client, acme, admin_headers):
    upload(client, admin_headers, CSV)
    again = CSV + "backend engineer,Remote,BERLIN,engineering,,,\n"

    body = upload(client, admin_headers, again).json()
    assert body["count"] == 0
    assert body["skipped"] == 3
    assert "3 duplicates skipped" in body["message"]


def test_missing_required_field_rejects_whole_file(client, acme, admin_headers, db_session):
    content = (
        "title,work_policy,location,department\n"
        "Good,Remote,Berlin,Eng\n"
        "Bad,,Berlin,Eng\n"
    )
    response = upload(client, admin_headers, content)
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["rows"] == [3]
    assert "Invalid data in rows: 3" in detail["message"]
    assert db_session.query(Job).filter(Job.company_id == acme.id).count() == 0


def test_undecodable_file_is_rejected(client, acme, admin_headers):
    response = upload(client, admin_headers, b"\xff\xfe\x00bad")
    assert response.status_code == 400


def test_other_tenant_cannot_import(client, acme, globex, globex_headers):
    response = upload(client, globex_headers, CSV, slug="acme")
    assert response.status_code == 403


def test_import_requires_session(client, acme):
    response = upload(client, {}, CSV)
    assert response.status_code == 401


def test_unknown_company_is_denied_like_foreign_one(client, acme, globex, globex_headers):
    assert upload(client, globex_headers, CSV, slug="no-such-co").status_code == 403


def test_out_of_range_posted_days_ago_falls_back_to_now():
    now = datetime(2024, 1, 10, tzinfo=timezone.utc)
    assert posted_at_for({"posted_days_ago": "3"}, now) == datetime(2024, 1, 7, tzinfo=timezone.utc)
    assert posted_at_for({"posted_days_ago": "999999999999"}, now) == now
    assert posted_at_for({"posted_days_ago": "800000"}, now) == now


def test_upload_with_huge_posted_days_ago_still_imports(client, acme, admin_headers):
    content = (
        "title,work_policy,location,department,posted_days_ago\n"
        "Backend Engineer,Remote,Berlin,Engineering,999999999999\n"
    )
    response = upload(client, admin_headers, content)
    assert response.status_code == 200
    assert response.json()["count"] == 1
