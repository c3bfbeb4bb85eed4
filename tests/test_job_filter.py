"""
Tests for the public job filter and the dynamic filter options.
"""
from careerpages.schemas.job import JobFilter, JobResponse
from careerpages.services.job_service import filter_jobs, filter_options


def job(id, title, location_type="ONSITE", job_type="FULL_TIME"):
    return JobResponse(
        id=id, title=title, department="Eng", location="Berlin",
        location_type=location_type, job_type=job_type,
    )


JOBS = [
    job(1, "Senior Engineer", "REMOTE", "FULL_TIME"),
    job(2, "Product Designer", "HYBRID", "PART_TIME"),
    job(3, "Engineering Manager", "REMOTE", "CONTRACT"),
]


def test_default_filter_matches_everything():
    assert [j.id for j in filter_jobs(JOBS, JobFilter())] == [1, 2, 3]


def test_title_search_is_case_insensitive_substring():
    assert [j.id for j in filter_jobs(JOBS, JobFilter(q="ENGINEER"))] == [1, 3]


def test_predicates_combine_with_and():
    result = filter_jobs(JOBS, JobFilter(q="engineer", location_type="REMOTE", job_type="CONTRACT"))
    assert [j.id for j in result] == [3]


def test_no_match_is_empty_list():
    assert filter_jobs(JOBS, JobFilter(job_type="INTERNSHIP")) == []


def test_filter_options_are_distinct_in_first_seen_order():
    options = filter_options(JOBS)
    assert [o.value for o in options.location_types] == ["REMOTE", "HYBRID"]
    assert [o.value for o in options.job_types] == ["FULL_TIME", "PART_TIME", "CONTRACT"]
