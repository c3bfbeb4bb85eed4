"""
Tests for the editor-side draft aggregate and its save cycle.
"""
import pytest

from careerpages.core.errors import DraftConflict
from careerpages.services import publish_service
from careerpages.services.draft import DraftStatus, EditorDraft
from scripts.seed_demo_company import DEMO_SLUG, JOBS, build_demo_page


@pytest.fixture
def draft(db_session, acme):
    return EditorDraft.from_bundle(publish_service.build_bundle(db_session, acme))


def test_loaded_draft_is_saved(draft):
    assert draft.status == DraftStatus.SAVED
    assert not draft.is_dirty
    assert [e.key.startswith("section-") for e in draft.sections] == [True, True, True]


def test_any_edit_marks_dirty(draft):
    draft.update_theme(primary_color="#000000")
    assert draft.is_dirty
    assert draft.theme.primary_color == "#000000"


def test_new_section_gets_its_own_group(draft):
    key = draft.add_section(title="Perks")
    entry = draft.sections[-1]
    assert entry.key == key
    assert entry.is_new
    assert entry.data.column_group == max(e.data.column_group for e in draft.sections[:-1]) + 1


def test_group_and_ungroup(draft):
    first, second = draft.add_section_group()
    group = draft.sections[-1].data.column_group
    third = draft.add_to_group(group)

    members = [e for e in draft.sections if e.data.column_group == group]
    assert [e.key for e in members] == [first, second, third]
    assert [e.data.column_index for e in members] == [0, 1, 2]

    draft.ungroup(group)
    groups = [e.data.column_group for e in draft.sections if e.key in (first, second, third)]
    assert len(set(groups)) == 3


def test_move_section_renumbers_order(draft):
    last_key = draft.sections[-1].key
    draft.move_section(len(draft.sections) - 1, 0)
    assert draft.sections[0].key == last_key
    assert [e.data.order for e in draft.sections] == [0, 1, 2]


def test_remove_unknown_key_raises(draft):
    with pytest.raises(KeyError):
        draft.remove_job("job-404")


def test_save_cycle_assigns_ids_and_clears_dirty(db_session, acme, acme_admin, draft):
    draft.add_job(title="Engineer", department="Eng", location="Remote", description="Build")
    draft.remove_section(draft.sections[0].key)

    publish_service.save_draft(db_session, acme, draft.to_bundle(), acme_admin)
    draft.mark_saved(publish_service.build_bundle(db_session, acme))

    assert not draft.is_dirty
    assert len(draft.sections) == 2
    assert draft.jobs[0].key == f"job-{draft.jobs[0].data.id}"
    assert draft.draft_version == acme.draft_version


def test_stale_draft_is_refused(db_session, acme, acme_admin, draft):
    other = EditorDraft.from_bundle(publish_service.build_bundle(db_session, acme))
    other.update_company(description="Someone else was here")
    publish_service.save_draft(db_session, acme, other.to_bundle(), acme_admin)

    draft.update_theme(font_family="Roboto")
    with pytest.raises(DraftConflict):
        publish_service.save_draft(db_session, acme, draft.to_bundle(), acme_admin)

    db_session.expire_all()
    assert acme.theme.font_family == "Inter"


def test_demo_page_is_built_and_published_through_the_draft(client, db_session):
    company = build_demo_page(db_session)
    assert company.slug == DEMO_SLUG
    assert company.published_snapshot is not None

    page = client.get(f"/{DEMO_SLUG}/careers").json()
    assert page["mode"] == "published"
    assert page["company"]["description"].startswith("Building the future")
    assert page["total_jobs"] == len(JOBS)
    assert [g["arrangement"] for g in page["groups"]] == ["stacked", "stacked", "two_columns"]
    assert [s["title"] for s in page["groups"][2]["sections"]] == ["Benefits & Perks", "Work Environment"]
