"""
Tests for section grouping, column splitting and theme resolution.
"""
from types import SimpleNamespace

from careerpages.schemas.theme import ThemeData
from careerpages.services.page_renderer import (
    arrangement_for,
    group_sections,
    render_groups,
    render_theme,
    split_columns,
)


def section(id, order, group=0, index=0, layout="FULL_WIDTH", content="<p>x</p>"):
    return SimpleNamespace(
        id=id, type="CUSTOM", title=f"S{id}", content=content, layout=layout,
        order=order, column_group=group, column_index=index,
    )


def test_two_column_split_strips_parts():
    assert split_columns("TWO_COLUMN", "A ||| B") == ["A", "B"]


def test_too_few_parts_fall_back_to_full_width():
    assert split_columns("THREE_COLUMN", "A|||B") == ["A|||B"]


def test_extra_parts_are_dropped():
    assert split_columns("TWO_COLUMN", "A|||B|||C") == ["A", "B"]


def test_full_width_never_splits():
    assert split_columns("FULL_WIDTH", "A|||B") == ["A|||B"]


def test_none_content_renders_empty_column():
    assert split_columns("FULL_WIDTH", None) == [""]


def test_groups_ordered_by_lowest_member_order():
    sections = [
        section(1, order=5, group=1),
        section(2, order=0, group=2, index=1),
        section(3, order=3, group=2, index=0),
    ]
    groups = group_sections(sections)
    assert [[s.id for s in g] for g in groups] == [[3, 2], [1]]


def test_group_members_sorted_by_column_index():
    sections = [section(1, order=0, group=4, index=2), section(2, order=1, group=4, index=0)]
    assert [s.id for s in group_sections(sections)[0]] == [2, 1]


def test_arrangements():
    assert arrangement_for(1) == "stacked"
    assert arrangement_for(2) == "two_columns"
    assert arrangement_for(3) == "three_columns"
    assert arrangement_for(4) == "stacked"


def test_render_groups_carries_columns():
    views = render_groups([
        section(1, order=0, group=0, layout="TWO_COLUMN", content="left|||right"),
        section(2, order=1, group=0, index=1),
    ])
    assert len(views) == 1
    assert views[0].arrangement == "two_columns"
    assert views[0].sections[0].columns == ["left", "right"]


def test_carousel_prefers_banner_list():
    theme = ThemeData(banner_url="old.png", banner_urls=["a.png", "b.png"])
    assert render_theme(theme).banners == ["a.png", "b.png"]


def test_carousel_falls_back_to_legacy_banner():
    assert render_theme(ThemeData(banner_url="old.png")).banners == ["old.png"]
    assert render_theme(ThemeData()).banners == []
