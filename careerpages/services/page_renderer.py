"""
Careers page render model.

Owns the layout rules the stored data does not enforce: how sections are
grouped side by side, how a section's content is split into columns, and how
the jobs list is filtered. Works on ORM rows (preview) and on snapshot
schemas (public page) alike.
"""
import enum
from collections import defaultdict
from datetime import datetime
from typing import Iterable, List, Optional

from careerpages.db.models.section import SectionLayout
from careerpages.schemas.job import JobFilter, JobResponse
from careerpages.schemas.page import (
    CareersPageView,
    CompanyHeader,
    RenderedSection,
    SectionGroupView,
)
from careerpages.schemas.theme import ThemeData, ThemeView
from careerpages.services.job_service import filter_jobs, filter_options

COLUMN_DELIMITER = "|||"

LAYOUT_COLUMNS = {
    SectionLayout.FULL_WIDTH.value: 1,
    SectionLayout.TWO_COLUMN.value: 2,
    SectionLayout.THREE_COLUMN.value: 3,
}

GROUP_ARRANGEMENTS = {
    2: "two_columns",
    3: "three_columns",
}


def _value(v) -> str:
    return v.value if isinstance(v, enum.Enum) else v


def split_columns(layout, content: Optional[str]) -> List[str]:
    """
    Split multi-column content on ``|||``.

    Falls back to the whole content as a single column when the layout is
    full width or the content has fewer parts than the layout needs.
    """
    content = content or ""
    wanted = LAYOUT_COLUMNS.get(_value(layout), 1)
    if wanted == 1:
        return [content]

    parts = [part.strip() for part in content.split(COLUMN_DELIMITER)]
    if len(parts) < wanted:
        return [content]
    return parts[:wanted]


def group_sections(sections: Iterable) -> List[list]:
    """
    Group by ``column_group``; members ordered by ``column_index``, groups by
    the lowest ``order`` among their members.
    """
    groups = defaultdict(list)
    for section in sections:
        groups[section.column_group or 0].append(section)

    ordered = []
    for key, members in groups.items():
        members.sort(key=lambda s: (s.column_index or 0, s.order, s.id))
        ordered.append((min(s.order for s in members), key, members))

    ordered.sort(key=lambda item: (item[0], item[1]))
    return [members for _, _, members in ordered]


def arrangement_for(size: int) -> str:
    """Two or three members sit side by side; anything else stacks."""
    return GROUP_ARRANGEMENTS.get(size, "stacked")


def render_groups(sections: Iterable) -> List[SectionGroupView]:
    views = []
    for members in group_sections(sections):
        views.append(SectionGroupView(
            column_group=members[0].column_group or 0,
            arrangement=arrangement_for(len(members)),
            sections=[
                RenderedSection(
                    id=section.id,
                    type=_value(section.type),
                    title=section.title,
                    layout=_value(section.layout) or SectionLayout.FULL_WIDTH.value,
                    columns=split_columns(section.layout, section.content),
                )
                for section in members
            ],
        ))
    return views


def render_theme(theme: ThemeData) -> ThemeView:
    banners = list(theme.banner_urls) if theme.banner_urls else ([theme.banner_url] if theme.banner_url else [])
    return ThemeView(**theme.model_dump(), banners=banners)


def build_page_view(
    mode: str,
    header: CompanyHeader,
    theme: ThemeData,
    sections: Iterable,
    jobs: Iterable,
    job_filter: JobFilter,
    published_at: Optional[datetime] = None,
) -> CareersPageView:
    """Assemble the page from already visibility-filtered sections and active jobs."""
    jobs = [JobResponse.model_validate(job) for job in jobs]
    matching = filter_jobs(jobs, job_filter)
    return CareersPageView(
        mode=mode,
        company=header,
        theme=render_theme(theme),
        groups=render_groups(sections),
        jobs=matching,
        total_jobs=len(jobs),
        filter_options=filter_options(jobs),
        applied_filter=job_filter,
        no_results=len(matching) == 0,
        published_at=published_at,
    )
