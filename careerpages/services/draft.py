"""
Editor-side draft aggregate.

Holds the whole page being edited (company info, theme, sections, jobs) and
tracks whether it differs from what was last saved. New entries carry no
database id until the server returns the saved bundle; they are addressed by
a local key in the meantime.
"""
import itertools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from careerpages.db.models.job import JobType, LocationType
from careerpages.db.models.section import SectionLayout, SectionType
from careerpages.schemas.company import CompanyBundleResponse, CompanyInfoUpdate, DraftBundle
from careerpages.schemas.job import JobInput
from careerpages.schemas.section import SectionInput
from careerpages.schemas.theme import ThemeData

logger = logging.getLogger(__name__)

_local_keys = itertools.count(1)


class DraftStatus(str, Enum):
    SAVED = "saved"
    DIRTY = "dirty"


@dataclass
class DraftEntry:
    key: str
    data: object  # SectionInput | JobInput

    @property
    def is_new(self) -> bool:
        return self.data.id is None


def _new_key(kind: str) -> str:
    return f"new-{kind}-{next(_local_keys)}"


def _saved_key(kind: str, entry_id: int) -> str:
    return f"{kind}-{entry_id}"


class EditorDraft:
    def __init__(
        self,
        slug: str,
        company: CompanyInfoUpdate,
        theme: ThemeData,
        sections: List[SectionInput],
        jobs: List[JobInput],
        draft_version: Optional[int] = None,
    ):
        self.slug = slug
        self.company = company
        self.theme = theme
        self.sections = [self._wrap("section", s) for s in sections]
        self.jobs = [self._wrap("job", j) for j in jobs]
        self.draft_version = draft_version
        self.status = DraftStatus.SAVED

    @staticmethod
    def _wrap(kind: str, data) -> DraftEntry:
        key = _new_key(kind) if data.id is None else _saved_key(kind, data.id)
        return DraftEntry(key=key, data=data)

    @classmethod
    def from_bundle(cls, bundle: CompanyBundleResponse) -> "EditorDraft":
        return cls(
            slug=bundle.slug,
            company=CompanyInfoUpdate(name=bundle.name, description=bundle.description),
            theme=bundle.theme.model_copy(deep=True),
            sections=[SectionInput(**s.model_dump(include=set(SectionInput.model_fields))) for s in bundle.sections],
            jobs=[JobInput(**j.model_dump(include=set(JobInput.model_fields))) for j in bundle.jobs],
            draft_version=bundle.draft_version,
        )

    @property
    def is_dirty(self) -> bool:
        return self.status == DraftStatus.DIRTY

    def _touch(self) -> None:
        self.status = DraftStatus.DIRTY

    # Company / theme

    def update_company(self, **fields) -> None:
        self.company = self.company.model_copy(update=fields)
        self._touch()

    def update_theme(self, **fields) -> None:
        self.theme = ThemeData(**{**self.theme.model_dump(), **fields})
        self._touch()

    # Sections

    def _find(self, entries: List[DraftEntry], key: str) -> DraftEntry:
        for entry in entries:
            if entry.key == key:
                return entry
        raise KeyError(key)

    def _next_group(self) -> int:
        return max((e.data.column_group for e in self.sections), default=-1) + 1

    def add_section(
        self,
        title: str = "New Section",
        content: str = "<p>Add your content here...</p>",
        type: SectionType = SectionType.CUSTOM,
        layout: SectionLayout = SectionLayout.FULL_WIDTH,
    ) -> str:
        """Append a section in a group of its own; returns its local key."""
        entry = self._wrap("section", SectionInput(
            type=type,
            title=title,
            content=content,
            layout=layout,
            order=len(self.sections),
            column_group=self._next_group(),
            column_index=0,
        ))
        self.sections.append(entry)
        self._touch()
        return entry.key

    def add_section_group(self) -> List[str]:
        """Append two side-by-side sections sharing a new group."""
        group = self._next_group()
        base_order = len(self.sections)
        keys = []
        for index in range(2):
            entry = self._wrap("section", SectionInput(
                type=SectionType.CUSTOM,
                title=f"Section {index + 1}",
                content="<p>Section content...</p>",
                order=base_order + index,
                column_group=group,
                column_index=index,
            ))
            self.sections.append(entry)
            keys.append(entry.key)
        self._touch()
        return keys

    def add_to_group(self, group: int, title: str = "New Section") -> str:
        members = [e.data for e in self.sections if e.data.column_group == group]
        if not members:
            raise KeyError(group)
        entry = self._wrap("section", SectionInput(
            type=SectionType.CUSTOM,
            title=title,
            content="<p>Add your content here...</p>",
            order=max(m.order for m in members) + 1,
            column_group=group,
            column_index=max(m.column_index for m in members) + 1,
        ))
        self.sections.append(entry)
        self._touch()
        return entry.key

    def ungroup(self, group: int) -> None:
        """Give every member of ``group`` a group of its own, keeping their order."""
        next_group = self._next_group()
        members = sorted(
            (e for e in self.sections if e.data.column_group == group),
            key=lambda e: e.data.column_index,
        )
        for offset, entry in enumerate(members):
            entry.data = entry.data.model_copy(update={"column_group": next_group + offset, "column_index": 0})
        self._touch()

    def update_section(self, key: str, **fields) -> None:
        entry = self._find(self.sections, key)
        entry.data = SectionInput(**{**entry.data.model_dump(), **fields})
        self._touch()

    def remove_section(self, key: str) -> None:
        self.sections.remove(self._find(self.sections, key))
        self._touch()

    def move_section(self, old_index: int, new_index: int) -> None:
        """Drag-and-drop reorder; orders are renumbered from 0."""
        entry = self.sections.pop(old_index)
        self.sections.insert(new_index, entry)
        for order, item in enumerate(self.sections):
            item.data = item.data.model_copy(update={"order": order})
        self._touch()

    # Jobs

    def add_job(
        self,
        title: str,
        department: str,
        location: str,
        description: str,
        location_type: LocationType = LocationType.REMOTE,
        job_type: JobType = JobType.FULL_TIME,
        requirements: str = "",
        salary: Optional[str] = None,
    ) -> str:
        entry = self._wrap("job", JobInput(
            title=title,
            department=department,
            location=location,
            description=description,
            location_type=location_type,
            job_type=job_type,
            requirements=requirements,
            salary=salary,
        ))
        self.jobs.append(entry)
        self._touch()
        return entry.key

    def update_job(self, key: str, **fields) -> None:
        entry = self._find(self.jobs, key)
        entry.data = JobInput(**{**entry.data.model_dump(), **fields})
        self._touch()

    def remove_job(self, key: str) -> None:
        self.jobs.remove(self._find(self.jobs, key))
        self._touch()

    # Save cycle

    def to_bundle(self, check_version: bool = True) -> DraftBundle:
        return DraftBundle(
            company=self.company,
            theme=self.theme,
            sections=[e.data for e in self.sections],
            jobs=[e.data for e in self.jobs],
            draft_version=self.draft_version if check_version else None,
        )

    def mark_saved(self, saved: CompanyBundleResponse) -> None:
        """Adopt the server's state (permanent ids, new version) after a save."""
        fresh = EditorDraft.from_bundle(saved)
        self.company = fresh.company
        self.theme = fresh.theme
        self.sections = fresh.sections
        self.jobs = fresh.jobs
        self.draft_version = fresh.draft_version
        self.status = DraftStatus.SAVED
        logger.debug(f"Draft marked saved: slug={self.slug} version={self.draft_version}")

