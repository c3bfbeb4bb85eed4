"""
Bulk job import from CSV.

Expected columns (header names are trimmed, lower-cased and have whitespace
replaced by underscores): title, work_policy, location, department, plus the
optional employment_type, job_type, experience_level, salary_range and
posted_days_ago. Descriptions are generated from the row, not copied.
"""
import csv
import io
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from careerpages.core.errors import ValidationError
from careerpages.db.models.company import Company
from careerpages.db.models.job import Job, JobType, LocationType

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "work_policy", "location", "department")


@dataclass
class ImportResult:
    created: int
    skipped: int


def normalize_header(header: Optional[str]) -> str:
    return "_".join((header or "").strip().lower().split())


def parse_csv(text: str) -> List[Dict[str, str]]:
    """Parse CSV text into rows keyed by normalized header, skipping blank rows."""
    reader = csv.reader(io.StringIO(text))
    try:
        records = list(reader)
    except csv.Error as e:
        raise ValidationError(f"CSV parsing error: {e}")

    records = [r for r in records if any(cell.strip() for cell in r)]
    if not records:
        raise ValidationError("CSV file is empty")

    headers = [normalize_header(h) for h in records[0]]
    rows = []
    for record in records[1:]:
        row = {}
        for index, header in enumerate(headers):
            if header:
                row[header] = record[index].strip() if index < len(record) else ""
        rows.append(row)
    return rows


def find_invalid_rows(rows: List[Dict[str, str]]) -> List[int]:
    """Row numbers as seen in a spreadsheet: 1-indexed, plus the header line."""
    return [
        index + 2
        for index, row in enumerate(rows)
        if any(not row.get(field) for field in REQUIRED_FIELDS)
    ]


def map_location_type(work_policy: str) -> LocationType:
    policy = (work_policy or "").lower()
    if "remote" in policy:
        return LocationType.REMOTE
    if "hybrid" in policy:
        return LocationType.HYBRID
    return LocationType.ONSITE


def map_job_type(employment_type: Optional[str], job_type: Optional[str]) -> JobType:
    value = (employment_type or job_type or "").lower()
    if "part" in value:
        return JobType.PART_TIME
    if "contract" in value:
        return JobType.CONTRACT
    if "intern" in value:
        return JobType.INTERNSHIP
    return JobType.FULL_TIME


def posted_at_for(row: Dict[str, str], now: datetime) -> datetime:
    days = row.get("posted_days_ago")
    if days and days.isdigit():
        try:
            return now - timedelta(days=int(days))
        except (OverflowError, ValueError):
            logger.warning(f"Ignoring out-of-range posted_days_ago: {days[:20]}")
    return now


def build_job_fields(row: Dict[str, str], now: datetime) -> dict:
    title = row["title"]
    department = row.get("department") or "General"
    location = row["location"]
    work_policy = row["work_policy"]
    employment_type = row.get("employment_type")
    return {
        "title": title,
        "department": department,
        "location": location,
        "location_type": map_location_type(work_policy).value,
        "job_type": map_job_type(employment_type, row.get("job_type")).value,
        "description": (
            f"We are hiring a {title} to join our {department} team in {location}. "
            f"This is a {work_policy} position."
        ),
        "requirements": (
            f"Experience Level: {row.get('experience_level') or 'Not specified'}. "
            f"{employment_type or 'Full time'} position."
        ),
        "salary": row.get("salary_range") or None,
        "is_active": True,
        "posted_at": posted_at_for(row, now),
    }


def _duplicate_key(fields: dict) -> Tuple[str, str, str]:
    return (
        fields["title"].strip().lower(),
        fields["department"].strip().lower(),
        fields["location"].strip().lower(),
    )


def import_jobs(db: Session, company: Company, raw: bytes) -> ImportResult:
    """
    Validate the whole file, then create one job per row.

    Rows duplicating an existing job (or an earlier row) by title, department
    and location are skipped, not reported as errors.

    Raises:
        ValidationError: undecodable file, parse error, or rows missing required fields
    """
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise ValidationError("File must be a UTF-8 encoded CSV")

    rows = parse_csv(text)
    invalid_rows = find_invalid_rows(rows)
    if invalid_rows:
        raise ValidationError({
            "message": (
                f"Invalid data in rows: {', '.join(str(n) for n in invalid_rows)}. "
                f"Missing required fields ({', '.join(REQUIRED_FIELDS)})."
            ),
            "rows": invalid_rows,
        })

    seen = {
        _duplicate_key({"title": j.title, "department": j.department, "location": j.location})
        for j in db.query(Job).filter(Job.company_id == company.id).all()
    }

    now = datetime.now(timezone.utc)
    created = 0
    skipped = 0
    try:
        for row in rows:
            fields = build_job_fields(row, now)
            key = _duplicate_key(fields)
            if key in seen:
                skipped += 1
                continue
            seen.add(key)
            db.add(Job(company_id=company.id, **fields))
            created += 1
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Bulk import: company_id={company.id} created={created} skipped={skipped}")
    return ImportResult(created=created, skipped=skipped)
