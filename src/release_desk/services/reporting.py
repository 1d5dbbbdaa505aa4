"""Search, status filtering and flat export projections of releases."""

import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from release_desk.config import get_settings
from release_desk.models.release import Release, ReleaseStatus

ALL_STATUSES = "all"

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M"


def filter_releases(
    releases: Iterable[Release],
    search_term: str | None = None,
    status: str | None = None,
) -> list[Release]:
    """Narrow releases by a search term and a status.

    The search term is a case-insensitive substring match on track title or
    primary artist. A status of ``None`` or ``"all"`` passes everything
    through. Both conditions must hold.
    """
    needle = (search_term or "").lower()
    results = []
    for release in releases:
        if needle and not (
            needle in release.track_title.lower() or needle in release.primary_artist.lower()
        ):
            continue
        if status and status != ALL_STATUSES and release.status != status:
            continue
        results.append(release)
    return results


def status_counts(releases: Iterable[Release]) -> dict[str, int]:
    """Count releases per status, including statuses with no releases."""
    counts = {status.value: 0 for status in ReleaseStatus}
    for release in releases:
        counts[release.status.value] += 1
    return counts


@dataclass(frozen=True)
class ExportColumn:
    """A named column and how to read it from a release.

    The getter returns None for an absent value, which is rendered as the
    placeholder.
    """

    name: str
    getter: Callable[[Release], str | None]


def _date(value: datetime) -> str:
    return value.strftime(DATE_FORMAT)


def _datetime(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


FIELD_SETS: dict[str, tuple[ExportColumn, ...]] = {
    "dashboard": (
        ExportColumn("Track Title", lambda r: r.track_title),
        ExportColumn("Primary Artist", lambda r: r.primary_artist),
        ExportColumn("Album", lambda r: r.album_title),
        ExportColumn("Album Type", lambda r: r.album_type.value),
        ExportColumn("Status", lambda r: r.status.value),
        ExportColumn("ISRC", lambda r: r.isrc),
        ExportColumn("UPC", lambda r: r.upc),
        ExportColumn("Genre", lambda r: r.primary_genre),
        ExportColumn("Release Date", lambda r: r.release_date),
        ExportColumn("Created", lambda r: _date(r.created_at)),
    ),
    "admin": (
        ExportColumn("ID", lambda r: r.id),
        ExportColumn("Track Title", lambda r: r.track_title),
        ExportColumn("Primary Artist", lambda r: r.primary_artist),
        ExportColumn("Album", lambda r: r.album_title),
        ExportColumn("Album Type", lambda r: r.album_type.value),
        ExportColumn("Status", lambda r: r.status.value),
        ExportColumn("ISRC", lambda r: r.isrc),
        ExportColumn("UPC", lambda r: r.upc),
        ExportColumn("Genre", lambda r: r.primary_genre),
        ExportColumn("Language", lambda r: r.language),
        ExportColumn("Release Date", lambda r: r.release_date),
        ExportColumn("Label", lambda r: r.label_name),
        ExportColumn("Explicit", lambda r: "Yes" if r.is_explicit else "No"),
        ExportColumn("Territories", lambda r: r.territories),
        ExportColumn("Created", lambda r: _datetime(r.created_at)),
        ExportColumn("Updated", lambda r: _datetime(r.updated_at)),
        ExportColumn("Rejection Reason", lambda r: r.effective_rejection_reason),
    ),
}


def project(
    releases: Iterable[Release],
    field_set: str = "dashboard",
    placeholder: str | None = None,
) -> tuple[list[str], list[dict[str, str]]]:
    """Flatten releases into ordered string records for reporting.

    Returns:
        The column names and one record per release. Absent values become
        ``placeholder`` (settings default ``"N/A"``).

    Raises:
        KeyError: If ``field_set`` is not a known field set.
    """
    columns = FIELD_SETS[field_set]
    fill = placeholder if placeholder is not None else get_settings().export_placeholder
    records = []
    for release in releases:
        record = {}
        for column in columns:
            value = column.getter(release)
            record[column.name] = value if value else fill
        records.append(record)
    return [column.name for column in columns], records


def _csv_value(value: str) -> str:
    # Embedded quotes are not escaped.
    return f'"{value}"' if "," in value else value


def render_csv(columns: Sequence[str], records: Sequence[dict[str, str]]) -> str:
    """Render records as comma-separated text with a header row."""
    lines = [",".join(_csv_value(name) for name in columns)]
    for record in records:
        lines.append(",".join(_csv_value(record.get(name, "")) for name in columns))
    return "\n".join(lines)


def export_filename(prefix: str, now_ms: int | None = None) -> str:
    """Build ``<prefix>-<epoch milliseconds>.csv``."""
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{prefix}-{stamp}.csv"


@dataclass(frozen=True)
class CsvExport:
    """Serialized export ready for delivery."""

    filename: str
    content: str


def export_releases(
    releases: Sequence[Release],
    field_set: str = "dashboard",
    prefix: str = "releases",
) -> CsvExport | None:
    """Project and render releases as CSV. Returns None when there is nothing to export."""
    if not releases:
        return None
    columns, records = project(releases, field_set)
    return CsvExport(filename=export_filename(prefix), content=render_csv(columns, records))
