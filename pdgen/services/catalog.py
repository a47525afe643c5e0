"""
services/catalog.py
──────────────────────────────────────────────────────────────────────────────
Taxonomy Catalog: read-only lookups over the OPM job-family / series data.

The catalog is the single source of truth for both the UI dropdowns and the
validation pipeline, so they can never disagree about which codes exist.

Lifecycle:
  • Built once per process by get_catalog() (lru_cache singleton, same
    pattern as config.settings.get_settings).
  • Never mutated afterwards; all collections are tuples / frozen models,
    so concurrent reads need no locking.
  • Malformed reference data raises CatalogIntegrityError at build time.
    No partial catalog is ever returned.

Data source:
  • Default: domain/opm_data.py (built-in OPM white-collar groups).
  • TAXONOMY_CSV_PATH set: a CSV with columns
      group_code, group_title, series_code, series_title
    one row per series; group order follows first appearance.
"""
from __future__ import annotations

import csv
import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from pdgen.config.settings import get_settings
from pdgen.domain import opm_data
from pdgen.domain.exceptions import CatalogIntegrityError
from pdgen.domain.models import OccupationalGroup, SeriesEntry

logger = logging.getLogger(__name__)

_CSV_COLUMNS = ("group_code", "group_title", "series_code", "series_title")


class TaxonomyCatalog:
    """Immutable index of occupational groups and their series.

    Build with :meth:`from_records` or :func:`load_catalog`; the constructor
    trusts its inputs and is not meant to be called directly.
    """

    def __init__(
        self,
        groups: tuple[OccupationalGroup, ...],
        series_by_group: dict[str, tuple[SeriesEntry, ...]],
    ) -> None:
        self._groups = groups
        self._series_by_group = series_by_group
        self._group_index = {g.code: g for g in groups}

    # ── Construction ───────────────────────────────────────────────────────

    @classmethod
    def from_records(
        cls,
        groups: Iterable[tuple[str, str]],
        series: Iterable[tuple[str, str, str]],
    ) -> "TaxonomyCatalog":
        """Validate raw (code, title[, group]) records and build a catalog.

        Raises:
            CatalogIntegrityError: On any blank field, duplicate code,
                dangling group reference or group without series.
        """
        group_models: list[OccupationalGroup] = []
        seen_groups: set[str] = set()
        for code, title in groups:
            code, title = _clean(code), _clean(title)
            if not code or not title:
                raise CatalogIntegrityError(
                    f"Occupational group has a blank code or title: {code!r}/{title!r}"
                )
            if code in seen_groups:
                raise CatalogIntegrityError(f"Duplicate occupational group code {code!r}")
            seen_groups.add(code)
            group_models.append(OccupationalGroup(code=code, title=title))

        if not group_models:
            raise CatalogIntegrityError("Taxonomy contains no occupational groups")

        buckets: dict[str, list[SeriesEntry]] = {g.code: [] for g in group_models}
        seen_series: set[str] = set()
        for code, title, group_code in series:
            code, title, group_code = _clean(code), _clean(title), _clean(group_code)
            if not code or not title:
                raise CatalogIntegrityError(
                    f"Series has a blank code or title: {code!r}/{title!r}"
                )
            if group_code not in buckets:
                raise CatalogIntegrityError(
                    f"Series {code!r} references unknown group {group_code!r}"
                )
            if code in seen_series:
                raise CatalogIntegrityError(f"Duplicate series code {code!r}")
            seen_series.add(code)
            buckets[group_code].append(
                SeriesEntry(code=code, title=title, group_code=group_code)
            )

        empty = [code for code, entries in buckets.items() if not entries]
        if empty:
            raise CatalogIntegrityError(
                f"Occupational groups without any series: {', '.join(empty)}"
            )

        return cls(
            groups=tuple(group_models),
            series_by_group={code: tuple(entries) for code, entries in buckets.items()},
        )

    # ── Public API ─────────────────────────────────────────────────────────

    def list_occupational_groups(self) -> tuple[OccupationalGroup, ...]:
        """All groups in source-data order.  Never empty."""
        return self._groups

    def list_series_for_group(self, group_code: object) -> tuple[SeriesEntry, ...]:
        """Series of ``group_code`` in source order.

        An unknown group has no valid series, so it yields an empty tuple
        rather than an error.  Non-string input is treated as unknown.
        """
        if not isinstance(group_code, str):
            return ()
        return self._series_by_group.get(group_code, ())

    def is_valid_group_code(self, code: object) -> bool:
        return isinstance(code, str) and code in self._group_index

    def is_valid_series_code(self, group_code: object, series_code: object) -> bool:
        if not isinstance(series_code, str):
            return False
        return any(s.code == series_code for s in self.list_series_for_group(group_code))

    def get_group(self, code: object) -> OccupationalGroup | None:
        if not isinstance(code, str):
            return None
        return self._group_index.get(code)

    def get_series(self, group_code: object, series_code: object) -> SeriesEntry | None:
        for entry in self.list_series_for_group(group_code):
            if entry.code == series_code:
                return entry
        return None

    def __len__(self) -> int:
        """Total number of series across all groups."""
        return sum(len(v) for v in self._series_by_group.values())


# ── Loading ────────────────────────────────────────────────────────────────

def load_catalog(csv_path: Path | None = None) -> TaxonomyCatalog:
    """Build a catalog from the built-in data or from ``csv_path``.

    Raises:
        CatalogIntegrityError: If the file is missing, lacks required
            columns, or the records fail integrity checks.
    """
    if csv_path is None:
        catalog = TaxonomyCatalog.from_records(
            opm_data.OCCUPATIONAL_GROUPS, opm_data.SERIES
        )
        source = "built-in"
    else:
        groups, series = _read_csv(Path(csv_path))
        catalog = TaxonomyCatalog.from_records(groups, series)
        source = str(csv_path)

    logger.info(
        "Taxonomy catalog loaded | source=%s groups=%d series=%d",
        source,
        len(catalog.list_occupational_groups()),
        len(catalog),
    )
    return catalog


def _read_csv(path: Path) -> tuple[list[tuple[str, str]], list[tuple[str, str, str]]]:
    """Split a flat CSV into group and series records (group order preserved)."""
    if not path.exists():
        raise CatalogIntegrityError(f"Taxonomy CSV not found: {path}")

    groups: dict[str, str] = {}
    series: list[tuple[str, str, str]] = []
    try:
        with path.open(encoding="utf-8", newline="") as fh:
            reader = csv.DictReader(fh)
            missing = [c for c in _CSV_COLUMNS if c not in (reader.fieldnames or [])]
            if missing:
                raise CatalogIntegrityError(
                    f"Taxonomy CSV {path} is missing columns: {', '.join(missing)}"
                )
            for row in reader:
                group_code = _clean(row["group_code"])
                group_title = _clean(row["group_title"])
                known_title = groups.setdefault(group_code, group_title)
                if known_title != group_title:
                    raise CatalogIntegrityError(
                        f"Group {group_code!r} has conflicting titles in {path}"
                    )
                series.append((row["series_code"], row["series_title"], group_code))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise CatalogIntegrityError(f"Failed to read taxonomy CSV {path}: {exc}") from exc

    return list(groups.items()), series


def _clean(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


@lru_cache(maxsize=1)
def get_catalog() -> TaxonomyCatalog:
    """Return the process-wide catalog, building it on first use.

    Interfaces call this at startup so integrity errors surface before any
    request is served.
    """
    return load_catalog(get_settings().taxonomy_csv_path)
