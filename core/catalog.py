"""
Star Catalog Loader

Reads the JSON catalog written by tools/prepare_stars.py:

    {"stars": [StarRecord...], "namedStars": [StarRecord...]}

A bad field never aborts the load: numbers that are missing or unparseable
become 0 and missing names become "". A file that cannot be read or is not
a catalog raises CatalogLoadError.
"""

from __future__ import annotations
import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

from .errors import CatalogLoadError
from .types import StarRecord

logger = logging.getLogger("Catalog")

_NUMERIC_FIELDS = ("ra", "dec", "dist", "mag", "x", "y", "z")


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        f = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return 0.0
    return f if math.isfinite(f) else 0.0


def _to_int(value: Any) -> int:
    return int(_to_float(value))


def _to_str(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def parse_star(raw: dict) -> Tuple[StarRecord, bool]:
    """
    Build a StarRecord from one JSON object.

    Returns (record, clean) where clean is False if any field was coerced.
    """
    clean = True
    fields = {}
    for name in _NUMERIC_FIELDS:
        value = raw.get(name)
        fields[name] = _to_float(value)
        if fields[name] == 0.0 and value not in (0, 0.0, "0"):
            clean = False

    ident = raw.get("id")
    proper = raw.get("proper")
    if proper is not None and not isinstance(proper, str):
        clean = False

    record = StarRecord(id=_to_int(ident), proper=_to_str(proper), **fields)
    return record, clean


def _parse_list(items: Iterable[Any], label: str) -> List[StarRecord]:
    records: List[StarRecord] = []
    coerced = skipped = 0
    for raw in items:
        if not isinstance(raw, dict):
            skipped += 1
            continue
        record, clean = parse_star(raw)
        if not clean:
            coerced += 1
            logger.debug("Coerced malformed fields in %s record %r", label, raw)
        records.append(record)
    if coerced:
        logger.warning("%s: %d record(s) had missing or invalid fields", label, coerced)
    if skipped:
        logger.warning("%s: skipped %d non-object entries", label, skipped)
    return records


@dataclass(frozen=True)
class StarCatalog:
    """Immutable star collection, loaded once at startup."""
    stars: Tuple[StarRecord, ...]
    named_stars: Tuple[StarRecord, ...]

    def __len__(self) -> int:
        return len(self.stars)

    def get(self, star_id: int) -> Optional[StarRecord]:
        for star in self.stars:
            if star.id == star_id:
                return star
        for star in self.named_stars:
            if star.id == star_id:
                return star
        return None

    @classmethod
    def from_records(cls, stars: Iterable[StarRecord],
                     named: Optional[Iterable[StarRecord]] = None,
                     named_max_mag: float = 8.0) -> "StarCatalog":
        stars = tuple(stars)
        pool = stars if named is None else tuple(named)
        named_stars = tuple(s for s in pool if s.is_named(named_max_mag))
        return cls(stars=stars, named_stars=named_stars)

    @classmethod
    def from_dict(cls, data: Any, named_max_mag: float = 8.0) -> "StarCatalog":
        if not isinstance(data, dict):
            raise CatalogLoadError("Catalog root must be a JSON object")
        stars_raw = data.get("stars")
        if not isinstance(stars_raw, list):
            raise CatalogLoadError("Catalog has no 'stars' list")

        stars = _parse_list(stars_raw, "stars")
        named_raw = data.get("namedStars")
        named = None
        if isinstance(named_raw, list):
            named = _parse_list(named_raw, "namedStars")
        elif named_raw is not None:
            logger.warning("'namedStars' is not a list, deriving it from 'stars'")
        return cls.from_records(stars, named, named_max_mag)


def load_catalog(path: Path | str, named_max_mag: float = 8.0) -> StarCatalog:
    """
    Load the star catalog JSON file.

    Raises:
        CatalogLoadError: file missing/unreadable, invalid JSON, or wrong shape.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogLoadError(f"Cannot read star data {path}: {e}") from e
    except ValueError as e:
        raise CatalogLoadError(f"Star data {path} is not valid JSON: {e}") from e

    catalog = StarCatalog.from_dict(data, named_max_mag)
    logger.info("Loaded %d stars, %d named stars from %s",
                len(catalog.stars), len(catalog.named_stars), path.name)
    return catalog
