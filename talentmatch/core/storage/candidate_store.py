"""File-based candidate profile store.

One JSON file per candidate profile under ``<base_dir>/candidates``. Stands in
for the relational profile tables: lookups, discoverability rules and keyword
search live here so the matching pipeline only ever sees ``CandidateRecord``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ...candidates.projection import build_resume_text
from ..models.candidate import CandidateRecord
from ...observability.logger import get_logger

logger = get_logger(__name__)

SEARCH_LIMIT = 50
LIST_LIMIT = 100
ANY_EXPERIENCE = "Any"


class CandidateStore:
    """Simple JSON-backed candidate repository."""

    def __init__(self, base_dir: str | Path | None = None):
        self.base_dir = Path(base_dir) if base_dir else Path("data/store")
        self.base_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------
    def _candidates_dir(self) -> Path:
        path = self.base_dir / "candidates"
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _path(self, candidate_id: int) -> Path:
        return self._candidates_dir() / f"{candidate_id}.json"

    def _dump(self, path: Path, data: dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def _load(self, path: Path) -> dict[str, Any] | None:
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def _all(self) -> list[CandidateRecord]:
        records = []
        for path in self._candidates_dir().glob("*.json"):
            data = self._load(path)
            if data:
                records.append(CandidateRecord(**data))
        return sorted(records, key=lambda r: r.id)

    def _discoverable(self) -> list[CandidateRecord]:
        return [r for r in self._all() if r.is_discoverable]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def save(self, record: CandidateRecord) -> None:
        """Persist a profile, indexing its resume text when none is stored."""
        if not record.resume_text:
            record = record.model_copy(update={"resume_text": build_resume_text(record)})
        self._dump(self._path(record.id), record.model_dump(mode="json"))

    def import_file(self, path: str | Path) -> int:
        """Load a JSON list of candidate profiles; returns how many were saved."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"{path} must contain a JSON list of candidate profiles")

        for item in data:
            self.save(CandidateRecord.model_validate(item))

        logger.info("candidates_imported", path=str(path), count=len(data))
        return len(data)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get(self, candidate_id: int) -> CandidateRecord | None:
        data = self._load(self._path(candidate_id))
        return CandidateRecord(**data) if data else None

    def get_many(self, candidate_ids: Iterable[int]) -> list[CandidateRecord]:
        """Records for the given ids, unknown ids skipped, each id at most once."""
        records = []
        for candidate_id in dict.fromkeys(candidate_ids):
            record = self.get(candidate_id)
            if record:
                records.append(record)
        return records

    def list_public(self, limit: int = LIST_LIMIT) -> list[CandidateRecord]:
        return self._discoverable()[:limit]

    def search(
        self,
        query: str,
        experience_level: str | None = None,
        location: str | None = None,
        limit: int = SEARCH_LIMIT,
    ) -> list[CandidateRecord]:
        """Keyword search over discoverable profiles.

        Any query word matching the resume text (case-insensitive) is a hit;
        experience level and location are substring filters.
        """
        words = [w.lower() for w in query.split()]
        level = (experience_level or "").lower() if experience_level != ANY_EXPERIENCE else ""
        place = (location or "").strip().lower()

        results = []
        for record in self._discoverable():
            resume = (record.resume_text or "").lower()
            if words and not any(word in resume for word in words):
                continue
            if level and level not in (record.experience_years or "").lower():
                continue
            if place and place not in (record.location or "").lower():
                continue
            results.append(record)

        return results[:limit]
