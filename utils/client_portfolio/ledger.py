# utils/client_portfolio/ledger.py
"""
Projection Ledger and Client Notes - user-entered client data.

Blob layouts:
    projections: {"<client id>": {"2026": 120000.0, "2028": 90000.0}, ...}
    notes:       {"<client id>": "free text", ...}

JSON object keys are strings; years are turned back into ints on load.
"""

import json
import logging
from typing import Dict, Mapping, Optional

from ..common import to_amount
from ..storage import KeyValueStore
from .constants import PROJECTION_YEARS, PROJECTIONS_KEY, NOTES_KEY

logger = logging.getLogger(__name__)


def check_projection_year(year: int) -> int:
    if year not in PROJECTION_YEARS:
        raise ValueError(f"{year!r} is not a projection year")
    return year


class ProjectionLedger:
    """
    Mutable store: client id -> sparse {projection year -> amount}.

    A client or year that was never entered reads as 0.
    """

    def __init__(self, entries: Optional[Mapping[str, Mapping[int, float]]] = None):
        self._entries: Dict[str, Dict[int, float]] = {
            client_id: dict(years) for client_id, years in (entries or {}).items()
        }

    def entry(self, client_id: str) -> Dict[int, float]:
        """Copy of one client's sparse projections (empty when absent)."""
        return dict(self._entries.get(client_id, {}))

    def get(self, client_id: str, year: int) -> float:
        return to_amount(self._entries.get(client_id, {}).get(year))

    def set(self, client_id: str, year: int, amount: float) -> None:
        check_projection_year(year)
        self._entries.setdefault(client_id, {})[year] = to_amount(amount)

    def client_ids(self):
        return list(self._entries)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            client_id: {str(year): amount for year, amount in sorted(years.items())}
            for client_id, years in self._entries.items()
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "ProjectionLedger":
        """Build from a decoded blob, skipping entries that are not projection years."""
        data = data if isinstance(data, Mapping) else {}
        entries: Dict[str, Dict[int, float]] = {}

        for client_id, years in data.items():
            if not isinstance(years, Mapping):
                logger.warning(f"Ignoring malformed projections for client {client_id}")
                continue
            for raw_year, amount in years.items():
                try:
                    year = int(raw_year)
                except (TypeError, ValueError):
                    year = None
                if year not in PROJECTION_YEARS:
                    logger.warning(f"Ignoring projection year {raw_year!r} for client {client_id}")
                    continue
                entries.setdefault(str(client_id), {})[year] = to_amount(amount)

        return cls(entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ProjectionLedger):
            return NotImplemented
        return self._entries == other._entries


class ClientNotes:
    """Free-text note per client."""

    def __init__(self, notes: Optional[Mapping[str, str]] = None):
        self._notes: Dict[str, str] = dict(notes or {})

    def get(self, client_id: str) -> str:
        return self._notes.get(client_id, "")

    def set(self, client_id: str, note: str) -> None:
        self._notes[client_id] = note or ""

    def to_dict(self) -> Dict[str, str]:
        return dict(self._notes)

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "ClientNotes":
        data = data if isinstance(data, Mapping) else {}
        return cls({str(k): str(v) for k, v in data.items() if v is not None})


class ClientDataRepository:
    """Load/save projections and notes through a key-value store (separate keys)."""

    def __init__(
        self,
        store: KeyValueStore,
        projections_key: str = PROJECTIONS_KEY,
        notes_key: str = NOTES_KEY
    ):
        self.store = store
        self.projections_key = projections_key
        self.notes_key = notes_key

    def _load_json(self, key: str):
        raw = self.store.get(key)
        if raw is None:
            return {}
        try:
            return json.loads(raw)
        except ValueError as e:
            logger.warning(f"Saved blob '{key}' is not valid JSON, starting empty: {e}")
            return {}

    def load_projections(self) -> ProjectionLedger:
        return ProjectionLedger.from_dict(self._load_json(self.projections_key))

    def save_projections(self, ledger: ProjectionLedger) -> None:
        self.store.set(self.projections_key, json.dumps(ledger.to_dict()))

    def load_notes(self) -> ClientNotes:
        return ClientNotes.from_dict(self._load_json(self.notes_key))

    def save_notes(self, notes: ClientNotes) -> None:
        self.store.set(self.notes_key, json.dumps(notes.to_dict(), ensure_ascii=False))
