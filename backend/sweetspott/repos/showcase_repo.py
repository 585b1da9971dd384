"""
Read-only repository for the curated place dataset.
Loads the bundled JSON file once and serves immutable Place records.
"""
import json
import logging
from pathlib import Path
from typing import Optional

from sweetspott.models.places_model import Place
from sweetspott.core.logger import logs

DEFAULT_DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "curated_places.json"


class ShowcaseRepository:
    """Curated showcase ("global-N") and local sample ("local-N") places."""

    def __init__(self, data_file: Path = DEFAULT_DATA_FILE):
        self.data_file = Path(data_file)

        with open(self.data_file, "r", encoding="utf-8") as f:
            raw = json.load(f)

        self._global = [Place(**p) for p in raw.get("global", [])]
        self._local = [Place(**p) for p in raw.get("local", [])]
        self._by_id = {p.id: p for p in self._global + self._local}

        logs.log(
            logging.INFO,
            f"Curated dataset loaded: {len(self._global)} showcase, {len(self._local)} local places"
        )

    def list_global(self) -> list[Place]:
        return list(self._global)

    def list_local(self) -> list[Place]:
        return list(self._local)

    def get(self, place_id: str) -> Optional[Place]:
        return self._by_id.get(place_id)


_default_repo: Optional[ShowcaseRepository] = None


def get_showcase_repo() -> ShowcaseRepository:
    global _default_repo
    if _default_repo is None:
        _default_repo = ShowcaseRepository()
    return _default_repo
