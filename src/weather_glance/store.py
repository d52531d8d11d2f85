"""JSON file store with freshness-aware caching.

Manages read/write of JSON data files organized into tiers:
  - live/: Last fetched dashboard snapshot, short TTL (30 min)
  - prefs/: Theme and last location, no expiry
  - derived/: Built site, always recomputed

Every JSON file is wrapped in a metadata envelope with ``source`` and
``fetched_at`` (plus ``valid_until`` for cached data) so the refresh command
can skip a fetch while the last snapshot is still fresh.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from weather_glance.schemas import Preferences, Theme

PREFERENCES_PATH = Path("prefs/preferences.json")


class DataStore:
    """Manages read/write of cached data files with TTL."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.live = base_dir / "live"
        self.prefs = base_dir / "prefs"
        self.derived = base_dir / "derived"

    def read(self, path: Path) -> Any | None:
        """Read data payload from a metadata-enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        envelope = self.read_raw(path)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) from a JSON file."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``live/dashboard.json``).
            data: JSON-serializable payload stored under the ``data`` key.
            source: Data source identifier (e.g. ``"openweathermap.org"``).
            valid_until: Expiry timestamp. None means no-cache.
            **params: Extra metadata fields (location, query params, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        if params:
            meta.update(params)

        envelope = {"meta": meta, "data": data}
        with full.open("w") as f:
            json.dump(envelope, f, indent=2)

        return full

    def is_fresh(self, path: Path) -> bool:
        """Check if a file exists and hasn't expired.

        Returns False if the file is missing, has no ``valid_until``, or
        the expiry time has passed.
        """
        envelope = self.read_raw(path)
        if envelope is None:
            return False

        valid_until = envelope.get("meta", {}).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry

    # -- preferences ----------------------------------------------------------

    def load_preferences(self) -> Preferences:
        """Saved preferences, or defaults (dark theme, no location)."""
        data = self.read(PREFERENCES_PATH)
        if not data:
            return Preferences()
        return Preferences.model_validate(data)

    def save_preferences(self, prefs: Preferences) -> Path:
        return self.write(PREFERENCES_PATH, prefs.model_dump(mode="json"), source="user")

    def toggle_theme(self) -> Theme:
        """Flip between dark and light, persist, and return the new theme."""
        prefs = self.load_preferences()
        prefs.theme = Theme.LIGHT if prefs.theme is Theme.DARK else Theme.DARK
        self.save_preferences(prefs)
        return prefs.theme

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
