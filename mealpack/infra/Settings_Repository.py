"""User settings persistence (overage policy and last used filters) as a JSON file."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from mealpack.infra.paths import SETTINGS_FILE
from mealpack.utilities.config import DEFAULT_ALLOW_OVERAGE
from mealpack.utilities.constants import FILTER_FIELDS

logger = logging.getLogger(__name__)


def default_settings() -> Dict[str, Any]:
    return {"allow_overage": DEFAULT_ALLOW_OVERAGE, "filters": {}}


class SettingsRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else SETTINGS_FILE

    def load(self) -> Dict[str, Any]:
        """Read settings; a missing or unreadable file yields the defaults."""
        settings = default_settings()
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                stored = json.load(f) or {}
        except FileNotFoundError:
            return settings
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return settings
        if not isinstance(stored, dict):
            logger.warning(f"Ignoring malformed settings in {self.path}")
            return settings
        settings["allow_overage"] = bool(stored.get("allow_overage", settings["allow_overage"]))
        filters = stored.get("filters")
        if isinstance(filters, dict):
            settings["filters"] = {k: v for k, v in filters.items() if k in FILTER_FIELDS}
        return settings

    def save(self, settings: Dict[str, Any]) -> None:
        data = {
            "allow_overage": bool(settings.get("allow_overage", False)),
            "filters": {k: v for k, v in (settings.get("filters") or {}).items() if k in FILTER_FIELDS},
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.info(f"Settings saved to {self.path}")
