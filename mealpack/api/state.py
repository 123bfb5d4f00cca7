"""Per-process application state: the loaded OrderBook and the persisted settings.

The web layer owns the overage policy; the core only ever receives it as an
argument of a full recomputation pass.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from mealpack.domain.OrderBook import OrderBook
from mealpack.infra.Settings_Repository import SettingsRepository

logger = logging.getLogger(__name__)


class AppState:
    def __init__(self, settings_repo: SettingsRepository):
        self.settings_repo = settings_repo
        settings = settings_repo.load()
        self.book = OrderBook(allow_overage=settings["allow_overage"])
        self.filters: Dict[str, Any] = settings["filters"]

    def update_settings(self, allow_overage: bool, filters: Optional[Dict[str, Any]] = None):
        self.book.set_allow_overage(allow_overage)
        if filters is not None:
            self.filters = filters
        self.settings_repo.save({"allow_overage": self.book.allow_overage, "filters": self.filters})
        return self

    def settings(self) -> Dict[str, Any]:
        return {"allow_overage": self.book.allow_overage, "filters": dict(self.filters)}


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(SettingsRepository())
    return _state


def reset_state(settings_path: Optional[Path] = None) -> AppState:
    """Start over with an empty order book (settings re-read from ``settings_path``)."""
    global _state
    _state = AppState(SettingsRepository(settings_path))
    logger.info("Application state reset")
    return _state


__all__ = ['AppState', 'get_state', 'reset_state']
