"""Shopping list store driven by plan/catalog events.

This module keeps the current weekly and daily shopping lists in memory and
rebuilds them whenever the GLOBAL_EVENT_BUS reports:
  - plan.changed
  - catalog.changed

Design:
  * A rebuild is one atomic unit of work: the previous weekly list is read,
    the new weekly/daily pair is computed and swapped in under the same Lock,
    so readers never see a weekly list from one pass and daily lists from
    another.
  * Checked flags survive a rebuild on the weekly list only (matched by
    name). Daily lists start unchecked after every rebuild.
  * The last rebuild wins; nothing is queued.
"""
from __future__ import annotations
import logging
from threading import Lock
from typing import Any, Dict, List, Optional

from mealcart.domain.ShoppingList import DailyShoppingList, ShoppingItem
from mealcart.logic.shopping.list_builder import ShoppingResult, aggregate
from .Event_Bus import GLOBAL_EVENT_BUS, PLAN_CHANGED, CATALOG_CHANGED, SHOPPING_UPDATED, EventBus

logger = logging.getLogger(__name__)


class ShoppingListStore:
    def __init__(self, bus: Optional[EventBus] = None):
        self._lock = Lock()
        self._weekly: List[ShoppingItem] = []
        self._daily: List[DailyShoppingList] = []
        self._bus = bus

    def recompute(self, plan, recipes) -> ShoppingResult:
        with self._lock:
            result = aggregate(plan, recipes, previous=self._weekly)
            self._weekly, self._daily = result.weekly, result.daily
            weekly, daily = self._copy()
        logger.info("Shopping list rebuilt: %s weekly rows, %s days", len(weekly), len(daily))
        if self._bus is not None:
            self._bus.publish(SHOPPING_UPDATED, {'weekly': len(weekly), 'daily': len(daily)})
        return ShoppingResult(weekly, daily)

    def handle_event(self, event_name: str, payload: Any):  # signature expected by EventBus
        if not isinstance(payload, dict):
            logger.warning("Ignoring %s without a plan/recipes payload", event_name)
            return
        self.recompute(payload.get('plan'), payload.get('recipes') or [])

    def toggle(self, name: str, date: Optional[str] = None) -> Optional[ShoppingItem]:
        """Flip the checked flag of a weekly row, or of a row in one day's list when date is given.

        Returns a copy of the toggled row, None when no row matches.
        """
        with self._lock:
            if date is None:
                rows = self._weekly
            else:
                day = next((d for d in self._daily if d.date == date), None)
                rows = day.items if day else []
            toggled = None
            for item in rows:
                if item.name == name:
                    item.checked = not item.checked
                    toggled = item.copy()
            return toggled

    def _copy(self):
        return [i.copy() for i in self._weekly], [d.copy() for d in self._daily]

    def snapshot(self) -> ShoppingResult:
        with self._lock:
            weekly, daily = self._copy()
        return ShoppingResult(weekly, daily)

    def to_dict(self) -> Dict[str, Any]:
        weekly, daily = self.snapshot()
        return {
            'weekly': [i.to_dict() for i in weekly],
            'daily': [d.to_dict() for d in daily],
        }


STORE = ShoppingListStore(GLOBAL_EVENT_BUS)
_started = False


def start(store: ShoppingListStore = STORE, bus: EventBus = GLOBAL_EVENT_BUS):
    """Idempotent start: subscribe the store once."""
    global _started
    if _started and store is STORE and bus is GLOBAL_EVENT_BUS:
        return
    bus.subscribe(PLAN_CHANGED, store)
    bus.subscribe(CATALOG_CHANGED, store)
    if store is STORE and bus is GLOBAL_EVENT_BUS:
        _started = True


__all__ = ['ShoppingListStore', 'STORE', 'start']
