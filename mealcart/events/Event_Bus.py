"""Simple Event Bus / Observer implementation for plan and catalog changes.

Event names:
  plan.changed -> payload {"plan": Plan, "recipes": List[Recipe]}
  catalog.changed -> payload {"plan": Plan, "recipes": List[Recipe]}
  shopping.updated -> payload {"weekly": int, "daily": int}  (row / day counts)

Subscribers can be callables or objects exposing handle_event(event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PLAN_CHANGED = "plan.changed"
CATALOG_CHANGED = "catalog.changed"
SHOPPING_UPDATED = "shopping.updated"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback):
		if hasattr(callback, 'handle_event'):
			callback = callback.handle_event
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback):
		if hasattr(callback, 'handle_event'):
			callback = callback.handle_event
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# one failing subscriber must not block the others
				logger.exception("Error delivering %s to %s", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus (sugar function)."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


def publish_plan_changed(plan, recipes) -> None:
	publish(PLAN_CHANGED, {'plan': plan, 'recipes': recipes})


def publish_catalog_changed(plan, recipes) -> None:
	publish(CATALOG_CHANGED, {'plan': plan, 'recipes': recipes})


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish', 'publish_plan_changed', 'publish_catalog_changed',
	'PLAN_CHANGED', 'CATALOG_CHANGED', 'SHOPPING_UPDATED'
]
