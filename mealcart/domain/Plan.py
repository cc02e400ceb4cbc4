"""Plan domain entity: ISO date -> ordered recipe ids, plus calendar helpers."""
import calendar
from datetime import date, timedelta
from typing import Dict, List, Optional

from mealcart.utilities.constants import ISO_DATE_FORMAT


def week_range(day: date) -> List[str]:
    """Return the 7 ISO dates of the week containing ``day``, Monday first."""
    monday = day - timedelta(days=day.weekday())
    return [(monday + timedelta(days=i)).strftime(ISO_DATE_FORMAT) for i in range(7)]


def month_days(day: date) -> List[str]:
    """Return every ISO date of the month containing ``day``."""
    days_in_month = calendar.monthrange(day.year, day.month)[1]
    return [date(day.year, day.month, i).strftime(ISO_DATE_FORMAT) for i in range(1, days_in_month + 1)]


class Plan:
    def __init__(self, meals: Optional[Dict[str, List[str]]] = None):
        # copy lists so callers can't mutate the plan behind our back
        self.meals: Dict[str, List[str]] = {d: list(ids or []) for d, ids in (meals or {}).items()}

    def __str__(self) -> str:
        planned = sum(len(ids) for ids in self.meals.values())
        return f"Plan - {len(self.meals)} days - {planned} meals"

    __repr__ = __str__

    def sorted_dates(self) -> List[str]:
        # ISO strings sort chronologically
        return sorted(self.meals.keys())

    def recipes_for(self, day: str) -> List[str]:
        return list(self.meals.get(day) or [])

    def add_recipe(self, day: str, recipe_id: str) -> bool:
        '''Appends recipe_id to the day. Returns False if the recipe is already planned that day.'''
        current = self.meals.setdefault(day, [])
        if recipe_id in current:
            return False
        current.append(recipe_id)
        return True

    def remove_recipe(self, day: str, recipe_id: str) -> bool:
        '''Removes every occurrence of recipe_id from the day. Returns True if something was removed.'''
        current = self.meals.get(day) or []
        remaining = [rid for rid in current if rid != recipe_id]
        if len(remaining) == len(current):
            return False
        self.meals[day] = remaining
        return True

    def set_day(self, day: str, recipe_ids: List[str]):
        self.meals[day] = list(recipe_ids)

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        meals = {}
        for day, ids in d.items():
            meals[str(day)] = [str(i) for i in ids] if isinstance(ids, list) else []
        return Plan(meals)

    def to_dict(self):
        return {day: list(ids) for day, ids in self.meals.items()}
