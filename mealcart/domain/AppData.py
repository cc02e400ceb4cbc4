"""AppData aggregate: the whole persisted/exported state (recipes, plan, preferences)."""
from datetime import datetime
from typing import List, Optional

from mealcart.domain.Plan import Plan
from mealcart.domain.Preference import UserPreference
from mealcart.domain.Recipe import Recipe
from mealcart.utilities.constants import SNAPSHOT_VERSION


class AppData:
    def __init__(self, recipes: Optional[List[Recipe]] = None, plan: Optional[Plan] = None,
                 preferences: Optional[UserPreference] = None, version: str = SNAPSHOT_VERSION,
                 export_date: str = ""):
        self.recipes = list(recipes) if recipes else []
        self.plan = plan if plan is not None else Plan()
        # None until the user saves preferences; imports without them keep the current ones
        self.preferences = preferences
        self.version = version
        self.export_date = export_date

    def __str__(self) -> str:
        return f"AppData v{self.version} - {len(self.recipes)} recipes - {self.plan}"

    __repr__ = __str__

    def stamp(self):
        '''Refreshes exportDate with the current time.'''
        self.export_date = datetime.now().isoformat()
        return self

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        prefs = d.get("preferences")
        return AppData(
            recipes=[Recipe.from_dict(r) for r in d.get("recipes") or []],
            plan=Plan.from_dict(d.get("plan") or {}),
            preferences=UserPreference.from_dict(prefs) if prefs else None,
            version=str(d.get("version") or SNAPSHOT_VERSION),
            export_date=d.get("exportDate", "") or "",
        )

    def to_dict(self):
        return {
            "recipes": [r.to_dict() for r in self.recipes],
            "plan": self.plan.to_dict(),
            "preferences": (self.preferences or UserPreference()).to_dict(),
            "version": self.version,
            "exportDate": self.export_date,
        }
