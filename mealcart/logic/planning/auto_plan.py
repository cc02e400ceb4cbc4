"""Random weekly plan generation."""
import random
from datetime import date
from typing import List, Optional

from mealcart.domain.Plan import Plan, week_range
from mealcart.domain.Recipe import Recipe
from mealcart.utilities.constants import AUTO_PLAN_RECIPES_PER_DAY


def auto_plan_week(plan: Plan, recipes: List[Recipe], anchor: date,
                   per_day: int = AUTO_PLAN_RECIPES_PER_DAY, rng: Optional[random.Random] = None) -> List[str]:
    """Fill every day of the week containing ``anchor`` with random recipes.

    Rules:
      - Each day of the week is overwritten with ``per_day`` recipe ids.
      - Recipes are drawn from one shuffled copy of the catalog; when it runs
        out it starts over from the beginning, so a small catalog repeats.
      - An empty catalog leaves the plan untouched.
    Returns:
        The ISO dates that were (re)assigned.
    """
    if not recipes:
        return []
    rng = rng or random.Random()
    shuffled = list(recipes)
    rng.shuffle(shuffled)
    idx = 0
    days = week_range(anchor)
    for day in days:
        selection = []
        for _ in range(per_day):
            if idx >= len(shuffled):
                idx = 0
            selection.append(shuffled[idx].id)
            idx += 1
        plan.set_day(day, selection)
    return days
