"""Shopping list builder.

Provides aggregate(plan, recipes, previous=None) -> ShoppingResult(weekly, daily).

The weekly list folds every planned recipe into one row per normalized
ingredient name; the daily lists repeat the same folding per date. Only fresh
goods (produce, meat, seafood, dairy) are kept. Unknown recipe ids and
non-numeric amounts never raise: the former are skipped, the latter are kept
as free text.
"""
import logging
from typing import Dict, Iterable, List, NamedTuple, Optional

from mealcart.domain.Ingredient import Ingredient
from mealcart.domain.Plan import Plan
from mealcart.domain.Recipe import Recipe, index_by_id
from mealcart.domain.ShoppingList import AggregatedIngredient, DailyShoppingList, ShoppingItem
from mealcart.logic.shopping.normalizer import normalize_name
from mealcart.logic.shopping.quantity import classify_amount
from mealcart.utilities.constants import FRESH_CATEGORIES, SHOPPING_CATEGORY_LABELS

logger = logging.getLogger(__name__)


class ShoppingResult(NamedTuple):
    weekly: List[ShoppingItem]
    daily: List[DailyShoppingList]


def is_fresh(ingredient: Ingredient) -> bool:
    return ingredient.category in FRESH_CATEGORIES


def fold_ingredients(ingredients: Iterable[Ingredient], target: Dict[str, AggregatedIngredient]):
    """Add ingredients to ``target`` (normalized name -> AggregatedIngredient) in place."""
    for ing in ingredients:
        if not is_fresh(ing):
            continue
        name = normalize_name(ing.name)
        entry = target.get(name)
        if entry is None:
            # first category seen for a name sticks
            entry = target[name] = AggregatedIngredient(name, ing.category)
        amount = classify_amount(ing.amount, ing.unit)
        if amount.is_numeric:
            entry.add_quantity(amount.unit, amount.quantity)
        else:
            entry.add_free_text(amount.text)
    return target


def format_items(aggregated: Dict[str, AggregatedIngredient]) -> List[ShoppingItem]:
    items = [entry.to_item() for entry in aggregated.values()]
    # stable: rows of one category keep first-seen order
    items.sort(key=lambda item: item.category)
    return items


def carry_checked(items: List[ShoppingItem], previous: Optional[List[ShoppingItem]]) -> List[ShoppingItem]:
    """Copy checked flags from ``previous`` rows with the same name; new names stay unchecked."""
    if not previous:
        return items
    checked = {}
    for old in previous:
        checked.setdefault(old.name, old.checked)
    for item in items:
        item.checked = checked.get(item.name, False)
    return items


def aggregate(plan: Plan, recipes: List[Recipe], previous: Optional[List[ShoppingItem]] = None) -> ShoppingResult:
    """Build the weekly and per-day shopping lists for every date in ``plan``.

    Args:
        plan: Plan mapping ISO dates to recipe ids (duplicates count twice).
        recipes: Recipe catalog; ids missing from it are skipped silently.
        previous: The previous weekly list, used only to carry checked flags.

    Returns:
        ShoppingResult(weekly, daily). Daily lists with no rows are omitted and
        always start unchecked.
    """
    if plan is None or not plan.meals:
        return ShoppingResult([], [])

    catalog = index_by_id(recipes)
    weekly: Dict[str, AggregatedIngredient] = {}
    daily: List[DailyShoppingList] = []
    skipped = 0

    for day in plan.sorted_dates():
        day_map: Dict[str, AggregatedIngredient] = {}
        for recipe_id in plan.recipes_for(day):
            recipe = catalog.get(recipe_id)
            if recipe is None:
                skipped += 1
                continue
            fold_ingredients(recipe.ingredients, weekly)
            fold_ingredients(recipe.ingredients, day_map)
        if day_map:
            daily.append(DailyShoppingList(day, format_items(day_map)))

    if skipped:
        logger.debug("Skipped %s planned ids with no matching recipe", skipped)

    return ShoppingResult(carry_checked(format_items(weekly), previous), daily)


def group_by_category(items: List[ShoppingItem]):
    """Group rows for display: [(category, label, rows)] in label order, empty groups omitted."""
    groups = []
    for category, label in SHOPPING_CATEGORY_LABELS.items():
        rows = [i for i in items if i.category == category]
        if rows:
            groups.append((category, label, rows))
    return groups


def pending_count(items: List[ShoppingItem]) -> int:
    return sum(1 for i in items if not i.checked)


__all__ = ['ShoppingResult', 'aggregate', 'carry_checked', 'fold_ingredients', 'format_items',
           'group_by_category', 'is_fresh', 'pending_count']
