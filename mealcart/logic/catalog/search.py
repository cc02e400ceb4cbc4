"""Recipe browsing: text search, category and bucket filters, tag list.

Bucket names:
  cook time: fast (<= 20 min), medium (<= 45), slow (> 45)
  calories:  low (<= 300 kcal), medium (<= 600), high (> 600)
  price:     cheap (<= ¥20), moderate (<= ¥50), expensive (> ¥50)
"all" (the default) disables a bucket filter. Selected tags are ANDed.
"""
from typing import Iterable, List, Optional

from mealcart.domain.Recipe import Recipe
from mealcart.utilities.constants import ALL_CATEGORIES

# bucket -> (exclusive lower bound, inclusive upper bound)
TIME_BUCKETS = {'fast': (None, 20), 'medium': (20, 45), 'slow': (45, None)}
CALORIE_BUCKETS = {'low': (None, 300), 'medium': (300, 600), 'high': (600, None)}
PRICE_BUCKETS = {'cheap': (None, 20), 'moderate': (20, 50), 'expensive': (50, None)}


def _in_bucket(value, buckets, name: str) -> bool:
    if name == 'all':
        return True
    low, high = buckets[name]
    value = value or 0
    if low is not None and value <= low:
        return False
    if high is not None and value > high:
        return False
    return True


def matches_search(recipe: Recipe, text: str) -> bool:
    """Title matches case-insensitively, ingredient names as typed."""
    text = text or ''
    if text.lower() in recipe.title.lower():
        return True
    return any(text in ing.name for ing in recipe.ingredients)


def filter_recipes(recipes: Iterable[Recipe], search: str = '', category: str = ALL_CATEGORIES,
                   time: str = 'all', calories: str = 'all', price: str = 'all',
                   tags: Optional[List[str]] = None) -> List[Recipe]:
    """Return the recipes passing every filter, in catalog order.

    Raises:
        KeyError: for a bucket name that is not defined above.
    """
    for name, buckets in ((time, TIME_BUCKETS), (calories, CALORIE_BUCKETS), (price, PRICE_BUCKETS)):
        if name != 'all' and name not in buckets:
            raise KeyError(name)
    wanted = list(tags or [])
    result = []
    for r in recipes:
        if not matches_search(r, search):
            continue
        if category != ALL_CATEGORIES and r.category != category:
            continue
        if not (_in_bucket(r.cook_time, TIME_BUCKETS, time)
                and _in_bucket(r.calories, CALORIE_BUCKETS, calories)
                and _in_bucket(r.price, PRICE_BUCKETS, price)):
            continue
        if not all(t in r.tags for t in wanted):
            continue
        result.append(r)
    return result


def all_tags(recipes: Iterable[Recipe]) -> List[str]:
    """Every tag used by the catalog, sorted."""
    return sorted({t for r in recipes for t in r.tags})


__all__ = ['CALORIE_BUCKETS', 'PRICE_BUCKETS', 'TIME_BUCKETS', 'all_tags', 'filter_recipes', 'matches_search']
