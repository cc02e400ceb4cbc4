"""Shopping list entities: per-name accumulator, display rows and per-day groups."""
import math
from typing import Dict, List, Optional

from mealcart.utilities.constants import DETAILS_SEPARATOR


def format_quantity(value: float) -> str:
    """Round half up to 2 decimals and print integral values without a decimal point.

    NaN and infinities print as "NaN", "Infinity" and "-Infinity". Totals too
    large to scale by 100 are printed as they are.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    scaled = value * 100
    if math.isfinite(scaled):
        value = math.floor(scaled + 0.5) / 100
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


class AggregatedIngredient:
    """Everything collected for one normalized name during a single aggregation pass.

    The category is fixed by the first raw ingredient that mapped to the name.
    ``unit_totals`` and ``free_text_amounts`` keep insertion order, which is the
    order the details string is rendered in.
    """

    def __init__(self, normalized_name: str, category: str):
        self.normalized_name = normalized_name
        self.category = category
        self.unit_totals: Dict[str, float] = {}
        self.free_text_amounts: Dict[str, None] = {}

    def add_quantity(self, unit: str, quantity: float):
        self.unit_totals[unit] = self.unit_totals.get(unit, 0) + quantity

    def add_free_text(self, text: str):
        self.free_text_amounts.setdefault(text, None)

    def details(self) -> str:
        parts = [f"{format_quantity(total)}{unit}" for unit, total in self.unit_totals.items()]
        parts.extend(self.free_text_amounts)
        return DETAILS_SEPARATOR.join(parts)

    def to_item(self) -> "ShoppingItem":
        return ShoppingItem(self.normalized_name, self.details(), self.category)

    def __repr__(self) -> str:
        return (f"AggregatedIngredient({self.normalized_name!r}, {self.category!r}, "
                f"{self.unit_totals!r}, {list(self.free_text_amounts)!r})")


class ShoppingItem:
    def __init__(self, name: str, details: str = "", category: str = "", checked: bool = False):
        self.name = name
        self.details = details
        self.category = category
        self.checked = checked

    def __eq__(self, other):
        if not isinstance(other, ShoppingItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        mark = "x" if self.checked else " "
        return f"[{mark}] {self.name}: {self.details} ({self.category})"

    __repr__ = __str__

    def copy(self) -> "ShoppingItem":
        return ShoppingItem(self.name, self.details, self.category, self.checked)

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingItem(d.get("name", ""), d.get("details", ""), d.get("category", ""), bool(d.get("checked")))

    def to_dict(self):
        return {
            "name": self.name,
            "details": self.details,
            "category": self.category,
            "checked": self.checked,
        }


class DailyShoppingList:
    def __init__(self, date: str, items: Optional[List[ShoppingItem]] = None):
        self.date = date
        self.items = items[:] if items else []

    def __eq__(self, other):
        if not isinstance(other, DailyShoppingList):
            return NotImplemented
        return self.date == other.date and self.items == other.items

    def __str__(self) -> str:
        return f"{self.date}: {len(self.items)} items"

    __repr__ = __str__

    def find(self, name: str) -> Optional[ShoppingItem]:
        for item in self.items:
            if item.name == name:
                return item
        return None

    def copy(self) -> "DailyShoppingList":
        return DailyShoppingList(self.date, [i.copy() for i in self.items])

    def to_dict(self):
        return {"date": self.date, "items": [i.to_dict() for i in self.items]}
