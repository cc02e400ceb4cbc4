"""Ingredient domain entity: name, amount, unit and purchasing category."""
from dataclasses import dataclass
from enum import Enum


class IngredientCategory(str, Enum):
    PRODUCE = "produce"
    MEAT = "meat"
    DAIRY = "dairy"
    SEAFOOD = "seafood"
    PANTRY = "pantry"
    OTHER = "other"


@dataclass(frozen=True)
class Ingredient:
    name: str = ""
    amount: str = ""
    unit: str = ""
    category: str = IngredientCategory.OTHER.value

    def __str__(self) -> str:
        return f"{self.name} - {self.amount}{self.unit} ({self.category})"

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        category = d.get("category") or IngredientCategory.OTHER.value
        if isinstance(category, IngredientCategory):
            category = category.value
        return Ingredient(
            name=str(d.get("name") or ""),
            # amounts are sometimes stored as bare numbers
            amount="" if d.get("amount") is None else str(d.get("amount")),
            unit=str(d.get("unit") or ""),
            category=str(category),
        )

    def to_dict(self):
        '''Converts the Ingredient to a dictionary for JSON persistence.'''
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "category": self.category,
        }
