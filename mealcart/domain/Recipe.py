"""Recipe domain entity: id, title, ingredients and display-only details (price, calories, tags...)."""
from typing import List, Optional
from mealcart.domain.Ingredient import Ingredient
from mealcart.utilities.constants import DEFAULT_RECIPE_CATEGORY


class Recipe:
    def __init__(self, id: str = "", title: str = "", ingredients: Optional[List[Ingredient]] = None,
                 description: str = "", image: str = "", cook_time: int = 30, calories: float = 0,
                 tags: Optional[List[str]] = None, instructions: Optional[List[str]] = None,
                 rating: float = 0, times_cooked: int = 0, last_cooked: Optional[str] = None,
                 category: str = DEFAULT_RECIPE_CATEGORY, price: float = 0):
        self.id = id
        self.title = title
        self.ingredients = tuple(ingredients) if ingredients else ()
        self.description = description
        self.image = image
        self.cook_time = cook_time
        self.calories = calories
        self.tags = tags[:] if tags else []
        self.instructions = instructions[:] if instructions else []
        self.rating = rating
        self.times_cooked = times_cooked
        self.last_cooked = last_cooked
        self.category = category
        self.price = price

    def __str__(self) -> str:
        return f"{self.title} ({self.id}) - {len(self.ingredients)} ingredients - {self.calories} kcal - ¥{self.price}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Recipe from the camelCase JSON shape used by the snapshot file.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Recipe(
            id=str(d.get("id", "")),
            title=d.get("title", "") or "",
            ingredients=[Ingredient.from_dict(ing) for ing in d.get("ingredients") or []],
            description=d.get("description", "") or "",
            image=d.get("image", "") or "",
            cook_time=d.get("cookTime", 30) or 0,
            calories=d.get("calories", 0) or 0,
            tags=d.get("tags") or [],
            instructions=d.get("instructions") or [],
            rating=d.get("rating", 0) or 0,
            times_cooked=d.get("timesCooked", 0) or 0,
            last_cooked=d.get("lastCooked"),
            category=d.get("category") or DEFAULT_RECIPE_CATEGORY,
            price=d.get("price", 0) or 0,
        )

    def to_dict(self):
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "cookTime": self.cook_time,
            "calories": self.calories,
            "tags": self.tags,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
            "rating": self.rating,
            "timesCooked": self.times_cooked,
            "category": self.category,
            "price": self.price,
        }
        if self.last_cooked:
            data["lastCooked"] = self.last_cooked
        return data


def index_by_id(recipes: List[Recipe]):
    """Map recipe id -> recipe; the first recipe wins when ids repeat."""
    index = {}
    for r in recipes or []:
        index.setdefault(r.id, r)
    return index
