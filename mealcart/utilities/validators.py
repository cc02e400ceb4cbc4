"""
Input validation schemas using Pydantic for the AppData snapshot and API payloads.
"""
import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional, Union

ISO_DATE_PATTERN = r'^\d{4}-\d{2}-\d{2}$'


class IngredientInput(BaseModel):
    """Schema for ingredient validation. Unknown categories are kept; aggregation filters them."""
    name: str = Field(..., max_length=100)
    amount: Union[str, float, int] = ""
    unit: str = ""
    category: str = "other"

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('amount')
    @classmethod
    def amount_as_text(cls, v):
        """Amounts are free text; bare numbers are stored as strings."""
        return str(v)


class RecipeInput(BaseModel):
    """Schema for recipe validation (camelCase keys as in the snapshot file)."""
    model_config = ConfigDict(extra='allow')

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    ingredients: List[IngredientInput] = Field(default_factory=list)
    description: str = ""
    image: str = ""
    cookTime: float = Field(30, ge=0)
    calories: float = Field(0, ge=0)
    tags: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    rating: float = Field(0, ge=0, le=5)
    timesCooked: int = Field(0, ge=0)
    lastCooked: Optional[str] = None
    category: str = "其他"
    price: float = Field(0, ge=0)

    @field_validator('id', mode='before')
    @classmethod
    def id_as_text(cls, v):
        return str(v) if isinstance(v, int) else v

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        """Validate recipe title."""
        if not v.strip():
            raise ValueError('Recipe title cannot be empty')
        return v.strip()

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        """Ensure tags are non-empty strings."""
        return [tag.strip() for tag in v if tag and tag.strip()]


class PreferenceInput(BaseModel):
    """Schema for user preferences."""
    id: str = "default"
    name: str = ""
    dislikes: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    dietaryGoal: Optional[str] = None


class AppDataInput(BaseModel):
    """Schema for an imported snapshot: recipes and plan are mandatory."""
    recipes: List[RecipeInput]
    plan: Dict[str, List[str]]
    preferences: Optional[PreferenceInput] = None
    version: str = "1.0"
    exportDate: str = ""

    @field_validator('plan')
    @classmethod
    def validate_plan_dates(cls, v):
        """Plan keys must be ISO dates."""
        for day in v:
            if not re.match(ISO_DATE_PATTERN, day):
                raise ValueError(f'Plan key is not an ISO date: {day}')
        return v


class PlanEntryInput(BaseModel):
    """Schema for adding a recipe to a plan date."""
    recipe_id: str = Field(..., min_length=1)


class AutoPlanInput(BaseModel):
    """Schema for generating a random week."""
    anchor: Optional[str] = Field(None, pattern=ISO_DATE_PATTERN)
    per_day: int = Field(2, ge=1, le=10)
    seed: Optional[int] = None


class ToggleInput(BaseModel):
    """Schema for checking/unchecking a shopping list row."""
    name: str = Field(..., min_length=1)
    date: Optional[str] = Field(None, pattern=ISO_DATE_PATTERN)
