"""
Input validation schemas using Pydantic for the HTTP boundary.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List


class GroceryItemInput(BaseModel):
    """Schema for a grocery item typed in by the user."""
    name: str = Field(..., min_length=1, max_length=200)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace; reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError('Item name cannot be empty')
        return v


class MealSlotInput(BaseModel):
    """Schema for the recipe assigned to one day/slot of the meal plan."""
    name: str = Field(..., min_length=1, max_length=200)
    ingredients: List[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Filter out empty ingredient lines; the rest are kept verbatim."""
        return [line for line in v if line and line.strip()]
