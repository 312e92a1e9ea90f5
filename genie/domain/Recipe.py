"""Recipe domain entity: name and ordered ingredient lines."""
from typing import List, Optional

from genie.domain.Ingredient import Ingredient


class Recipe:
    def __init__(self, name: str = "", ingredients: Optional[List[Ingredient]] = None):
        self.name = name
        self.ingredients = ingredients[:] if ingredients else []

    def __str__(self) -> str:
        return f"{self.name} - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        ingredients = [Ingredient.from_dict(ing) for ing in d.get("ingredients", []) or []]
        return Recipe(name=str(d.get("name", "")), ingredients=ingredients)

    def to_dict(self):
        return {
            "name": self.name,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }
