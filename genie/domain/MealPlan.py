"""MealPlan domain entity: recipes scheduled per calendar day and meal slot."""
from datetime import date, datetime
from typing import Dict, Optional

from genie.domain.Recipe import Recipe
from genie.utilities.constants import MEAL_PLAN_DATE_FORMAT


class MealPlan:
    def __init__(self, meals_by_day: Optional[Dict[date, Dict[str, Recipe]]] = None):
        self.meals_by_day: Dict[date, Dict[str, Recipe]] = meals_by_day or {}

    def set_meal(self, day: date, slot: str, recipe: Recipe):
        self.meals_by_day.setdefault(day, {})[slot] = recipe

    def clear_meal(self, day: date, slot: str):
        meals = self.meals_by_day.get(day)
        if meals and slot in meals:
            del meals[slot]
            if not meals:
                del self.meals_by_day[day]

    def recipe_count(self) -> int:
        return sum(len(meals) for meals in self.meals_by_day.values())

    def __str__(self) -> str:
        return f"MealPlan({len(self.meals_by_day)} days, {self.recipe_count()} recipes)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Builds a plan from {"YYYY-MM-DD": {slot: recipe_dict}}. Unparseable days are skipped.'''
        plan = MealPlan()
        if not isinstance(data, dict):
            return plan
        for day_str, meals in data.items():
            try:
                day = datetime.strptime(day_str, MEAL_PLAN_DATE_FORMAT).date()
            except (TypeError, ValueError):
                continue
            if not isinstance(meals, dict):
                continue
            for slot, recipe in meals.items():
                if isinstance(recipe, dict):
                    plan.set_meal(day, slot, Recipe.from_dict(recipe))
        return plan

    def to_dict(self):
        return {
            day.strftime(MEAL_PLAN_DATE_FORMAT): {slot: recipe.to_dict() for slot, recipe in meals.items()}
            for day, meals in sorted(self.meals_by_day.items())
        }
