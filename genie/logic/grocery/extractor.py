"""Grocery list derivation.

Provides derive_grocery_items(meals_by_day, id_factory) which flattens
day -> slot -> recipe -> ingredients into one unchecked GroceryItem per
ingredient line. Identical lines from different recipes stay separate items.
"""
from datetime import date
from typing import Dict, Iterator, List, Mapping

from genie.domain.GroceryItem import GroceryItem, IdFactory, uuid_ids
from genie.domain.Recipe import Recipe

MealsByDay = Mapping[date, Mapping[str, Recipe]]


def _day_order(meals_by_day: MealsByDay) -> List[date]:
    # Calendar order by day; keys without a date shape keep mapping order
    try:
        return sorted(meals_by_day, key=lambda d: (d.year, d.month, d.day))
    except (AttributeError, TypeError):
        return list(meals_by_day)


def _iter_recipes(meals_by_day: MealsByDay) -> Iterator[Recipe]:
    for day in _day_order(meals_by_day):
        for recipe in meals_by_day[day].values():
            yield recipe


def derive_grocery_items(meals_by_day: MealsByDay, id_factory: IdFactory = uuid_ids) -> List[GroceryItem]:
    """Build the grocery list for a meal plan.

    Args:
        meals_by_day: mapping of date -> {slot name: Recipe}; may be empty.
        id_factory: id strategy for the new items.

    Returns:
        New unchecked items, one per ingredient, named by the ingredient text.
    """
    return [
        GroceryItem.create(ingredient.text, id_factory)
        for recipe in _iter_recipes(meals_by_day)
        for ingredient in recipe.ingredients
    ]


def count_ingredients(meals_by_day: MealsByDay) -> int:
    return sum(len(recipe.ingredients) for recipe in _iter_recipes(meals_by_day))


def ingredient_names_by_day(meals_by_day: MealsByDay) -> Dict[date, List[str]]:
    """Ingredient texts grouped per day, for previews before a sync."""
    return {
        day: [ing.text for recipe in meals_by_day[day].values() for ing in recipe.ingredients]
        for day in _day_order(meals_by_day)
    }


__all__ = ['derive_grocery_items', 'count_ingredients', 'ingredient_names_by_day']
