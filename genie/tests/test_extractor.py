from datetime import date, datetime
import unittest
from genie.domain.GroceryItem import CounterIds
from genie.domain.Ingredient import Ingredient
from genie.domain.Recipe import Recipe
from genie.logic.grocery.extractor import (
    derive_grocery_items, count_ingredients, ingredient_names_by_day
)


def _recipe(name, *lines):
    return Recipe(name, [Ingredient(line) for line in lines])


class TestDeriveGroceryItems(unittest.TestCase):

    def test_empty_plan(self):
        self.assertEqual(derive_grocery_items({}), [])

    def test_days_without_recipes(self):
        self.assertEqual(derive_grocery_items({date(2025, 3, 3): {}}), [])

    def test_breakfast_example(self):
        meals = {date(2025, 3, 3): {"breakfast": _recipe("Eggs on toast", "eggs", "toast")}}
        items = derive_grocery_items(meals, CounterIds())
        self.assertEqual(len(items), 2)
        self.assertEqual(sorted(i.name for i in items), ["eggs", "toast"])
        self.assertTrue(all(not i.is_checked for i in items))
        self.assertEqual(len({i.id for i in items}), 2)

    def test_no_deduplication_across_recipes(self):
        meals = {
            date(2025, 3, 3): {"breakfast": _recipe("Omelette", "eggs", "cheese"),
                               "dinner": _recipe("Pancakes", "eggs", "flour", "milk")},
            date(2025, 3, 4): {"lunch": _recipe("Frittata", "eggs")},
        }
        items = derive_grocery_items(meals, CounterIds())
        self.assertEqual(len(items), count_ingredients(meals))
        self.assertEqual(len(items), 6)
        self.assertEqual([i.name for i in items].count("eggs"), 3)

    def test_days_are_in_calendar_order(self):
        meals = {
            date(2025, 3, 5): {"lunch": _recipe("Soup", "carrots")},
            date(2025, 3, 3): {"lunch": _recipe("Salad", "lettuce")},
        }
        names = [i.name for i in derive_grocery_items(meals, CounterIds())]
        self.assertEqual(names, ["lettuce", "carrots"])

    def test_ingredient_text_is_verbatim(self):
        meals = {date(2025, 3, 3): {"dinner": _recipe("Curry", "  1 cup Basmati rice ")}}
        self.assertEqual(derive_grocery_items(meals)[0].name, "  1 cup Basmati rice ")

    def test_does_not_mutate_plan(self):
        recipe = _recipe("Soup", "carrots", "onion")
        meals = {date(2025, 3, 3): {"lunch": recipe}}
        derive_grocery_items(meals)
        self.assertEqual([i.text for i in recipe.ingredients], ["carrots", "onion"])
        self.assertEqual(list(meals[date(2025, 3, 3)]), ["lunch"])

    def test_ingredient_names_by_day(self):
        meals = {date(2025, 3, 3): {"breakfast": _recipe("Toast", "bread", "butter")}}
        self.assertEqual(ingredient_names_by_day(meals), {date(2025, 3, 3): ["bread", "butter"]})

    def test_mixed_date_and_datetime_days(self):
        meals = {
            datetime(2025, 3, 4, 8): {"breakfast": _recipe("Porridge", "oats")},
            date(2025, 3, 3): {"dinner": _recipe("Curry", "rice", "lentils")},
        }
        names = [i.name for i in derive_grocery_items(meals, CounterIds())]
        self.assertEqual(names, ["rice", "lentils", "oats"])
        self.assertEqual(count_ingredients(meals), 3)
        self.assertEqual(list(ingredient_names_by_day(meals).values()), [["rice", "lentils"], ["oats"]])

    def test_non_date_days_keep_mapping_order(self):
        meals = {
            "monday": {"lunch": _recipe("Soup", "carrots")},
            3: {"lunch": _recipe("Salad", "lettuce")},
        }
        names = [i.name for i in derive_grocery_items(meals, CounterIds())]
        self.assertEqual(names, ["carrots", "lettuce"])
