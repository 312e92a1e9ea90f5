from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from genie.api.context import GenieContext, get_genie
from genie.domain.Ingredient import Ingredient
from genie.domain.Recipe import Recipe
from genie.utilities.validators import MealSlotInput

router = APIRouter(prefix="/api/meal-plan", tags=["meal-plan"])


@router.get("")
def get_meal_plan(genie: GenieContext = Depends(get_genie)):
    plan = genie.plan_repository.load()
    return {"meals_by_day": plan.to_dict(), "recipe_count": plan.recipe_count()}


@router.put("/{day}/{slot}")
def set_meal(day: date, slot: str, payload: MealSlotInput, genie: GenieContext = Depends(get_genie)):
    recipe = Recipe(payload.name, [Ingredient(text) for text in payload.ingredients])

    def _update():
        plan = genie.plan_repository.load()
        plan.set_meal(day, slot, recipe)
        genie.plan_repository.save(plan)
        return plan
    plan = genie.context.call(_update)
    return {"meals_by_day": plan.to_dict(), "recipe_count": plan.recipe_count()}


@router.delete("/{day}/{slot}")
def clear_meal(day: date, slot: str, genie: GenieContext = Depends(get_genie)):
    def _clear():
        plan = genie.plan_repository.load()
        if slot not in plan.meals_by_day.get(day, {}):
            return None
        plan.clear_meal(day, slot)
        genie.plan_repository.save(plan)
        return plan
    plan = genie.context.call(_clear)
    if plan is None:
        raise HTTPException(status_code=404, detail="No meal planned for this slot")
    return {"meals_by_day": plan.to_dict(), "recipe_count": plan.recipe_count()}
