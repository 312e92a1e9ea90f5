"""Meal plan repository: JSON file keyed by ISO date, then meal slot."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Union

from genie.domain.MealPlan import MealPlan

logger = logging.getLogger(__name__)


class MealPlanRepository:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> MealPlan:
        """Load the current plan with graceful error handling."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info(f"Meal plan file not found: {self.path}. Using an empty plan.")
            return MealPlan()
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Invalid meal plan file {self.path}: {e}")
            return MealPlan()
        return MealPlan.from_dict(data)

    def save(self, plan: MealPlan) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".meal_plan_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(plan.to_dict(), tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
