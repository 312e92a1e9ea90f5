from typing import Final

GROCERY_LIST_TITLE: Final[str] = "Grocery List"
GROCERY_LIST_HEADER: Final[str] = "Based on your weekly meal plan, you will need:"

SYNC_PROMPT_TITLE: Final[str] = "Sync Grocery List?"
SYNC_PROMPT_MESSAGE: Final[str] = (
    "This will sync your grocery list with your current meal plan. "
    "Any changes will be lost."
)
SYNC_CANCEL_LABEL: Final[str] = "Cancel"
SYNC_CONFIRM_LABEL: Final[str] = "Sync"

MEAL_PLAN_DATE_FORMAT: Final[str] = "%Y-%m-%d"
MAX_EVENTS: Final[int] = 300
