"""Configuration management for the Genie grocery service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('GENIE_DATA_DIR', str(BASE_DIR / 'data')))
GROCERY_STORE_FILE: Final[Path] = Path(os.getenv('GROCERY_STORE_FILE', str(DATA_DIR / 'user_defaults.json')))
MEAL_PLAN_FILE: Final[Path] = Path(os.getenv('MEAL_PLAN_FILE', str(DATA_DIR / 'meal_plan.json')))

# Persistence
GROCERY_STORAGE_KEY: Final[str] = os.getenv('GROCERY_STORAGE_KEY', 'groceryListData')
# best_effort: storage failures are logged and absorbed; strict: they raise
PERSISTENCE_MODE: Final[str] = os.getenv('PERSISTENCE_MODE', 'best_effort').lower()
