from mealpack.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
SETTINGS_FILE = DATA_DIR / 'settings.json'

__all__ = ['DATA_DIR', 'SETTINGS_FILE']
