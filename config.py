"""Configuration settings for the Blind Quote Detail Editor."""

import os
from pathlib import Path

# Default to local directory, can be changed to shared network drive
# Example: DATABASE_PATH = Path("//server/share/quote_data")
DATABASE_PATH = Path(os.environ.get('QUOTE_DATABASE_PATH', Path(__file__).parent / 'data'))

# Database file name
DATABASE_NAME = 'accessory_prices.db'

# Full database file path
DATABASE_FILE = DATABASE_PATH / DATABASE_NAME

# Seed files for the accessory price tables
SEED_DATA_PATH = Path(__file__).parent / 'data' / 'seed'


def ensure_directories():
    """Create required directories if they don't exist."""
    DATABASE_PATH.mkdir(parents=True, exist_ok=True)


# SQLite connection string
def get_database_url():
    """Get SQLAlchemy database URL."""
    ensure_directories()
    return f"sqlite:///{DATABASE_FILE}"


# Application settings
APP_NAME = "Blind Quote Detail Editor"
APP_VERSION = "1.0.0"

# Logging
LOG_LEVEL = os.environ.get('QUOTE_LOG_LEVEL', 'INFO')
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Editor defaults
DEFAULT_PRODUCT_TYPE = "rollerBlind"
DEFAULT_ROW_COUNT = 8  # Blank rows a new quote opens with (sentinel not included)

# Focus deferral after a mode transition (ms), runs after the pending repaint
FOCUS_DELAY_MS = 50
SELECT_DELAY_MS = 0
