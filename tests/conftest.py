"""Root pytest configuration.

Test Structure:
    tests/
    ├── cashcast/
    │   └── unit/              # Fast, isolated tests (no network)
    ├── cashcast_config/       # Settings loading
    └── shared/                # Shared fixtures and factories
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from cashcast_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from the current environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
