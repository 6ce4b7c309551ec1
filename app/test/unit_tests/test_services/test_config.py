"""
Tests for configuration loading and database URL construction.
"""

from app.core.config import Config, ConfigFile, get_config
from app.create_app import get_app
from app.database.base import engine_kw, get_db_url, get_engine_kw
from app.utils.constants import DEFAULT_DAILY_THRESHOLD_KG


def test_test_config_uses_sqlite(test_config):
    url = get_db_url(test_config)

    assert url.drivername == "sqlite+aiosqlite"
    assert url.database == "green_campus_test.db"
    assert get_engine_kw(url) == {}
    # building the URL leaves the loaded config untouched
    assert test_config.data["db"]["drivername"] == "sqlite+aiosqlite"


def test_production_config_uses_asyncpg_pool_settings():
    url = get_db_url(get_config(ConfigFile.PRODUCTION))

    assert url.drivername == "postgresql+asyncpg"
    assert get_engine_kw(url) is engine_kw


def test_daily_threshold(test_config):
    assert test_config.daily_threshold_kg == 5.0
    assert Config("custom.toml", {"rewards": {"daily_threshold_kg": 3}}).daily_threshold_kg == 3.0
    assert Config("empty.toml", {}).daily_threshold_kg == DEFAULT_DAILY_THRESHOLD_KG


def test_app_factory_uses_config_and_registers_handlers():
    app = get_app(ConfigFile.TEST)
    paths = {route.path for route in app.routes}

    assert app.state.config is get_config(ConfigFile.TEST)
    assert app.title == "Green Campus Carbon Tracker API"
    assert "/api/v1/calculations/preview" in paths
    assert "/api/v1/factors/{category}/import" in paths
    assert Exception in app.exception_handlers
