"""
Food Places API: Settings and Store Factory Tests
=================================================

What we test:
    ✅ store_backend / log_level validation
    ✅ Startup validation for the supabase backend
    ✅ CORS origin splitting
    ✅ build_store picks the backend named in settings
"""

import pytest
from pydantic import ValidationError

from foodplaces.config import Settings
from foodplaces.stores import build_store
from foodplaces.stores.memory_store import InMemoryFoodPlaceStore
from foodplaces.stores.sql_store import SqlFoodPlaceStore
from foodplaces.stores.supabase_store import SupabaseFoodPlaceStore


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestSettingsValidation:

    def test_defaults(self):
        cfg = make_settings(store_backend="sql", port=3000)
        assert cfg.port == 3000
        assert cfg.strict_delete is False

    def test_backend_is_normalized(self):
        assert make_settings(store_backend=" Supabase ").store_backend == "supabase"

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(store_backend="mongodb")

    def test_log_level_is_uppercased(self):
        assert make_settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(log_level="LOUD")

    def test_supabase_requires_credentials(self):
        cfg = make_settings(store_backend="supabase", supabase_url="", supabase_key="")

        with pytest.raises(ValueError) as exc_info:
            cfg.validate_required_for_production()
        assert "SUPABASE_URL" in str(exc_info.value)
        assert "SUPABASE_KEY" in str(exc_info.value)

    def test_supabase_with_credentials_passes(self):
        cfg = make_settings(
            store_backend="supabase",
            supabase_url="https://example.supabase.co",
            supabase_key="key",
        )
        cfg.validate_required_for_production()

    def test_memory_needs_nothing(self):
        make_settings(store_backend="memory", database_url="").validate_required_for_production()

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("*", ["*"]),
            ("http://a.test, http://b.test", ["http://a.test", "http://b.test"]),
            ("http://a.test,,", ["http://a.test"]),
        ],
    )
    def test_cors_origins_list(self, raw, expected):
        assert make_settings(cors_origins=raw).cors_origins_list == expected


class TestBuildStore:

    @pytest.mark.asyncio
    async def test_memory_backend(self):
        store = build_store(make_settings(store_backend="memory"))
        assert isinstance(store, InMemoryFoodPlaceStore)
        await store.close()

    @pytest.mark.asyncio
    async def test_supabase_backend(self):
        store = build_store(
            make_settings(
                store_backend="supabase",
                supabase_url="https://example.supabase.co",
                supabase_key="key",
            )
        )
        assert isinstance(store, SupabaseFoodPlaceStore)
        await store.close()

    @pytest.mark.asyncio
    async def test_sql_backend(self):
        store = build_store(
            make_settings(store_backend="sql", database_url="sqlite+aiosqlite://")
        )
        assert isinstance(store, SqlFoodPlaceStore)
        await store.close()
