"""Unit tests for TranslationService."""

from unittest.mock import MagicMock, patch

import pytest

from infrastructure.cache import NullCache
from infrastructure.errors import ConflictError, NotFoundError, ValidationError
from modules.translations.models import TRANSLATABLE_FIELDS
from modules.translations.service import TranslationService
from modules.translations.store import UniqueConstraintError

pytestmark = pytest.mark.unit


class TestCreateTranslation:
    """Tests for create_translation()."""

    def test_create_then_get_round_trip(self, service, create, translation_fields):
        """A created translation reads back equal on all translatable fields."""
        created = create(language_code="EN_us")
        fetched = service.get_translation(1, "en-us")

        assert created.language_code == "en-us"
        assert created.id is not None
        for field in TRANSLATABLE_FIELDS:
            assert getattr(fetched, field) == translation_fields[field]

    def test_unsupported_language(self, create, store):
        with pytest.raises(ValidationError) as exc_info:
            create(language_code="fr-fr")

        assert exc_info.value.code == "UNSUPPORTED_LANGUAGE"
        assert store.count_translations(1) == 0

    def test_invalid_content_rejected_before_store(self, create, store):
        with pytest.raises(ValidationError):
            create(title="x" * 201)

        assert store.count_translations(1) == 0

    def test_author_length_enforced(self, create):
        with pytest.raises(ValidationError) as exc_info:
            create(author="x" * 101)

        assert exc_info.value.details["field"] == "author"

    def test_duplicate_rejected(self, create, service):
        """A second create for the same pair conflicts and does not overwrite."""
        create(title="First")

        with pytest.raises(ConflictError):
            create(title="Second")

        assert service.get_translation(1, "zh-cn").title == "First"

    def test_store_unique_violation_maps_to_conflict(self, cache, language_resolver, translation_fields):
        """A race lost at the store surfaces as ConflictError."""
        store = MagicMock()
        store.find_translation.return_value = None
        store.create_translation.side_effect = UniqueConstraintError("duplicate key")
        service = TranslationService(store, cache, language_resolver)

        with pytest.raises(ConflictError) as exc_info:
            service.create_translation(1, "zh-cn", **translation_fields)

        assert "duplicate key" not in exc_info.value.message

    def test_unknown_config_maps_to_not_found(self, create):
        with pytest.raises(NotFoundError) as exc_info:
            create(config_id=99)

        assert exc_info.value.code == "CONFIG_NOT_FOUND"

    def test_create_invalidates_without_populating(self, create, cache):
        create(language_code="en-us")

        assert cache.operations("delete") == ["config:1:lang:en-us"]
        assert cache.operations("set") == []


class TestGetTranslation:
    """Tests for get_translation()."""

    def test_miss_populates_cache_with_ttl(self, service, create, cache):
        create()
        cache.calls.clear()

        service.get_translation(1, "zh-cn")

        assert cache.operations("set") == [("config:1:lang:zh-cn", 3600)]

    def test_hit_does_not_touch_store(self, service, create, store):
        create()
        service.get_translation(1, "zh-cn")

        with patch.object(store, "find_translation") as find:
            translation = service.get_translation(1, "zh-cn")

        find.assert_not_called()
        assert translation.title == "示例站点"

    def test_sentinel_like_content_survives_cache_hit(self, service, create, store):
        """Titles and keywords spelled like codec sentinels stay strings."""
        create(title="__NAN__", keywords=["__INFINITY__", "x"])
        first = service.get_translation(1, "zh-cn")

        with patch.object(store, "find_translation") as find:
            second = service.get_translation(1, "zh-cn")

        find.assert_not_called()
        assert second.title == first.title == "__NAN__"
        assert second.keywords == first.keywords == ["__INFINITY__", "x"]

    def test_absent_returns_none_and_is_not_cached(self, service, cache):
        assert service.get_translation(1, "ja-jp") is None
        assert cache.operations("set") == []

    def test_normalizes_language(self, service, create):
        create(language_code="ja-jp")

        assert service.get_translation(1, "JA_JP").language_code == "ja-jp"

    def test_works_without_cache(self, store, language_resolver, translation_fields):
        """With NullCache every read goes to the store."""
        service = TranslationService(store, NullCache(), language_resolver)
        service.create_translation(1, "zh-cn", **translation_fields)

        assert service.get_translation(1, "zh-cn").title == translation_fields["title"]

    def test_unreadable_cache_entry_falls_back_to_store(self, service, create, cache):
        create()
        cache.set("config:1:lang:zh-cn", {"unexpected": True}, 3600)

        assert service.get_translation(1, "zh-cn").title == "示例站点"


class TestUpdateTranslation:
    """Tests for update_translation()."""

    def test_update_is_never_served_stale(self, service, create):
        """After a cached read, an update is visible on the next read."""
        create()
        assert service.get_translation(1, "zh-cn").title == "示例站点"

        service.update_translation(1, "zh-cn", {"title": "新标题"})

        assert service.get_translation(1, "zh-cn").title == "新标题"

    def test_partial_update_keeps_other_fields(self, service, create):
        create()

        updated = service.update_translation(1, "zh-cn", {"keywords": ["新"]})

        assert updated.keywords == ["新"]
        assert updated.author == "作者"

    def test_missing_translation(self, service):
        with pytest.raises(NotFoundError):
            service.update_translation(1, "en-us", {"title": "x"})

    def test_invalid_change(self, service, create):
        create()

        with pytest.raises(ValidationError):
            service.update_translation(1, "zh-cn", {"description": "x" * 1001})

    def test_unknown_field(self, service, create):
        create()

        with pytest.raises(ValidationError):
            service.update_translation(1, "zh-cn", {"homepage": "x"})

    def test_none_values_ignored(self, service, create, cache):
        create()
        cache.calls.clear()

        updated = service.update_translation(1, "zh-cn", {"title": None})

        assert updated.title == "示例站点"
        assert cache.operations("delete") == ["config:1:lang:zh-cn"]


class TestFallback:
    """Tests for get_translation_with_fallback()."""

    def test_requested_language_present(self, service, create):
        create(language_code="en-us", title="English")

        content = service.get_translation_with_fallback(1, "EN-US")

        assert content.actual_language == "en-us"
        assert content.translation.title == "English"

    def test_falls_back_to_default(self, service, create):
        create(language_code="zh-cn")

        with patch("modules.translations.service.logger") as mock_logger:
            content = service.get_translation_with_fallback(1, "fr-fr")

        assert content.actual_language == "zh-cn"
        assert content.translation.language_code == "zh-cn"
        mock_logger.info.assert_called_once_with(
            "language_fallback",
            config_id=1,
            requested_language="fr-fr",
            actual_language="zh-cn",
        )

    def test_fallback_is_two_level_only(self, service, create):
        """Only the default language is tried; other languages are not."""
        create(language_code="en-us")

        with pytest.raises(NotFoundError):
            service.get_translation_with_fallback(1, "ja-jp")

    def test_default_requested_and_missing(self, service):
        with pytest.raises(NotFoundError):
            service.get_translation_with_fallback(1, "zh-cn")


class TestGetAllTranslations:
    """Tests for get_all_translations()."""

    def test_ordered_by_language(self, service, create):
        for code in ["zh-cn", "en-us", "ja-jp"]:
            create(language_code=code)

        codes = [t.language_code for t in service.get_all_translations(1)]

        assert codes == ["en-us", "ja-jp", "zh-cn"]

    def test_empty(self, service):
        assert service.get_all_translations(2) == []


class TestDeleteTranslation:
    """Tests for delete_translation()."""

    def test_default_language_protection(self, service, create, store):
        create(language_code="zh-cn")
        create(language_code="en-us")

        with pytest.raises(ValidationError):
            service.delete_translation(1, "zh-cn")
        assert store.find_translation(1, "zh-cn") is not None

        service.delete_translation(1, "en-us")
        service.delete_translation(1, "zh-cn")

        assert store.count_translations(1) == 0

    def test_delete_missing(self, service):
        with pytest.raises(NotFoundError):
            service.delete_translation(1, "en-us")

    def test_delete_invalidates_cache(self, service, create, cache):
        create(language_code="en-us")
        service.get_translation(1, "en-us")

        service.delete_translation(1, "EN_US")

        assert cache.get("config:1:lang:en-us") is None
        assert service.get_translation(1, "en-us") is None


class TestInvalidateAllCachesForConfig:
    """Tests for invalidate_all_caches_for_config()."""

    def test_clears_every_language_of_one_config(self, service, create, cache):
        for code in ["zh-cn", "en-us", "ja-jp"]:
            create(config_id=1, language_code=code)
            service.get_translation(1, code)
        create(config_id=2, language_code="zh-cn")
        service.get_translation(2, "zh-cn")

        service.invalidate_all_caches_for_config(1)

        assert cache.keys() == ["config:2:lang:zh-cn"]
        assert cache.operations("delete_by_prefix") == ["config:1:lang:*"]

    def test_safe_when_nothing_cached(self, service, cache):
        service.invalidate_all_caches_for_config(1)

        assert cache.operations("delete_by_prefix") == ["config:1:lang:*"]
