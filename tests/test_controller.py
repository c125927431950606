"""Tests for the Parrot controller, language catalog and module helpers."""

import pytest

import parrot
from parrot import (
    BlueprintError,
    EntryKindError,
    LanguageCatalog,
    Parrot,
    UnknownEntryError,
    UnknownLanguageError,
)

EN = {
    "Static": {"actions": {"upload": "Upload", "remove": "Remove"}},
    "Dynamic": {
        "messages": {
            "greet": {"value": "Hello {name}", "placeholders": "name"},
            "doing": {"holders": "action", "value": "Doing {action}"},
        }
    },
}

AR = {
    "Static": {"actions": {"upload": "Tahmil"}},
    "Dynamic": {"messages": {"greet": {"value": "Marhaba {name}", "placeholders": "name"}}},
}


@pytest.fixture
def engine():
    p = Parrot()
    p.activate(EN, language="en")
    return p


class TestResolve:
    def test_static(self, engine):
        assert engine.resolve("upload") == "Upload"

    def test_dynamic(self, engine):
        assert engine.resolve("greet", {"name": "Ana"}) == "Hello Ana"

    def test_holder(self, engine):
        assert engine.resolve("doing", {"action": "upload"}) == "Doing Upload"

    def test_no_params(self, engine):
        assert engine.resolve("greet") == "Hello {name}"

    def test_default_placeholder(self, engine):
        engine.default_placeholders.set("name", "Guest")
        assert engine.resolve("greet", {}) == "Hello Guest"

    def test_unknown_key_is_distinct_error(self, engine):
        with pytest.raises(UnknownEntryError) as exc:
            engine.resolve("missing", {})
        assert exc.value.key == "missing"

    def test_resolve_static_rejects_dynamic(self, engine):
        assert engine.resolve_static("remove") == "Remove"
        with pytest.raises(EntryKindError):
            engine.resolve_static("greet")

    def test_resolve_dynamic_rejects_static(self, engine):
        assert engine.resolve_dynamic("greet", {"name": "Bo"}) == "Hello Bo"
        with pytest.raises(EntryKindError):
            engine.resolve_dynamic("upload")

    def test_resolve_mixed(self, engine):
        assert engine.resolve_mixed("greet", name="Bo") == "Hello Bo"
        assert engine.resolve_mixed("upload") == "Upload"

    def test_resolve_mixed_placeholder_named_key(self):
        p = Parrot()
        p.activate({"Dynamic": {"m": {"pressed": {"placeholders": "key", "value": "Pressed {key}"}}}})
        assert p.resolve_mixed("pressed", key="Enter") == "Pressed Enter"


class TestActivate:
    def test_rebuild_replaces_everything(self, engine):
        engine.activate(AR, language="ar")
        assert engine.active_language == "ar"
        assert engine.resolve("greet", {"name": "Ana"}) == "Marhaba Ana"
        with pytest.raises(UnknownEntryError):
            engine.resolve("remove")

    def test_old_registry_untouched(self, engine):
        old = engine.registry
        engine.activate(AR, language="ar")
        assert old["upload"] == "Upload"
        assert engine.registry is not old

    def test_invalid_blueprint_keeps_registry(self, engine):
        with pytest.raises(BlueprintError):
            engine.activate({"Static": "nope"})
        assert engine.active_language == "en"
        assert engine.resolve("upload") == "Upload"

    def test_stores_survive_rebuild(self, engine):
        engine.default_placeholders.set("name", "Guest")
        engine.activate(AR, language="ar")
        assert engine.resolve("greet") == "Marhaba Guest"

    def test_injected_stores(self):
        stores = parrot.DefaultStores()
        stores.placeholders.set("name", "Injected")
        p = Parrot(stores=stores)
        p.activate(EN)
        assert p.resolve("greet") == "Hello Injected"


class TestCatalog:
    def test_fallback_to_default_language(self):
        catalog = LanguageCatalog(default_language="en")
        catalog.add("en", EN)
        catalog.add("ar", AR)
        assert catalog.languages() == ["ar", "en"]
        assert catalog.resolve_language("fr") == "en"
        assert catalog.resolve_language("ar") == "ar"

    def test_unknown_without_default(self):
        catalog = LanguageCatalog(default_language="en")
        catalog.add("ar", AR)
        with pytest.raises(UnknownLanguageError):
            catalog.get("fr")

    def test_remove(self):
        catalog = LanguageCatalog(default_language="en")
        catalog.add("en", EN)
        assert catalog.remove("en") is True
        assert catalog.remove("en") is False
        assert "en" not in catalog

    def test_use_language(self):
        p = Parrot(catalog=LanguageCatalog(default_language="en"))
        p.catalog.add("en", EN)
        p.catalog.add("ar", AR)
        p.use_language("ar")
        assert p.resolve("upload") == "Tahmil"
        p.use_language("fr")
        assert p.active_language == "en"
        assert p.resolve("upload") == "Upload"


class TestModuleHelpers:
    def test_shared_instance(self):
        parrot.set_language(EN, language="en")
        parrot.DefaultPlaceholders.replace({"name": "Guest"})
        try:
            assert parrot.resolve("greet") == "Hello Guest"
            assert parrot.get_parrot().default_placeholders is parrot.DefaultPlaceholders
        finally:
            parrot.DefaultPlaceholders.clear()
            parrot.DefaultVariants.clear()
