"""Tests for registry building and entry resolution."""

import pytest

from parrot.core.errors import UnknownEntryError
from parrot.core.types import EntryKind
from parrot.resolver import DefaultStores, EntryResolver, build_registry

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _blueprint(dynamic: dict | None = None, static: dict | None = None) -> dict:
    return {"Static": static or {}, "Dynamic": dynamic or {}}


@pytest.fixture
def stores():
    return DefaultStores()


@pytest.fixture
def registry(stores):
    return build_registry(
        _blueprint(
            static={"actions": {"upload": "Upload", "zero": 0}},
            dynamic={
                "messages": {
                    "greet": {"value": "Hello {name}", "placeholders": ["name"]},
                    "greeting": {
                        "placeholders": ["gender", "name"],
                        "value": "Hello {name}",
                        "variants": {
                            "male": "Hello Mr. {name}",
                            "female": "Hello Ms. {name}",
                            1: "Hello Ms. One",
                        },
                    },
                    "itemCount": {
                        "placeholders": ["count"],
                        "value": "{count} items",
                        "conditions": {
                            "{count} < 0": "Negative items",
                            "{count} === 0": "No items",
                            "{count} === 1": "1 item",
                            "{count} < 10": "Few items",
                        },
                    },
                    "bareVariant": {
                        "value": "Raw {name}",
                        "variants": {"a": "Variant {name}"},
                    },
                },
            },
        ),
        stores,
        language="en",
    )


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------


class TestBuild:
    def test_group_names_are_flattened(self, registry):
        assert set(registry.keys()) == {
            "upload",
            "zero",
            "greet",
            "greeting",
            "itemCount",
            "bareVariant",
        }

    def test_static_entries_stored_as_is(self, registry):
        assert registry["upload"] == "Upload"
        assert registry["zero"] == 0

    def test_dynamic_entries_are_resolvers(self, registry):
        assert isinstance(registry["greet"], EntryResolver)

    def test_classification(self, registry):
        assert registry.kind_of("upload") == EntryKind.STATIC
        assert registry.kind_of("greet") == EntryKind.PLAIN
        assert registry.kind_of("greeting") == EntryKind.VARIANT
        assert registry.kind_of("itemCount") == EntryKind.CONDITIONAL
        assert registry.by_kind(EntryKind.VARIANT) == ["greeting", "bareVariant"]

    def test_unknown_key(self, registry):
        with pytest.raises(UnknownEntryError):
            registry["missing"]
        assert registry.get("missing") is None

    def test_later_group_overwrites_earlier(self, stores):
        registry = build_registry(
            _blueprint(static={"a": {"k": "first"}, "b": {"k": "second"}}),
            stores,
        )
        assert registry["k"] == "second"

    def test_dynamic_overwrites_static(self, stores):
        registry = build_registry(
            _blueprint(
                static={"s": {"k": "static"}},
                dynamic={"d": {"k": {"value": "dynamic {x}", "placeholders": "x"}}},
            ),
            stores,
        )
        assert registry["k"]({"x": 1}) == "dynamic 1"

    def test_falsy_value_normalized(self, stores):
        registry = build_registry(
            _blueprint(dynamic={"g": {"k": {"value": None, "placeholders": ["x"]}}}),
            stores,
        )
        assert registry["k"]({"x": 1}) == ""

    def test_invalid_condition_dropped(self, stores):
        registry = build_registry(
            _blueprint(
                dynamic={
                    "g": {
                        "k": {
                            "value": "fallback",
                            "placeholders": ["x"],
                            "conditions": {"{x} >": "never", "{x} > 0": "positive"},
                        }
                    }
                }
            ),
            stores,
        )
        assert registry["k"]({"x": 1}) == "positive"
        assert registry.describe_entry("k")["dropped_conditions"] == 1

    def test_describe(self, registry):
        listing = registry.describe()
        assert listing["language"] == "en"
        assert listing["total_entries"] == 6
        assert listing["kinds"] == {"static": 2, "plain": 1, "variant": 2, "conditional": 1}
        assert [e["key"] for e in listing["entries"]] == sorted(registry.keys())


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class TestPlain:
    def test_full_interpolation(self, registry):
        assert registry["greet"]({"name": "Ana"}) == "Hello Ana"

    def test_unresolved_token_passthrough(self, registry):
        assert registry["greet"]({}) == "Hello {name}"

    def test_default_placeholder_fallback(self, registry, stores):
        stores.placeholders.replace({"name": "Guest"})
        assert registry["greet"]({}) == "Hello Guest"

    def test_idempotent(self, registry):
        params = {"name": "Ana"}
        assert registry["greet"](params) == registry["greet"](params)


class TestVariants:
    def test_matching_variant(self, registry):
        assert registry["greeting"]({"gender": "female", "name": "Ana"}) == "Hello Ms. Ana"

    def test_no_match_uses_value(self, registry):
        assert registry["greeting"]({"gender": "other", "name": "Sam"}) == "Hello Sam"

    def test_missing_discriminant_uses_value(self, registry):
        assert registry["greeting"]({"name": "Sam"}) == "Hello Sam"

    def test_numeric_discriminant(self, registry):
        assert registry["greeting"]({"gender": 1}) == "Hello Ms. One"
        assert registry["greeting"]({"gender": "1"}) == "Hello Ms. One"

    def test_default_variant_fallback(self, registry, stores):
        stores.variants.set("gender", "male")
        assert registry["greeting"]({"name": "Bo"}) == "Hello Mr. Bo"

    def test_param_wins_over_default_variant(self, registry, stores):
        stores.variants.set("gender", "male")
        assert registry["greeting"]({"gender": "female", "name": "Bo"}) == "Hello Ms. Bo"

    def test_bare_variant_returns_value_uninterpolated(self, registry, stores):
        stores.placeholders.set("name", "Guest")
        assert registry["bareVariant"]({"name": "Ana"}) == "Raw {name}"

    def test_bare_variant_interpolated_when_enabled(self, registry, monkeypatch):
        from parrot.config import Config

        monkeypatch.setattr(Config, "INTERPOLATE_BARE_VARIANTS", True)
        assert registry["bareVariant"]({"name": "Ana"}) == "Raw Ana"


class TestConditions:
    @pytest.mark.parametrize(
        "count,expected",
        [
            (-3, "Negative items"),
            (0, "No items"),
            (1, "1 item"),
            (5, "Few items"),
            (40, "40 items"),
        ],
    )
    def test_first_match_wins(self, registry, count, expected):
        assert registry["itemCount"]({"count": count}) == expected

    def test_declaration_order_decides(self, stores):
        registry = build_registry(
            _blueprint(
                dynamic={
                    "g": {
                        "k": {
                            "placeholders": ["x"],
                            "value": "none",
                            "conditions": {"{x} > 0": "A", "{x} > 5": "B"},
                        }
                    }
                }
            ),
            stores,
        )
        assert registry["k"]({"x": 10}) == "A"

    def test_selected_template_is_interpolated(self, stores):
        registry = build_registry(
            _blueprint(
                dynamic={
                    "g": {
                        "k": {
                            "placeholders": ["gender", "name"],
                            "value": "Hello {name}",
                            "conditions": {"{gender} === 'male'": "Hello Mr. {name}"},
                        }
                    }
                }
            ),
            stores,
        )
        assert registry["k"]({"gender": "male", "name": "Bo"}) == "Hello Mr. Bo"
        assert registry["k"]({"gender": "x", "name": "Bo"}) == "Hello Bo"

    def test_missing_param_falls_through(self, registry):
        assert registry["itemCount"]({}) == "{count} items"


class TestRebuild:
    def test_rebuild_isolation(self, stores):
        v1 = build_registry(
            _blueprint(static={"g": {"old": "Old", "both": "v1"}}),
            stores,
        )
        v2 = build_registry(
            _blueprint(dynamic={"g": {"both": {"value": "v2 {x}", "placeholders": "x"}}}),
            stores,
        )
        assert "old" not in v2
        assert v2["both"]({"x": 1}) == "v2 1"
        assert v1["both"] == "v1"
