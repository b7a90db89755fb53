"""Tests for the macro and tag stores."""

import pytest

from rpmspec_parser.core.macros import MacroStore, normalize_macro_name
from rpmspec_parser.core.tags import TagStore


@pytest.fixture
def macros():
    store = MacroStore()
    store.set("name", "widgets")
    store.set("version", "1.0")
    return store


# ═══════════════════════════════════════════
# Name Normalization
# ═══════════════════════════════════════════


class TestNormalizeMacroName:
    def test_source_reference(self):
        assert normalize_macro_name("S:3") == "SOURCE3"

    def test_patch_reference(self):
        assert normalize_macro_name("P:12") == "PATCH12"

    def test_plain_name_unchanged(self):
        assert normalize_macro_name("name") == "name"

    def test_partial_reference_unchanged(self):
        assert normalize_macro_name("S:") == "S:"
        assert normalize_macro_name("S:1a") == "S:1a"
        assert normalize_macro_name("xS:1") == "xS:1"


# ═══════════════════════════════════════════
# Macro Store
# ═══════════════════════════════════════════


class TestMacroStore:
    def test_set_returns_value(self):
        store = MacroStore()
        assert store.set("foo", "bar") == "bar"
        assert store.get("foo") == "bar"

    def test_missing_is_none(self):
        assert MacroStore().get("nope") is None

    def test_empty_value_is_not_missing(self):
        store = MacroStore()
        store.set("empty", "")
        assert store.get("empty") == ""
        assert "empty" in store
        assert "other" not in store

    def test_source_alias(self):
        store = MacroStore()
        store.set("S:3", "widgets.tar.gz")
        assert store.get("S:3") == "widgets.tar.gz"
        assert store.get("SOURCE3") == "widgets.tar.gz"

    def test_patch_alias(self):
        store = MacroStore()
        store.set("PATCH2", "fix.patch")
        assert store.get("P:2") == "fix.patch"

    def test_names_are_case_sensitive(self):
        store = MacroStore()
        store.set("Name", "upper")
        assert store.get("name") is None
        assert len(store) == 1


# ═══════════════════════════════════════════
# Expansion
# ═══════════════════════════════════════════


class TestExpand:
    def test_expands_known_macro(self):
        store = MacroStore()
        store.set("foo", "bar")
        assert store.expand("x-%{foo}-y") == "x-bar-y"

    def test_unknown_left_untouched(self, macros):
        assert macros.expand("%{undefined_xyz}") == "%{undefined_xyz}"

    def test_mixed_known_and_unknown(self, macros):
        assert macros.expand("%{name}-%{dist}") == "widgets-%{dist}"

    def test_every_occurrence_replaced(self, macros):
        assert macros.expand("%{name}/%{name}.conf") == "widgets/widgets.conf"

    def test_source_reference_placeholder(self):
        store = MacroStore()
        store.set("SOURCE1", "extra.tar.gz")
        assert store.expand("cp %{S:1} .") == "cp extra.tar.gz ."

    def test_hyphenated_name(self):
        store = MacroStore()
        store.set("build-dir", "/tmp/b")
        assert store.expand("%{build-dir}/out") == "/tmp/b/out"

    def test_not_recursive(self):
        store = MacroStore()
        store.set("a", "%{b}")
        store.set("b", "deep")
        assert store.expand("%{a}") == "%{b}"

    def test_unbraced_and_conditional_forms_ignored(self, macros):
        assert macros.expand("%name %{?dist} %{!?x:y}") == "%name %{?dist} %{!?x:y}"

    def test_empty_value(self):
        store = MacroStore()
        store.set("dist", "")
        assert store.expand("1%{dist}") == "1"


# ═══════════════════════════════════════════
# Tag Store
# ═══════════════════════════════════════════


class TestTagStore:
    def test_set_and_get(self):
        tags = TagStore()
        assert tags.set("widgets", "Version", "1.0") == "1.0"
        assert tags.get("widgets", "Version") == "1.0"

    def test_missing(self):
        tags = TagStore()
        tags.set("widgets", "Version", "1.0")
        assert tags.get("widgets", "Release") is None
        assert tags.get("other", "Version") is None

    def test_last_write_wins(self):
        tags = TagStore()
        tags.set("widgets", "Requires", "foo")
        tags.set("widgets", "Requires", "bar")
        assert tags.get("widgets", "Requires") == "bar"

    def test_packages_independent(self):
        tags = TagStore()
        tags.set("widgets", "Summary", "main")
        tags.set("widgets-doc", "Summary", "docs")
        assert tags.for_package("widgets") == {"Summary": "main"}
        assert tags.packages() == ["widgets", "widgets-doc"]
