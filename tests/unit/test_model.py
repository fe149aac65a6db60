"""Unit tests for iniedit.ini.model (IniSection, IniDocument)."""

from __future__ import annotations

import pytest

from iniedit.ini.model import IniDocument, IniSection


def test_get_after_set() -> None:
    doc = IniDocument()
    doc.set("c", "z", "5")
    assert doc.get("c", "z") == "5"


def test_get_missing_returns_none() -> None:
    doc = IniDocument()
    assert doc.get("nope", "x") is None
    doc.set("a", "x", "1")
    assert doc.get("a", "y") is None


def test_set_overwrites_in_place() -> None:
    doc = IniDocument()
    doc.set("a", "x", "1")
    doc.set("a", "y", "2")
    doc.set("a", "x", "3")
    assert list(doc["a"].items()) == [("x", "3"), ("y", "2")]


def test_set_appends_new_sections_at_end() -> None:
    doc = IniDocument()
    doc.set("b", "k", "v")
    doc.set("a", "k", "v")
    doc.set("b", "k2", "v")
    assert doc.sections() == ["b", "a"]


def test_remove_key_keeps_section() -> None:
    doc = IniDocument()
    doc.set("a", "x", "1")
    doc.remove("a", "x")
    assert doc.get("a", "x") is None
    assert "a" in doc
    assert len(doc["a"]) == 0


def test_remove_missing_is_noop() -> None:
    doc = IniDocument()
    doc.remove("a", "x")
    doc.set("a", "x", "1")
    doc.remove("a", "y")
    assert doc.to_dict() == {"a": {"x": "1"}}


def test_remove_section() -> None:
    doc = IniDocument()
    doc.set("a", "x", "1")
    doc.set("a", "y", "2")
    doc.set("b", "z", "3")
    doc.remove_section("a")
    assert doc.get("a", "x") is None
    assert doc.get("a", "y") is None
    assert doc.sections() == ["b"]


def test_remove_section_missing_is_noop() -> None:
    doc = IniDocument()
    doc.remove_section("a")
    assert len(doc) == 0


def test_getitem_missing_raises_key_error() -> None:
    with pytest.raises(KeyError):
        IniDocument()["a"]


def test_setitem_copies_mapping() -> None:
    doc = IniDocument()
    src = {"x": "1"}
    doc["a"] = src
    src["x"] = "2"
    assert doc.get("a", "x") == "1"
    assert doc["a"].name == "a"


def test_setitem_replaces_section_keeping_position() -> None:
    doc = IniDocument()
    doc.set("a", "x", "1")
    doc.set("b", "y", "2")
    doc["a"] = {"z": "3"}
    assert doc.sections() == ["a", "b"]
    assert doc.to_dict()["a"] == {"z": "3"}


def test_equality_is_order_sensitive() -> None:
    one, two = IniDocument(), IniDocument()
    one.set("a", "x", "1")
    one.set("a", "y", "2")
    two.set("a", "y", "2")
    two.set("a", "x", "1")
    assert one != two
    two.remove("a", "y")
    two.set("a", "y", "2")
    assert one == two


def test_section_equality_checks_name() -> None:
    assert IniSection("a", {"x": "1"}) != IniSection("b", {"x": "1"})
    assert IniSection("a", {"x": "1"}) == IniSection("a", {"x": "1"})


def test_line_break_warns() -> None:
    doc = IniDocument()
    with pytest.warns(UserWarning):
        doc.set("a", "x", "1\n2")
    # still stored, it's up to the caller.
    assert doc.get("a", "x") == "1\n2"


def test_rename_keeps_position() -> None:
    doc = IniDocument()
    doc.set("a", "x", "1")
    doc.set("b", "y", "2")
    doc.set("c", "z", "3")
    assert doc.rename("b", "B")
    assert doc.sections() == ["a", "B", "c"]
    assert doc["B"].name == "B"
    assert doc.get("B", "y") == "2"


def test_rename_refuses_missing_or_taken() -> None:
    doc = IniDocument()
    doc.set("a", "x", "1")
    doc.set("b", "y", "2")
    assert not doc.rename("nope", "c")
    assert not doc.rename("a", "b")
    assert doc.sections() == ["a", "b"]


def test_update_merges_sections() -> None:
    base, other = IniDocument(), IniDocument()
    base.set("a", "x", "1")
    base.set("a", "y", "2")
    other.set("a", "x", "9")
    other.set("b", "z", "3")
    base.update(other)
    assert base.to_dict() == {"a": {"x": "9", "y": "2"}, "b": {"z": "3"}}


def test_setdefault_returns_existing() -> None:
    doc = IniDocument()
    doc.set("a", "x", "1")
    assert doc.setdefault("a").get("x") == "1"
    assert len(doc.setdefault("b")) == 0
    assert doc.sections() == ["a", "b"]


def test_clear() -> None:
    doc = IniDocument()
    doc.set("a", "x", "1")
    doc.clear()
    assert doc.sections() == []


@pytest.mark.parametrize("key", ["k=1", ";k", "#k", " k", "k "])
def test_key_lost_on_save_warns(key: str) -> None:
    doc = IniDocument()
    with pytest.warns(UserWarning, match="will not survive"):
        doc.set("a", key, "v")


def test_value_with_surrounding_spaces_warns() -> None:
    doc = IniDocument()
    with pytest.warns(UserWarning, match="will not survive"):
        doc.set("a", "k", " v ")


@pytest.mark.parametrize("name", ["", " a", "a ", "a\nb"])
def test_section_name_lost_on_save_warns(name: str) -> None:
    doc = IniDocument()
    with pytest.warns(UserWarning, match="will not survive"):
        doc.set(name, "k", "v")


def test_rename_to_bad_name_warns() -> None:
    doc = IniDocument()
    doc.set("a", "k", "v")
    with pytest.warns(UserWarning):
        assert doc.rename("a", " a ")


def test_plain_pairs_do_not_warn(recwarn: pytest.WarningsRecorder) -> None:
    doc = IniDocument()
    doc.set("sect ion", "some key", "a = b ; c")
    doc.set("a", "", "")
    assert len(recwarn) == 0


def test_non_str_value_raises_type_error() -> None:
    doc = IniDocument()
    with pytest.raises(TypeError):
        doc.set("a", "k", 1)  # type: ignore[arg-type]
    assert doc.get("a", "k") is None


def test_get_without_key_returns_section() -> None:
    doc = IniDocument()
    assert doc.get("a") is None
    doc.set("a", "x", "1")
    section = doc.get("a")
    assert isinstance(section, IniSection)
    assert section.name == "a"
    assert section["x"] == "1"


def test_setdefault_with_default_pairs() -> None:
    doc = IniDocument()
    assert doc.setdefault("a", {"x": "1"}).to_dict() == {"x": "1"}
    # existing section is left alone
    assert doc.setdefault("a", {"y": "2"}).to_dict() == {"x": "1"}
