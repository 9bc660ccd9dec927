from __future__ import annotations

import pytest

from suite_money.context.context import Context
from suite_money.context.context_builder import ContextBuilder
from suite_money.convert.rate_type import RateType
from suite_money.errors import InvalidArgumentError, NullArgumentError


class SampleContext(Context):
    __slots__ = ()


class SampleContextBuilder(ContextBuilder["SampleContextBuilder", SampleContext]):
    def build(self) -> SampleContext:
        return SampleContext(self._snapshot())


def test_set_stores_and_overwrites_scalar():
    builder = SampleContextBuilder().set("provider", "ECB").set("limit", 5)
    builder.set("provider", "IMF")

    ctx = builder.build()

    assert ctx.get_text("provider") == "IMF"
    assert ctx.get_int("limit") == 5
    assert ctx.get("limit", str) is None


def test_set_rejects_none_and_wrong_type():
    builder = SampleContextBuilder()

    with pytest.raises(NullArgumentError, match="because \\$value is None"):
        builder.set("provider", None)
    with pytest.raises(NullArgumentError):
        builder.set(None, "ECB")
    with pytest.raises(InvalidArgumentError):
        builder.set("limit", "ten", int)
    with pytest.raises(InvalidArgumentError, match="set_set"):
        builder.set("rate_types", {RateType.ANY})


def test_set_set_copies_and_deduplicates():
    source = [RateType.DEFERRED, RateType.DEFERRED, RateType.HISTORIC]
    builder = SampleContextBuilder().set_set("rate_types", source)
    source.append(RateType.REALTIME)

    ctx = builder.build()

    assert ctx.get_set("rate_types", RateType) == frozenset({RateType.DEFERRED, RateType.HISTORIC})


def test_set_set_accepts_empty_collection_with_element_type():
    ctx = SampleContextBuilder().set_set("tags", [], str).build()

    assert ctx.get_set("tags", str) == frozenset()
    assert ctx.types_of("tags") == [str]


def test_set_set_rejects_invalid_input():
    builder = SampleContextBuilder()

    with pytest.raises(NullArgumentError):
        builder.set_set("tags", None)
    with pytest.raises(InvalidArgumentError):
        builder.set_set("tags", [])
    with pytest.raises(InvalidArgumentError):
        builder.set_set("tags", "abc")
    with pytest.raises(InvalidArgumentError):
        builder.set_set("tags", ["a", 1], str)


def test_build_returns_independent_snapshots():
    builder = SampleContextBuilder().set("provider", "ECB")

    first = builder.build()
    second = builder.build()
    builder.set("provider", "IMF")
    third = builder.build()

    assert first == second
    assert first is not second
    assert first.get_text("provider") == "ECB"
    assert third.get_text("provider") == "IMF"


def test_import_context_uses_context_as_baseline():
    source = SampleContextBuilder().set("provider", "ECB").set("limit", 5).build()

    derived = SampleContextBuilder().import_context(source).set("limit", 7).build()

    assert derived.get_text("provider") == "ECB"
    assert derived.get_int("limit") == 7
    assert source.get_int("limit") == 5


def test_import_context_without_overwrite_keeps_existing_values():
    source = SampleContextBuilder().set("provider", "ECB").set("limit", 5).build()

    derived = SampleContextBuilder().set("provider", "IMF").import_context(source, overwrite_duplicates=False).build()

    assert derived.get_text("provider") == "IMF"
    assert derived.get_int("limit") == 5


def test_import_context_rejects_invalid_input():
    with pytest.raises(NullArgumentError):
        SampleContextBuilder().import_context(None)
    with pytest.raises(InvalidArgumentError):
        SampleContextBuilder().import_context({"provider": "ECB"})


def test_remove_attributes_removes_all_types_of_name():
    builder = SampleContextBuilder().set("limit", 5).set("limit", "five").set("provider", "ECB")

    ctx = builder.remove_attributes("limit", "unknown").build()

    assert ctx.types_of("limit") == []
    assert ctx.get_text("provider") == "ECB"


def test_context_is_immutable_and_has_value_semantics():
    ctx = SampleContextBuilder().set("provider", "ECB").set("active", True).build()

    with pytest.raises(AttributeError):
        ctx._attributes = None
    with pytest.raises(AttributeError):
        ctx.provider = "IMF"

    assert ctx.get_bool("active") is True
    assert ctx == SampleContextBuilder().set("active", True).set("provider", "ECB").build()
    assert hash(ctx) == hash(SampleContextBuilder().set("active", True).set("provider", "ECB").build())
    assert "provider:str='ECB'" in repr(ctx)
    assert SampleContextBuilder().build().is_empty


def test_set_rejects_mutable_values():
    tags = ["a"]
    builder = SampleContextBuilder()

    with pytest.raises(InvalidArgumentError, match="not hashable"):
        builder.set("tags", tags)
    with pytest.raises(InvalidArgumentError, match="not hashable"):
        builder.set("options", {"timeout": 5})
    with pytest.raises(InvalidArgumentError, match="not hashable"):
        builder.set("nested", ("a", ["b"]))

    # Nothing was stored by the failed calls
    assert builder.build().is_empty


def test_set_accepts_tuple_and_context_stays_hashable():
    ctx = SampleContextBuilder().set("tags", ("a", "b")).build()

    assert ctx.get("tags", tuple) == ("a", "b")
    assert hash(ctx) == hash(SampleContextBuilder().set("tags", ("a", "b")).build())
