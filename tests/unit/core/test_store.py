"""Unit tests for core/store.py"""

import re
from datetime import datetime, timedelta, timezone

import pytest

from mdassemble.core.models import DerivedFields, FrontmatterBlock, Layer, Scalar, TagList
from mdassemble.core.store import (
    derive_fields,
    derived_layer,
    merge,
    merge_layers,
    parse_override_pairs,
    split_pair_args,
    unix_id,
)


ISO_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


def _block(**values) -> FrontmatterBlock:
    block = FrontmatterBlock()
    for k, v in values.items():
        block.set(k, TagList(tuple(v)) if isinstance(v, list) else Scalar(v))
    return block


# --- override pairs ---

def test_split_pair_args_flattens_commas():
    assert split_pair_args(["a=1,b=2", "c=3"]) == ["a=1", "b=2", "c=3"]
    assert split_pair_args(None) == []


def test_parse_override_pairs_splits_on_first_equals():
    layer = parse_override_pairs(["a=1", "expr=x=y"])
    assert dict(layer.entries) == {"a": Scalar("1"), "expr": Scalar("x=y")}


@pytest.mark.parametrize("pair", ["novalue", "", "=orphan"])
def test_parse_override_pairs_drops_malformed(pair):
    """Pairs without '=' or without a key are discarded, not errors."""
    layer = parse_override_pairs([pair, "ok=1"])
    assert dict(layer.entries) == {"ok": Scalar("1")}


def test_parse_override_pairs_keeps_empty_value():
    layer = parse_override_pairs(["blank="])
    assert dict(layer.entries) == {"blank": Scalar("")}


# --- derived fields ---

def test_unix_id_format():
    now = datetime(2024, 5, 1, 12, 30, 45, 999999, tzinfo=timezone.utc)
    assert unix_id(now) == "2024-05-01T12:30:45Z"


def test_unix_id_converts_to_utc():
    now = datetime(2024, 5, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert unix_id(now) == "2024-05-01T12:00:00Z"


def test_unix_id_defaults_to_now():
    assert ISO_UTC.match(unix_id())


def test_id_unix_beats_literal_id():
    derived = derive_fields(literal_id="literal", id_unix=True)
    assert derived.id != "literal"
    assert ISO_UTC.match(derived.id)


def test_literal_id_used_without_id_unix():
    assert derive_fields(literal_id="literal").id == "literal"


def test_no_tags_means_not_supplied():
    assert derive_fields(tags=[]).tags is None
    assert derive_fields(tags=None).tags is None
    assert derive_fields(tags=["x", "y"]).tags == ("x", "y")


def test_derived_layer_only_supplied_fields():
    layer = derived_layer(DerivedFields(title="T"))
    assert layer.entries == (("title", Scalar("T")),)


# --- merge ---

def test_merge_layers_later_wins():
    layers = [
        Layer("first", (("a", Scalar("1")), ("b", Scalar("1")))),
        Layer("second", (("b", Scalar("2")),)),
    ]
    assert merge_layers(layers).to_dict() == {"a": "1", "b": "2"}


def test_merge_layers_empty():
    assert merge_layers([]).is_empty()


def test_override_beats_template():
    block = merge(_block(title="Old", keep="yes"), ["title=New"], DerivedFields())
    assert block.to_dict() == {"title": "New", "keep": "yes"}


def test_derived_beats_override():
    block = merge(_block(title="Old"), ["title=Mid", "id=x"], DerivedFields(title="Top", id="y"))
    assert block.to_dict() == {"title": "Top", "id": "y"}


def test_tags_replace_prior_list_in_full():
    """Derived tags replace template tags; no union or de-duplication."""
    block = merge(_block(tags=["a", "b"]), [], DerivedFields(tags=("b", "c", "c")))
    assert block.get("tags") == TagList(("b", "c", "c"))


def test_tags_replace_scalar_override():
    block = merge(None, ["tags=scalar"], DerivedFields(tags=("x",)))
    assert block.get("tags") == TagList(("x",))


def test_replaced_key_keeps_first_position():
    block = merge(_block(a="1", b="2"), ["c=3", "a=9"], DerivedFields())
    assert [k for k, _ in block.items()] == ["a", "b", "c"]


def test_merge_without_template():
    block = merge(None, ["a=1", "b=2"], DerivedFields())
    assert block.to_dict() == {"a": "1", "b": "2"}
