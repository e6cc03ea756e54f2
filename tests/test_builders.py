"""Tests builders bloc + élément — entrées (classe, actif) et ordre."""
import pytest

from bem_builder import (
    Block,
    block_classes, block_flag, block_flag_if, block_flags,
    block_key_value, block_key_values,
    block_name, block_flag_name, block_key_value_name,
    element_classes, element_flag, element_flag_if, element_flags,
    element_key_value, element_key_values,
    element_name, element_flag_name, element_key_value_name,
)


@pytest.fixture
def thing():
    return Block.create("thing")


@pytest.fixture
def header(thing):
    return thing.derive("header")


# ── Bloc ────────────────────────────────────────────────────────────────────

def test_block_unmodified(thing):
    assert block_classes(thing) == [("thing", True)]


def test_block_flag(thing):
    assert block_flag(thing, "active") == [("thing", True), ("thing--active", True)]


@pytest.mark.parametrize("active", [True, False])
def test_block_flag_if_base_always_first(thing, active):
    entries = block_flag_if(thing, "open", active)
    assert entries[0] == ("thing", True)
    assert entries[1] == ("thing--open", active)


def test_block_flags_scenario(thing):
    assert block_flags(thing, [("flagged", True), ("editable", False)]) == [
        ("thing", True),
        ("thing--flagged", True),
        ("thing--editable", False),
    ]


def test_block_flags_empty(thing):
    assert block_flags(thing, []) == [("thing", True)]


def test_block_flags_accepts_generator(thing):
    gen = ((m, i % 2 == 0) for i, m in enumerate("abc"))
    assert block_flags(thing, gen) == [
        ("thing", True), ("thing--a", True), ("thing--b", False), ("thing--c", True),
    ]


def test_block_key_value_scenario(thing):
    assert block_key_value(thing, "type", "foo") == [("thing", True), ("thing--type-foo", True)]


def test_block_key_values_order(thing):
    pairs = [("size", "lg"), ("theme", "dark"), ("size", "sm")]
    entries = block_key_values(thing, pairs)
    assert entries[0] == ("thing", True)
    for i, (k, v) in enumerate(pairs):
        assert entries[i + 1] == (f"thing--{k}-{v}", True)


def test_block_raw_accessors(thing):
    assert block_name(thing) == "thing"
    assert block_flag_name(thing, "x") == "thing--x"
    assert block_key_value_name(thing, "k", "v") == "thing--k-v"


# ── Élément ─────────────────────────────────────────────────────────────────

def test_element_unmodified(header):
    assert element_classes(header) == [("thing__header", True)]


def test_element_flag(header):
    assert element_flag(header, "sticky") == [
        ("thing__header", True), ("thing__header--sticky", True),
    ]


def test_element_flag_if_scenario(header):
    assert element_flag_if(header, "sticky", True) == [
        ("thing__header", True), ("thing__header--sticky", True),
    ]
    assert element_flag_if(header, "sticky", False) == [
        ("thing__header", True), ("thing__header--sticky", False),
    ]


def test_element_flags(header):
    assert element_flags(header, [("a", False), ("b", True)]) == [
        ("thing__header", True),
        ("thing__header--a", False),
        ("thing__header--b", True),
    ]


def test_element_key_value(header):
    assert element_key_value(header, "align", "left") == [
        ("thing__header", True), ("thing__header--align-left", True),
    ]


def test_element_key_values(header):
    assert element_key_values(header, [("a", "1"), ("b", "2")]) == [
        ("thing__header", True),
        ("thing__header--a-1", True),
        ("thing__header--b-2", True),
    ]


def test_element_raw_accessors(header):
    assert element_name(header) == "thing__header"
    assert element_flag_name(header, "sticky") == "thing__header--sticky"
    assert element_key_value_name(header, "size", "lg") == "thing__header--size-lg"


# ── Pureté ──────────────────────────────────────────────────────────────────

def test_builders_idempotent(thing, header):
    calls = [
        lambda: block_flags(thing, [("x", True), ("y", False)]),
        lambda: block_key_values(thing, [("k", "v")]),
        lambda: element_flag_if(header, "z", False),
        lambda: element_key_values(header, [("k", "v")]),
    ]
    for call in calls:
        assert call() == call()


def test_element_survives_new_block(thing):
    el = thing.derive("body")
    other = Block.create("other")
    assert element_name(el) == "thing__body"
    assert element_name(other.derive("body")) == "other__body"
