"""
Builders niveau élément — miroir de builders.block avec "bloc__element" comme base.
"""
from typing import Iterable, List, Tuple

from ..core.naming import join_element, join_element_flag, join_element_key_value
from ..core.schemas import ClassEntry, Element


def element_classes(element: Element) -> List[ClassEntry]:
    return [ClassEntry(element.base, True)]


def element_flag(element: Element, modifier: str) -> List[ClassEntry]:
    return element_flag_if(element, modifier, True)


def element_flag_if(element: Element, modifier: str, active: bool) -> List[ClassEntry]:
    """("sticky", False) → [("thing__header", True), ("thing__header--sticky", False)]."""
    return [
        ClassEntry(element.base, True),
        ClassEntry(join_element_flag(element.block_name, element.name, modifier), active),
    ]


def element_flags(element: Element, flags: Iterable[Tuple[str, bool]]) -> List[ClassEntry]:
    entries = [ClassEntry(element.base, True)]
    entries.extend(
        ClassEntry(join_element_flag(element.block_name, element.name, modifier), active)
        for modifier, active in flags
    )
    return entries


def element_key_value(element: Element, key: str, value: str) -> List[ClassEntry]:
    return [
        ClassEntry(element.base, True),
        ClassEntry(join_element_key_value(element.block_name, element.name, key, value), True),
    ]


def element_key_values(element: Element, pairs: Iterable[Tuple[str, str]]) -> List[ClassEntry]:
    entries = [ClassEntry(element.base, True)]
    entries.extend(
        ClassEntry(join_element_key_value(element.block_name, element.name, key, value), True)
        for key, value in pairs
    )
    return entries


# ── Accès brut (chaînes seules) ─────────────────────────────────────────────

def element_name(element: Element) -> str:
    """"thing__header"."""
    return join_element(element.block_name, element.name)


def element_flag_name(element: Element, modifier: str) -> str:
    return join_element_flag(element.block_name, element.name, modifier)


def element_key_value_name(element: Element, key: str, value: str) -> str:
    return join_element_key_value(element.block_name, element.name, key, value)
