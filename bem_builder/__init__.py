"""
bem_builder v0.1 — noms de classes CSS Block__Element--Modifier.

Usage:
    >>> from bem_builder import Block, block_flag_if, element_key_value, class_string
    >>> card = Block.create("card")
    >>> class_string(block_flag_if(card, "selected", False))
    'card'
    >>> class_string(element_key_value(card.derive("title"), "size", "lg"))
    'card__title card__title--size-lg'
"""

# ── Cœur ────────────────────────────────────────────────────────────────────
from .core.naming import (
    ELEMENT_SEP, MODIFIER_SEP, VALUE_SEP,
    join_element, join_block_flag, join_block_key_value,
    join_element_flag, join_element_key_value,
)
from .core.schemas import Block, Element, ClassEntry
from .core.validation import BemNameError, check_name, is_ambiguous

# ── Builders ────────────────────────────────────────────────────────────────
from .builders import (
    block_classes, block_flag, block_flag_if, block_flags,
    block_key_value, block_key_values,
    block_name, block_flag_name, block_key_value_name,
    element_classes, element_flag, element_flag_if, element_flags,
    element_key_value, element_key_values,
    element_name, element_flag_name, element_key_value_name,
)

# ── Renderer ────────────────────────────────────────────────────────────────
from .renderer import active_classes, class_string, class_attr, merge_entries, render_tag

from .config import configure_logging

__version__ = "0.1.0"

__all__ = [
    # naming
    "ELEMENT_SEP", "MODIFIER_SEP", "VALUE_SEP",
    "join_element", "join_block_flag", "join_block_key_value",
    "join_element_flag", "join_element_key_value",
    # modèles
    "Block", "Element", "ClassEntry",
    "BemNameError", "check_name", "is_ambiguous",
    # builders bloc
    "block_classes", "block_flag", "block_flag_if", "block_flags",
    "block_key_value", "block_key_values",
    "block_name", "block_flag_name", "block_key_value_name",
    # builders élément
    "element_classes", "element_flag", "element_flag_if", "element_flags",
    "element_key_value", "element_key_values",
    "element_name", "element_flag_name", "element_key_value_name",
    # renderer
    "active_classes", "class_string", "class_attr", "merge_entries", "render_tag",
    "configure_logging",
]
