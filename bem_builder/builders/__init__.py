"""
Builders BEM — exports publics.
"""
from .block import (
    block_classes, block_flag, block_flag_if, block_flags,
    block_key_value, block_key_values,
    block_name, block_flag_name, block_key_value_name,
)
from .element import (
    element_classes, element_flag, element_flag_if, element_flags,
    element_key_value, element_key_values,
    element_name, element_flag_name, element_key_value_name,
)

__all__ = [
    # Bloc
    "block_classes", "block_flag", "block_flag_if", "block_flags",
    "block_key_value", "block_key_values",
    "block_name", "block_flag_name", "block_key_value_name",
    # Élément
    "element_classes", "element_flag", "element_flag_if", "element_flags",
    "element_key_value", "element_key_values",
    "element_name", "element_flag_name", "element_key_value_name",
]
