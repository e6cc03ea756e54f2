from .naming import (
    ELEMENT_SEP, MODIFIER_SEP, VALUE_SEP,
    join_element, join_block_flag, join_block_key_value,
    join_element_flag, join_element_key_value,
)
from .schemas import Block, Element, ClassEntry
from .validation import BemNameError, check_name, is_ambiguous
