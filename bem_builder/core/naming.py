"""
Naming BEM — composition des fragments bloc / élément / modificateur.

    bloc__element--cle-valeur
        ^^       ^^   ^
        │        │    └─ VALUE_SEP    (clé → valeur)
        │        └────── MODIFIER_SEP (base → modificateur)
        └─────────────── ELEMENT_SEP  (bloc → élément)

Aucun échappement, aucune validation : base d'abord, modificateur en dernier.
"""

ELEMENT_SEP  = "__"
MODIFIER_SEP = "--"
VALUE_SEP    = "-"


# ── Bloc ────────────────────────────────────────────────────────────────────

def join_element(block: str, element: str) -> str:
    """"thing", "header" → "thing__header"."""
    return f"{block}{ELEMENT_SEP}{element}"


def join_block_flag(block: str, modifier: str) -> str:
    """"thing", "active" → "thing--active"."""
    return f"{block}{MODIFIER_SEP}{modifier}"


def join_block_key_value(block: str, key: str, value: str) -> str:
    """"thing", "type", "foo" → "thing--type-foo"."""
    return f"{block}{MODIFIER_SEP}{key}{VALUE_SEP}{value}"


# ── Élément ─────────────────────────────────────────────────────────────────

def join_element_flag(block: str, element: str, modifier: str) -> str:
    return join_block_flag(join_element(block, element), modifier)


def join_element_key_value(block: str, element: str, key: str, value: str) -> str:
    return join_block_key_value(join_element(block, element), key, value)
