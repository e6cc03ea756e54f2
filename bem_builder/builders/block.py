"""
Builders niveau bloc.

Chaque builder retourne la classe de base (toujours active) en tête, puis une
entrée par modificateur, dans l'ordre d'entrée.
"""
from typing import Iterable, List, Tuple

from ..core.naming import join_block_flag, join_block_key_value
from ..core.schemas import Block, ClassEntry


def block_classes(block: Block) -> List[ClassEntry]:
    """Bloc sans modificateur → [("thing", True)]."""
    return [ClassEntry(block.name, True)]


def block_flag(block: Block, modifier: str) -> List[ClassEntry]:
    return block_flag_if(block, modifier, True)


def block_flag_if(block: Block, modifier: str, active: bool) -> List[ClassEntry]:
    """Base toujours émise, seul le modificateur dépend de `active`."""
    return [
        ClassEntry(block.name, True),
        ClassEntry(join_block_flag(block.name, modifier), active),
    ]


def block_flags(block: Block, flags: Iterable[Tuple[str, bool]]) -> List[ClassEntry]:
    """[("flagged", True), ("editable", False)] → base + une entrée par paire."""
    entries = [ClassEntry(block.name, True)]
    entries.extend(
        ClassEntry(join_block_flag(block.name, modifier), active)
        for modifier, active in flags
    )
    return entries


def block_key_value(block: Block, key: str, value: str) -> List[ClassEntry]:
    # pas de drapeau de suppression pour la forme clé/valeur
    return [
        ClassEntry(block.name, True),
        ClassEntry(join_block_key_value(block.name, key, value), True),
    ]


def block_key_values(block: Block, pairs: Iterable[Tuple[str, str]]) -> List[ClassEntry]:
    entries = [ClassEntry(block.name, True)]
    entries.extend(
        ClassEntry(join_block_key_value(block.name, key, value), True)
        for key, value in pairs
    )
    return entries


# ── Accès brut (chaînes seules) ─────────────────────────────────────────────

def block_name(block: Block) -> str:
    return block.name


def block_flag_name(block: Block, modifier: str) -> str:
    return join_block_flag(block.name, modifier)


def block_key_value_name(block: Block, key: str, value: str) -> str:
    return join_block_key_value(block.name, key, value)
