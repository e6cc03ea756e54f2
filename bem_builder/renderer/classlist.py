"""
Contrat hôte : filtre les entrées actives et les joint par un espace, dans l'ordre.
"""
from html import escape
from itertools import chain
from typing import Iterable, List, Tuple


def active_classes(entries: Iterable[Tuple[str, bool]]) -> List[str]:
    return [name for name, active in entries if active]


def class_string(entries: Iterable[Tuple[str, bool]]) -> str:
    """[("thing", True), ("thing--editable", False)] → "thing" (brut, non échappé)."""
    return " ".join(active_classes(entries))


def class_attr(entries: Iterable[Tuple[str, bool]]) -> str:
    """Fragment ' class="..."' échappé, ou "" si aucune classe active."""
    classes = class_string(entries)
    return f' class="{escape(classes, quote=True)}"' if classes else ""


def merge_entries(*groups: Iterable[Tuple[str, bool]]) -> List[Tuple[str, bool]]:
    """Concatène plusieurs collections (ex: bloc + classe utilisateur) sans dédoublonner."""
    return list(chain.from_iterable(groups))
