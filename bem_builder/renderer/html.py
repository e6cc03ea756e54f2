"""
Renderer HTML minimal — pose les classes BEM sur une balise.
"""
from html import escape
from typing import Iterable, Tuple

from .classlist import class_attr

_VOID_TAGS = {"br", "hr", "img", "input", "meta", "link", "source"}


def _attrs(attrs: dict) -> str:
    # False / None → attribut omis, True → attribut booléen
    parts = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        name = key.rstrip("_").replace("_", "-")
        parts.append(f" {name}" if value is True else f' {name}="{escape(str(value))}"')
    return "".join(parts)


def render_tag(
    tag: str,
    entries: Iterable[Tuple[str, bool]],
    inner: str = "",
    children: Iterable[str] = (),
    **attrs,
) -> str:
    """
    Rend une balise avec ses classes actives.

    Args:
        tag: Nom de balise ("div", "span"…)
        entries: Entrées (classe, actif) produites par les builders
        inner: Texte intérieur (échappé)
        children: Fragments HTML déjà rendus (insérés tels quels, après `inner`)
        **attrs: Attributs additionnels — `for_` → `for`, `data_id` → `data-id`

    Example:
        >>> card = Block(name="card")
        >>> title = render_tag("h2", element_classes(card.derive("title")), "Salut")
        >>> render_tag("div", block_flag(card, "wide"), children=[title])
        '<div class="card card--wide"><h2 class="card__title">Salut</h2></div>'
    """
    head = f"<{tag}{class_attr(entries)}{_attrs(attrs)}>"
    if tag in _VOID_TAGS:
        return head
    return f"{head}{escape(inner)}{''.join(children)}</{tag}>"
