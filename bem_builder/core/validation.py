"""
Contrôle optionnel des noms BEM.

Les fonctions de naming acceptent n'importe quelle chaîne. Un nom vide ou qui
contient déjà "__" / "--" produit une classe aux frontières ambiguës :
check_name() le refuse, is_ambiguous() le signale.
"""
import logging

from .naming import ELEMENT_SEP, MODIFIER_SEP

log = logging.getLogger(__name__)


class BemNameError(ValueError):
    """Nom de bloc / élément inutilisable en mode strict."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Nom BEM invalide : {name!r} ({reason})")


def _problem(name: str) -> str | None:
    if not name:
        return "nom vide"
    for sep in (ELEMENT_SEP, MODIFIER_SEP):
        if sep in name:
            return f"contient le délimiteur {sep!r}"
    return None


def is_ambiguous(name: str) -> bool:
    return _problem(name) is not None


def check_name(name: str, strict: bool = True) -> str:
    """
    Vérifie un nom et le retourne tel quel.

    strict=True  → BemNameError si le nom est ambigu
    strict=False → accepté, trace DEBUG uniquement
    """
    reason = _problem(name)
    if reason is None:
        return name
    if strict:
        raise BemNameError(name, reason)
    log.debug("Nom BEM ambigu accepté : %r (%s)", name, reason)
    return name
