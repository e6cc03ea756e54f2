"""
Modèles BEM : Block → Element, plus l'entrée de classe (nom, actif).
Valeurs immuables (pydantic frozen) : un Element copie le nom de son bloc.
"""
import logging
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict

from .naming import join_element
from .validation import check_name

log = logging.getLogger(__name__)


class ClassEntry(NamedTuple):
    """Classe candidate + drapeau d'activation. Égale au tuple (name, active)."""
    name: str
    active: bool


class Element(BaseModel):
    """Sous-partie d'un bloc, portée par le nom du bloc."""
    model_config = ConfigDict(frozen=True)

    block_name: str
    name: str

    @property
    def base(self) -> str:
        """Nom de classe non modifié : "bloc__element"."""
        return join_element(self.block_name, self.name)


class Block(BaseModel):
    """Racine de nommage d'un composant UI."""
    model_config = ConfigDict(frozen=True)

    name: str

    @classmethod
    def create(cls, name: str, strict: bool = False) -> "Block":
        """
        Construit un bloc.

        Args:
            name: Nom racine (ex: "my-block")
            strict: Refuse les noms ambigus (BemNameError)
        """
        check_name(name, strict=strict)
        return cls(name=name)

    def derive(self, element_name: str, strict: bool = False) -> Element:
        """Élément rattaché à ce bloc (le nom du bloc est copié)."""
        check_name(element_name, strict=strict)
        log.debug("Élément dérivé : bloc=%s élément=%s", self.name, element_name)
        return Element(block_name=self.name, name=element_name)
