"""
Configuration bem_builder — lue depuis l'environnement.

BEM_BUILDER_LOG_LEVEL  : niveau utilisé par configure_logging() (WARNING par défaut)

Le mode strict des noms n'est jamais lu ici : il se passe explicitement
(Block.create(..., strict=True)).
"""
import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s — %(message)s"


def log_level() -> int:
    name = os.getenv("BEM_BUILDER_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: int | None = None) -> None:
    """Active le logging pour un script hôte. La lib n'appelle jamais ceci à l'import."""
    logging.basicConfig(level=level if level is not None else log_level(), format=LOG_FORMAT)
