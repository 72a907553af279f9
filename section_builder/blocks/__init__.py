"""
Blocs fournis — header, hero, content, footer.

    >>> from section_builder import blocks, use
    >>> use(blocks.install)                          # tous les blocs
    >>> use(blocks.install, {"only": ["hero"]})      # sous-ensemble
"""
import logging
from typing import Any, Dict

from .content import CONTENT
from .footer import FOOTER
from .header import HEADER
from .hero import HERO

log = logging.getLogger(__name__)

BLOCKS = {
    "header":  HEADER,
    "hero":    HERO,
    "content": CONTENT,
    "footer":  FOOTER,
}


def install(ctx, options: Dict[str, Any]) -> None:
    """Plugin : enregistre les blocs sur le builder."""
    names = options.get("only") or list(BLOCKS)
    for name in names:
        ctx.builder.component(name, BLOCKS[name])
    log.debug("%d bloc(s) enregistré(s)", len(names))


__all__ = ["BLOCKS", "HEADER", "HERO", "CONTENT", "FOOTER", "install"]
