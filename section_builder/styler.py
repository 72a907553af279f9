"""
Styler — capacité de style attachée à chaque composant enregistré.

Convertit un dict de styles (clés camelCase) en style inline CSS.
"""
import logging
from typing import Any, Dict, Optional

from .core.utils import kebab_case

log = logging.getLogger(__name__)


class Styler:
    name = "styler"

    def inline(self, styles: Optional[Dict[str, Any]]) -> str:
        """{"backgroundImage": "/a.jpg", "color": "red"} → "background-image: url(/a.jpg);color: red;" """
        if not styles:
            return ""
        out = ""
        for key, value in styles.items():
            if not value:
                continue
            if key == "backgroundImage":
                out += f"{kebab_case(key)}: url({value});"
            else:
                out += f"{kebab_case(key)}: {value};"
        return out

    def attrs(self, styles: Optional[Dict[str, Any]], editing: bool = False) -> str:
        """Attributs HTML du styler pour un élément stylable."""
        style = self.inline(styles)
        out = f' style="{style}"' if style else ""
        if editing:
            out += ' data-styler="true"'
        return out


def install(ctx, options: Dict[str, Any]) -> None:
    """Plugin : attache un Styler au registry de composants du builder."""
    ctx.builder.components.styler = Styler()
    log.debug("Styler installé")
