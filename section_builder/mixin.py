"""
Mixin de section — comportements partagés par tous les composants.

Classes responsives depuis columnsPrefix ({breakpoint: préfixe}) et attributs
de section (identité, scaffolding d'édition).
"""
import logging
from typing import Any, Dict, Optional

from .core.schemas import DEFAULT_COLUMNS_PREFIX

log = logging.getLogger(__name__)


class SectionMixin:
    def __init__(self, columns_prefix: Optional[Dict[str, str]] = None):
        self.columns_prefix = dict(columns_prefix or DEFAULT_COLUMNS_PREFIX)

    def column_classes(self, spans: Optional[Dict[str, Any]]) -> str:
        """{"mobile": 12, "desktop": 6} → "is-mobile-12 is-desktop-6" (breakpoints inconnus ignorés)."""
        if not spans:
            return ""
        return " ".join(
            f"{self.columns_prefix[bp]}{span}"
            for bp, span in spans.items()
            if bp in self.columns_prefix and span
        )

    def section_attrs(self, section, editing: bool = False) -> str:
        out = f' id="section-{section.id}" data-section="{section.name}"'
        if section.is_header:
            out += ' data-header="true"'
        if editing:
            out += f' data-editable="true" draggable="true" data-section-id="{section.id}"'
        return out


def install(ctx, options: Dict[str, Any]) -> None:
    """Plugin : attache le mixin de section (configuré sur columnsPrefix du builder)."""
    ctx.builder.components.mixin = SectionMixin(ctx.builder.columns_prefix)
    log.debug("Mixin de section installé (%d breakpoints)", len(ctx.builder.columns_prefix))
