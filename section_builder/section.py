"""
Section — unité de contenu adressable d'une page.

Même chemin de construction pour une section fraîche (Builder.add) et une
section restaurée depuis un snapshot (Builder.set).
"""
import itertools
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .handles import iter_handles

log = logging.getLogger(__name__)

# ids jamais réutilisés, même après destroy()
_ids = itertools.count(1)


def _next_id() -> int:
    return next(_ids)


class Section(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(default_factory=_next_id)
    name: str = ""
    group: Optional[str] = None
    section_schema: Dict[str, Any] = Field(default_factory=dict, alias="schema")
    data: Dict[str, Any] = Field(default_factory=dict)
    is_header: bool = Field(default=False, alias="isHeader")

    _destroyed: bool = PrivateAttr(default=False)

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def destroy(self) -> None:
        """Libère les handles embarqués dans data. Sans effet au second appel."""
        if self._destroyed:
            return
        released = 0
        for handle in iter_handles(self.data):
            handle.release()
            released += 1
        self._destroyed = True
        log.debug("Section %s (%s) détruite — %d handle(s) libéré(s)", self.id, self.name, released)
