"""
Registry des composants — nom de type de section → implémentation.

Chaque enregistrement compose, une seule fois :
  définition + styler + mixins (mixin de section + mixins globaux) + sous-composants partagés
La composition est figée à l'enregistrement : un mix() ultérieur ne modifie
pas les composants déjà enregistrés.
"""
import copy
import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .core.utils import deep_merge
from .errors import ComponentNotFound
from .handles import ExternalHandle
from .mixin import SectionMixin
from .styler import Styler

log = logging.getLogger(__name__)


# ── Mixins globaux ─────────────────────────────────────────────────────────

class MixinStore:
    """Objet mixin process-wide, alimenté par mix() (merge récursif)."""

    def __init__(self):
        self._mixins: Dict[str, Any] = {}

    def mix(self, partial: Dict[str, Any]) -> Dict[str, Any]:
        self._mixins = deep_merge(self._mixins, partial or {})
        return self._mixins

    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self._mixins)

    @property
    def components(self) -> Dict[str, Any]:
        """Sous-composants partagés (clé "components" des mixins)."""
        return dict(self._mixins.get("components") or {})

    def reset(self) -> None:
        self._mixins = {}


mixins = MixinStore()


def mix(partial: Dict[str, Any]) -> Dict[str, Any]:
    """Merge `partial` dans les mixins globaux partagés par tous les builders."""
    return mixins.mix(partial)


register_mixin = mix


# ── Définition / implémentation ────────────────────────────────────────────

class ComponentDefinition(BaseModel):
    """Description d'un type de section (schéma, données par défaut, rendu)."""
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    name: str = ""
    group: Optional[str] = None
    section_schema: Optional[Dict[str, Any]] = Field(default=None, alias="schema")
    data: Dict[str, Any] = Field(default_factory=dict)
    is_header: bool = Field(default=False, alias="isHeader")
    render: Optional[Callable[..., str]] = None


def _type_name(value: Any) -> str:
    if isinstance(value, ExternalHandle):
        return "element"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "text"


def default_schema(data: Dict[str, Any]) -> Dict[str, str]:
    """Schéma déduit des données par défaut : {champ: type}."""
    return {key: _type_name(value) for key, value in (data or {}).items()}


class Component:
    """Implémentation enregistrée : une définition composée avec ses capacités."""

    def __init__(
        self,
        definition: ComponentDefinition,
        styler: Styler,
        mixins: Tuple[Any, ...],
        components: Dict[str, Any],
    ):
        self.definition = definition
        self.styler = styler
        self.mixins = mixins
        self.components = components

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def group(self) -> Optional[str]:
        return self.definition.group

    @property
    def is_header(self) -> bool:
        return self.definition.is_header

    @property
    def mixin(self) -> SectionMixin:
        return self.mixins[0]

    @property
    def schema(self) -> Dict[str, Any]:
        if self.definition.section_schema:
            return copy.deepcopy(self.definition.section_schema)
        return default_schema(self.definition.data)

    def new_data(self) -> Dict[str, Any]:
        return copy.deepcopy(self.definition.data)

    def render(self, section, editing: bool = False) -> str:
        """HTML d'une section de ce type ; en édition, ajoute le scaffolding éditeur."""
        inner = self.definition.render(section.data, self) if self.definition.render else ""
        classes = ["section", f"section--{self.name}"]
        controls = ""
        if editing:
            classes.append("is-editable")
            controls = (
                '<div class="section__controls" data-editor-only="true">'
                f'<button class="section__remove" data-section-id="{section.id}">&times;</button>'
                '</div>'
            )
        attrs = self.mixin.section_attrs(section, editing)
        attrs += self.styler.attrs(section.data.get("styles"), editing)
        return f'<section class="{" ".join(classes)}"{attrs}>{controls}{inner}</section>'

    def __repr__(self) -> str:
        return f"<Component {self.name}>"


def _as_definition(definition: Any) -> ComponentDefinition:
    if isinstance(definition, Component):
        return definition.definition
    if isinstance(definition, ComponentDefinition):
        return definition
    if isinstance(definition, dict):
        return ComponentDefinition.model_validate(definition)
    raise TypeError(f"Définition de composant invalide : {definition!r}")


# ── Registry ───────────────────────────────────────────────────────────────

class ComponentRegistry:
    """Composants d'un builder ; styler et mixin sont attachés par les plugins d'installation."""

    def __init__(self, store: Optional[MixinStore] = None, columns_prefix: Optional[Dict[str, str]] = None):
        self._components: Dict[str, Component] = {}
        self.styler = Styler()
        self.mixin = SectionMixin(columns_prefix)
        self.store = store or mixins

    def register(self, name: Any, definition: Any = None) -> Component:
        """
        Enregistre un composant.

        register("hero", {...}) ou register({"name": "hero", ...}) : le nom est
        alors résolu depuis la définition.
        """
        if definition is None and not isinstance(name, str):
            definition, name = name, None
        definition = _as_definition(definition)
        name = name or definition.name
        if not name:
            raise ValueError("Impossible de résoudre le nom du composant")
        if definition.name != name:
            definition = definition.model_copy(update={"name": name})

        store = self.store.snapshot()
        component = Component(
            definition,
            styler=self.styler,
            mixins=(self.mixin, store),
            components=dict(store.get("components") or {}),
        )
        if name in self._components:
            log.debug("Composant %r remplacé", name)
        self._components[name] = component
        return component

    def resolve(self, name: str) -> Component:
        try:
            return self._components[name]
        except KeyError:
            raise ComponentNotFound(name, self._components) from None

    def get(self, name: str) -> Optional[Component]:
        return self._components.get(name)

    def names(self) -> List[str]:
        return list(self._components)

    def catalog(self) -> List[Dict[str, Any]]:
        """Catalogue pour la palette : nom, groupe, schéma, en-tête."""
        return [
            {"name": c.name, "group": c.group, "schema": c.schema, "isHeader": c.is_header}
            for c in self._components.values()
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)
