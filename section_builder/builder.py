"""
Builder — modèle de document : liste ordonnée de sections + réglages page.

Usage:
    >>> from section_builder import Builder, register_component
    >>> register_component("hero", {"data": {"title": "Bienvenue"}})
    >>> builder = Builder({"title": "Ma page"})
    >>> builder.add({"name": "hero"})
    >>> builder.export("json")
"""
import json
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from . import config, mixin, styler
from .components import Component, ComponentRegistry
from .errors import BuilderError
from .core.schemas import BuilderOptions, Snapshot, SnapshotSection
from .plugins import InstallContext, plugins, use
from .renderer import html as html_renderer
from .renderer.base import PreviewTarget
from .renderer.preview import open_in_browser
from .renderer.serialize import serialize, to_json
from .section import Section

log = logging.getLogger(__name__)

EXPORT_METHODS = ("json", "preview", "pwa", "zip")


def _as_options(options: Union[BuilderOptions, Dict[str, Any], None]) -> BuilderOptions:
    if isinstance(options, BuilderOptions):
        return options
    return BuilderOptions.model_validate(options or {})


class Builder:
    """
    Document éditable.

    La construction installe les plugins en attente (une seule fois par plugin),
    sauf pour un builder qui partage le registry de composants d'un autre
    (surface de rendu) : celui-ci n'a rien à installer.
    """

    def __init__(
        self,
        options: Union[BuilderOptions, Dict[str, Any], None] = None,
        runtime: Any = None,
        components: Optional[ComponentRegistry] = None,
    ):
        options = _as_options(options)
        self.options = options
        self.is_editing = True
        self.is_rendered = False
        self.title = options.title
        self.landing = options.landing
        self.intro = options.intro
        self.themes = list(options.themes)
        self.columns_prefix = dict(options.columns_prefix)
        self.settings = options.settings.model_copy(deep=True)
        self.sections: List[Section] = []
        self.runtime = runtime
        self.assets = {"css": options.css, "js": options.js or config.RUNTIME_JS}

        # Collaborateurs : packaging (installé par plugin) et contexte de preview
        self.download: Optional[Callable[[Dict[str, Any]], Any]] = None
        self.preview_target: PreviewTarget = open_in_browser

        if components is None:
            self.components = ComponentRegistry(columns_prefix=self.columns_prefix)
            self.install_plugins()
        else:
            self.components = components

        if options.sections:
            self.sections = self._build_sections(options.sections)

    # ── Composants / plugins ────────────────────────────────────────────────

    @property
    def styler(self):
        return self.components.styler

    @property
    def mixin(self):
        return self.components.mixin

    def component(self, name: Any, definition: Any = None) -> Component:
        """Enregistre un composant, augmenté du styler et des mixins."""
        component = self.components.register(name, definition)
        log.debug("Composant %r enregistré", component.name)
        return component

    def install_plugins(self) -> int:
        return plugins.drain(InstallContext(builder=self, runtime=self.runtime))

    # ── Sections ────────────────────────────────────────────────────────────

    def _new_section(
        self,
        name: str,
        data: Optional[Dict[str, Any]] = None,
        group: Optional[str] = None,
        schema: Optional[Dict[str, Any]] = None,
        is_header: Optional[bool] = None,
    ) -> Section:
        component = self.components.resolve(name)
        return Section(
            name=component.name,
            group=group if group is not None else component.group,
            schema=schema or component.schema,
            data=component.new_data() if data is None else data,
            isHeader=component.is_header if is_header is None else is_header,
        )

    def _restore(self, entry: Any) -> Section:
        """Nom seul → instance fraîche ; enregistrement → section restaurée."""
        if isinstance(entry, Section):
            if entry.destroyed:
                raise BuilderError(f"Section {entry.id} détruite : impossible de la réinsérer")
            if self.find(entry.id) is not None:
                raise BuilderError(f"Section {entry.id} déjà présente dans le document")
            self.components.resolve(entry.name)
            return entry
        if isinstance(entry, str):
            return self._new_section(entry)
        record = entry if isinstance(entry, SnapshotSection) else SnapshotSection.model_validate(entry)
        return self._new_section(
            record.name,
            data=record.data,
            group=record.group,
            schema=record.section_schema,
            is_header=record.is_header,
        )

    def _build_sections(self, entries: Iterable[Any]) -> List[Section]:
        return [self._restore(entry) for entry in entries]

    def add(self, options: Any, position: Optional[int] = None) -> Section:
        """Crée une section et l'insère à `position` (fin de liste par défaut)."""
        section = self._restore(options)
        if position is None:
            self.sections.append(section)
        else:
            self.sections.insert(position, section)
        return section

    def find(self, id: Any) -> Optional[Section]:
        return next((s for s in self.sections if s.id == id), None)

    def remove(self, section: Section) -> bool:
        """Retire la section (par id) puis la détruit. Id inconnu : sans effet."""
        index = next((i for i, s in enumerate(self.sections) if s.id == section.id), None)
        if index is None:
            log.debug("remove : section %s absente", section.id)
            return False
        removed = self.sections.pop(index)
        removed.destroy()
        return True

    def sort(self, old_index: int, new_index: int) -> None:
        """Déplace la section d'`old_index` vers `new_index`. Indices hors bornes → IndexError."""
        count = len(self.sections)
        if not (0 <= old_index < count and 0 <= new_index < count):
            raise IndexError(f"sort({old_index}, {new_index}) hors bornes pour {count} section(s)")
        section = self.sections.pop(old_index)
        self.sections.insert(new_index, section)

    def clear(self) -> List[Section]:
        """Détruit toutes les sections ; renvoie la liste d'avant."""
        previous = self.sections
        for section in previous:
            section.destroy()
        self.sections = []
        return previous

    def set(self, snapshot: Union[Snapshot, Dict[str, Any], str]) -> None:
        """
        Remplace le document depuis un snapshot.

        Toutes les sections sont résolues avant la moindre mutation : un nom de
        composant inconnu lève ComponentNotFound et laisse le builder intact.
        """
        if isinstance(snapshot, str):
            snapshot = json.loads(snapshot)
        snap = snapshot if isinstance(snapshot, Snapshot) else Snapshot.model_validate(snapshot)

        sections = self._build_sections(snap.sections) if snap.sections is not None else None

        if snap.title is not None:
            self.title = snap.title
        if snap.slug is not None:
            self.landing = snap.slug
        if snap.settings is not None:
            self.settings = snap.settings
        if sections is not None:
            self.sections = sections

    # ── Export ──────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        return serialize(self)

    def to_json(self) -> str:
        return to_json(self)

    def output_fragment(self):
        return html_renderer.output_fragment(self)

    def render_preview(self, origin: Optional[str] = None) -> str:
        return html_renderer.render_preview(self, origin=origin)

    def preview(self) -> None:
        """Ouvre la page dans un contexte de visualisation séparé (fire-and-forget)."""
        self.preview_target(self.render_preview())

    def gtm_setup(self) -> Dict[str, str]:
        return html_renderer.gtm_setup(self.settings)

    def get_manifest(self) -> str:
        return html_renderer.get_manifest(self.settings)

    def get_og_meta_tags(self, tags=None) -> str:
        return html_renderer.get_og_meta_tags(self.settings.og_tags if tags is None else tags)

    def export(self, method: str = "json") -> Any:
        """
        Exporte le document.

        json (défaut) → chaîne JSON ; preview → None ; pwa/zip → résultat du
        plugin de packaging, ou None (warning) s'il n'est pas installé.
        """
        if method in ("pwa", "zip"):
            if callable(self.download):
                return self.download(self.assets)
            log.warning("Export %s ignoré : aucun plugin de packaging (zip) installé", method)
            return None

        if method == "preview":
            self.preview()
            return None

        return self.to_json()


def register_default_plugins() -> None:
    """Styler + mixin de section, installés avec le prochain builder."""
    use(styler.install)
    use(mixin.install)


register_default_plugins()
