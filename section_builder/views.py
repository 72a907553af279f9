"""
Surfaces de présentation — éditeur (BuilderView) et rendu seul (RendererView).

Les deux surfaces partagent le même registry de composants : un document écrit
dans l'éditeur est toujours rendable sans l'éditeur.
"""
import logging
from typing import Any, Dict, Optional, Union

from .builder import Builder
from .core.schemas import BuilderOptions
from .plugins import use
from .renderer import html as html_renderer
from .section import Section

log = logging.getLogger(__name__)


class ViewRuntime:
    """Hôte des surfaces : garde le builder installé et les vues enregistrées."""

    def __init__(self):
        self.builder: Optional[Builder] = None
        self.views: Dict[str, Any] = {}

    @property
    def installed(self) -> bool:
        return self.builder is not None

    def register_view(self, name: str, view: Any) -> None:
        self.views[name] = view

    def view(self, name: str) -> Any:
        return self.views[name]


class BuilderView:
    """Surface éditable : mute le document via les opérations du builder."""
    name = "BuilderView"

    def __init__(self, builder: Builder):
        self.builder = builder

    def add(self, options: Any, position: Optional[int] = None) -> Section:
        return self.builder.add(options, position)

    def remove(self, section: Section) -> bool:
        return self.builder.remove(section)

    def sort(self, old_index: int, new_index: int) -> None:
        self.builder.sort(old_index, new_index)

    def palette(self):
        return self.builder.components.catalog()

    def render(self) -> str:
        return html_renderer.render_sections(
            self.builder.sections, self.builder.components, editing=True
        )


class RendererView:
    """Surface lecture seule : réhydrate un document depuis un snapshot JSON."""
    name = "RendererView"

    def __init__(self, builder: Builder):
        self.builder = builder

    def load(self, snapshot: Union[Dict[str, Any], str]) -> Builder:
        document = Builder(
            self.builder.options.model_copy(update={"sections": []}),
            runtime=self.builder.runtime,
            components=self.builder.components,
        )
        document.is_editing = False
        document.is_rendered = True
        document.settings = self.builder.settings.model_copy(deep=True)
        document.set(snapshot)
        return document

    def render(self, snapshot: Union[Dict[str, Any], str, None] = None) -> str:
        """HTML des sections, sans scaffolding éditeur. Sans snapshot : le document installé."""
        document = self.builder if snapshot is None else self.load(snapshot)
        return html_renderer.render_sections(document.sections, document.components, editing=False)


def _queue_option_plugins(entries) -> None:
    for entry in entries:
        if isinstance(entry, (tuple, list)):
            use(*entry)
        else:
            use(entry)


def install(runtime: ViewRuntime, options: Union[BuilderOptions, Dict[str, Any], None] = None) -> Builder:
    """
    Installe le builder et ses deux surfaces sur `runtime`. Idempotent :
    un second appel renvoie le builder déjà installé.
    """
    if runtime.installed:
        log.debug("Builder déjà installé, install() ignoré")
        return runtime.builder

    # les valeurs par défaut de BuilderOptions sont celles de BUILDER_OPTIONS
    opts = options if isinstance(options, BuilderOptions) else BuilderOptions.model_validate(options or {})
    _queue_option_plugins(opts.plugins)

    builder = Builder(opts, runtime=runtime)
    runtime.builder = builder
    runtime.register_view(BuilderView.name, BuilderView(builder))
    runtime.register_view(RendererView.name, RendererView(builder))
    log.info("Builder installé : %d composant(s)", len(builder.components))
    return builder
