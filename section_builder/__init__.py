"""
Section Builder v0.3 — construction de pages par sections.

Usage (installation + édition):
    >>> from section_builder import ViewRuntime, install, use, blocks
    >>> use(blocks.install)
    >>> builder = install(ViewRuntime(), {"title": "Ma page", "landing": "ma-page"})
    >>> builder.add({"name": "hero"})
    >>> snapshot = builder.export("json")

Usage (rendu seul):
    >>> runtime.view("RendererView").render(snapshot)
"""
from . import blocks, packaging
from .builder import Builder, register_default_plugins
from .components import (
    Component,
    ComponentDefinition,
    ComponentRegistry,
    MixinStore,
    mix,
    mixins,
    register_mixin,
)
from .core.schemas import (
    BUILDER_OPTIONS,
    BuilderOptions,
    CookiesPolicy,
    OgTag,
    PageSettings,
    Snapshot,
    SnapshotSection,
)
from .errors import BuilderError, ComponentNotFound
from .handles import ElementHandle, ExternalHandle
from .plugins import InstallContext, PluginRegistry, plugins, register_component, register_plugin, use
from .section import Section
from .views import BuilderView, RendererView, ViewRuntime, install

__version__ = "0.3.0"

__all__ = [
    # modèle
    "Builder", "Section", "BuilderOptions", "BUILDER_OPTIONS", "PageSettings",
    "CookiesPolicy", "OgTag", "Snapshot", "SnapshotSection",
    # composants / mixins
    "Component", "ComponentDefinition", "ComponentRegistry", "MixinStore",
    "mix", "mixins", "register_mixin",
    # plugins
    "InstallContext", "PluginRegistry", "plugins", "use", "register_plugin",
    "register_component", "register_default_plugins",
    # surfaces
    "ViewRuntime", "BuilderView", "RendererView", "install",
    # handles
    "ExternalHandle", "ElementHandle",
    # erreurs
    "BuilderError", "ComponentNotFound",
    # plugins fournis
    "blocks", "packaging",
]
