"""
Registry des plugins — file d'attente process-wide des extensions à installer.

Cycle de vie :
  1. enregistrement : use()/register_plugin() ajoutent (installer, options) à la file
  2. installation   : la construction d'un Builder vide la file (drain) et appelle
                      chaque installer dans l'ordre d'enregistrement
  3. la file est vide juste après : un second Builder ne rejoue que les plugins
     enregistrés depuis
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, NamedTuple, Optional

log = logging.getLogger(__name__)


@dataclass
class InstallContext:
    """Contexte reçu par chaque installer."""
    builder: Any
    runtime: Any = None


class PendingPlugin(NamedTuple):
    installer: Callable[[InstallContext, Dict[str, Any]], Any]
    options: Dict[str, Any]


@dataclass
class PluginRegistry:
    _pending: List[PendingPlugin] = field(default_factory=list)

    def register(self, installer: Callable, options: Optional[Dict[str, Any]] = None) -> bool:
        """Ajoute un plugin à la file. Un installer non appelable est ignoré (warning)."""
        if not callable(installer):
            log.warning("Plugin ignoré : %r n'est pas une fonction", installer)
            return False
        self._pending.append(PendingPlugin(installer, dict(options or {})))
        return True

    def drain(self, context: InstallContext) -> int:
        """
        Installe les plugins en attente, dans l'ordre, en les retirant un à un.

        Si un installer lève, lui seul est consommé : l'exception remonte et les
        plugins suivants restent en file pour la prochaine construction.
        """
        count = 0
        while self._pending:
            plugin = self._pending.pop(0)
            try:
                plugin.installer(context, plugin.options)
            except Exception:
                log.error("Plugin %r en échec, %d plugin(s) restent en attente", plugin.installer, len(self._pending))
                raise
            count += 1
        if count:
            log.debug("%d plugin(s) installé(s)", count)
        return count

    @property
    def pending(self) -> List[PendingPlugin]:
        return list(self._pending)

    def reset(self) -> None:
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)


plugins = PluginRegistry()


def use(installer: Callable, options: Optional[Dict[str, Any]] = None) -> bool:
    """Enregistre un plugin à installer avec le prochain Builder."""
    return plugins.register(installer, options)


register_plugin = use


def register_component(name, definition=None) -> bool:
    """Enregistrement d'un composant avant installation : un plugin qui appelle builder.component()."""
    def _install(ctx: InstallContext, options: Dict[str, Any]) -> None:
        ctx.builder.component(name, definition)

    return use(_install)
