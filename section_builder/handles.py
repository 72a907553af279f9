"""
Handles externes — références opaques vers des éléments d'interface vivants.

Un handle peut porter un état runtime non sérialisable (listeners, référence
vers le parent → structure circulaire). Le sérialiseur ne manipule jamais le
handle lui-même : il appelle clone(), qui renvoie une copie structurelle
JSON-compatible sans cet état.
"""
import copy
import html
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional


class ExternalHandle(ABC):
    """Capacité commune : clone pour sérialisation + libération des ressources."""

    @abstractmethod
    def clone(self) -> Any:
        """Copie structurelle sérialisable (sans état runtime)."""

    def release(self) -> None:
        """Libère l'état runtime. Par défaut : rien à faire."""


class ElementHandle(ExternalHandle):
    """
    Élément d'interface (arbre tag / attributs / texte / enfants).

    `parent` et `listeners` sont de l'état runtime : ils ne survivent pas à clone().
    """

    def __init__(
        self,
        tag: str,
        attrs: Optional[Dict[str, str]] = None,
        text: str = "",
        children: Optional[List["ElementHandle"]] = None,
    ):
        self.tag = tag
        self.attrs: Dict[str, str] = dict(attrs or {})
        self.text = text
        self.children: List[ElementHandle] = []
        self.parent: Optional[ElementHandle] = None
        self.listeners: List[Callable] = []
        self.released = False
        for child in children or []:
            self.append(child)

    def append(self, child: "ElementHandle") -> "ElementHandle":
        child.parent = self
        self.children.append(child)
        return child

    def on(self, listener: Callable) -> None:
        self.listeners.append(listener)

    def clone(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "attrs": copy.deepcopy(self.attrs),
            "text": self.text,
            "children": [c.clone() for c in self.children],
        }

    def release(self) -> None:
        if self.released:
            return
        for child in self.children:
            child.release()
        self.listeners.clear()
        self.parent = None
        self.released = True

    def to_html(self) -> str:
        return element_html(self.clone())

    def __repr__(self) -> str:
        return f"<ElementHandle {self.tag} children={len(self.children)}>"


def element_html(node: Any) -> str:
    """Rend un handle ou son clone (dict tag/attrs/text/children) en HTML."""
    if isinstance(node, ElementHandle):
        return node.to_html()
    if not isinstance(node, dict) or "tag" not in node:
        return html.escape(str(node)) if node is not None else ""
    attrs = "".join(
        f' {k}="{html.escape(str(v), quote=True)}"' for k, v in (node.get("attrs") or {}).items()
    )
    inner = html.escape(node.get("text") or "") + "".join(
        element_html(c) for c in node.get("children") or []
    )
    return f"<{node['tag']}{attrs}>{inner}</{node['tag']}>"


def iter_handles(value: Any):
    """Parcourt récursivement dict/list et produit chaque ExternalHandle rencontré."""
    if isinstance(value, ExternalHandle):
        yield value
    elif isinstance(value, dict):
        for v in value.values():
            yield from iter_handles(v)
    elif isinstance(value, (list, tuple)):
        for v in value:
            yield from iter_handles(v)


def clone_handles(value: Any) -> Any:
    """
    Copie de `value` où chaque ExternalHandle est remplacé par son clone.
    Les autres valeurs sont reprises telles quelles ; `value` n'est pas modifié.
    """
    if isinstance(value, ExternalHandle):
        return value.clone()
    if isinstance(value, dict):
        return {k: clone_handles(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [clone_handles(v) for v in value]
    return value
