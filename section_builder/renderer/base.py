"""
Protocols des collaborateurs de l'export : cible de preview, packaging zip/PWA.
"""
from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class PreviewTarget(Protocol):
    """Contexte de visualisation séparé (fire-and-forget, aucun retour attendu)."""
    def __call__(self, html: str) -> None: ...


@runtime_checkable
class Packager(Protocol):
    """Collaborateur optionnel des exports 'zip' / 'pwa'. assets = {"css": path, "js": path}."""
    def download(self, assets: Dict[str, Any]) -> Any: ...
