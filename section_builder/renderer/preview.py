"""Cible de preview par défaut : fichier temporaire ouvert dans le navigateur."""
import logging
import tempfile
import webbrowser

log = logging.getLogger(__name__)


def open_in_browser(html: str) -> None:
    """Écrit la page dans un fichier temporaire et l'ouvre (sans attendre le navigateur)."""
    with tempfile.NamedTemporaryFile("w", suffix=".html", delete=False, encoding="utf-8") as f:
        f.write(html)
        path = f.name
    log.info("Preview écrit dans %s", path)
    webbrowser.open(f"file://{path}", new=2)
