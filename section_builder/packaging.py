"""
Packaging zip / PWA — collaborateur optionnel de Builder.export('zip'|'pwa').

    >>> use(packaging.install, {"output_dir": "dist", "pwa": True})

L'archive contient index.html (page autonome), page.json (snapshot),
manifest.json (PWA) et les assets css/js s'ils existent sur disque.
"""
import logging
import zipfile
from pathlib import Path
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)


class ZipPackager:
    def __init__(self, builder, output_dir: str = ".", pwa: bool = False, filename: Optional[str] = None):
        self.builder = builder
        self.output_dir = Path(output_dir)
        self.pwa = pwa
        self.filename = filename

    def archive_path(self) -> Path:
        name = self.filename or f"{self.builder.landing or 'page'}.zip"
        return self.output_dir / name

    def download(self, assets: Dict[str, Any]) -> Path:
        """Écrit l'archive et renvoie son chemin."""
        path = self.archive_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            zf.writestr("index.html", self.builder.render_preview(origin="."))
            zf.writestr("page.json", self.builder.to_json())
            if self.pwa:
                zf.writestr("manifest.json", self.builder.get_manifest())
            for kind in ("css", "js"):
                src = assets.get(kind)
                if src and Path(src).is_file():
                    zf.write(src, f"{kind}/{Path(src).name}")
                elif src:
                    log.warning("Asset %s introuvable : %s", kind, src)
        log.info("Archive écrite : %s", path)
        return path


def install(ctx, options: Dict[str, Any]) -> None:
    """Plugin : branche ZipPackager.download sur builder.download."""
    packager = ZipPackager(ctx.builder, **options)
    ctx.builder.download = packager.download
