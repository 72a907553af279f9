"""Tests plugin de packaging zip / PWA."""
import json
import zipfile

from section_builder import Builder, blocks, packaging, use


def _builder(tmp_path, **plugin_options):
    use(blocks.install)
    use(packaging.install, {"output_dir": str(tmp_path), **plugin_options})
    css = tmp_path / "site.css"
    css.write_text("body{margin:0}")
    return Builder({"landing": "promo", "title": "Promo", "css": str(css)})


def test_zip_export_writes_archive(tmp_path):
    builder = _builder(tmp_path)
    builder.add({"name": "hero", "data": {"title": "Archive"}})
    path = builder.export("zip")
    assert path == tmp_path / "promo.zip"
    with zipfile.ZipFile(path) as zf:
        names = set(zf.namelist())
        assert {"index.html", "page.json", "css/site.css"} <= names
        assert "manifest.json" not in names
        assert "Archive" in zf.read("index.html").decode()
        assert json.loads(zf.read("page.json"))["slug"] == "promo"


def test_pwa_export_adds_manifest(tmp_path):
    builder = _builder(tmp_path, pwa=True, filename="app.zip")
    builder.settings.title = "App"
    path = builder.export("pwa")
    with zipfile.ZipFile(path) as zf:
        manifest = json.loads(zf.read("manifest.json"))
    assert path.name == "app.zip"
    assert manifest["name"] == "App"
    assert manifest["start_url"] == "."


def test_missing_js_asset_is_skipped(tmp_path):
    builder = _builder(tmp_path)
    path = builder.export("zip")
    with zipfile.ZipFile(path) as zf:
        assert not any(n.startswith("js/") for n in zf.namelist())


def test_collaborators_satisfy_protocols(tmp_path):
    from section_builder.renderer.base import Packager, PreviewTarget
    from section_builder.renderer.preview import open_in_browser

    builder = _builder(tmp_path)
    assert isinstance(packaging.ZipPackager(builder), Packager)
    assert isinstance(open_in_browser, PreviewTarget)
    assert isinstance(builder.preview_target, PreviewTarget)
