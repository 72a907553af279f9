"""Renderer — sérialisation JSON, surfaces HTML, page autonome."""
from .base import Packager, PreviewTarget
from .html import (
    clean_dom,
    get_body_styles,
    get_cookies_preview,
    get_custom_css,
    get_js_script,
    get_manifest,
    get_og_meta_tags,
    get_scroll_setup,
    get_video_bg,
    gtm_setup,
    inner_html,
    output_fragment,
    render_preview,
    render_sections,
)
from .preview import open_in_browser
from .serialize import serialize, serialize_section, to_json

__all__ = [
    "Packager", "PreviewTarget",
    "clean_dom", "inner_html", "output_fragment", "render_sections", "render_preview",
    "get_body_styles", "get_cookies_preview", "get_custom_css", "get_js_script",
    "get_manifest", "get_og_meta_tags", "get_scroll_setup", "get_video_bg", "gtm_setup",
    "open_in_browser",
    "serialize", "serialize_section", "to_json",
]
