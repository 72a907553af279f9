"""Tests renderer HTML — clean pass, assemblage preview, helpers réglages page."""
import json

import lxml.html

from section_builder import OgTag, PageSettings
from section_builder.renderer.html import (
    clean_dom,
    get_body_styles,
    get_cookies_preview,
    get_manifest,
    get_og_meta_tags,
    get_scroll_setup,
    get_video_bg,
    gtm_setup,
    inner_html,
    output_fragment,
    render_preview,
)


# ── clean_dom ─────────────────────────────────────────────────────────────

def test_clean_dom_strips_editor_scaffolding():
    root = lxml.html.fragment_fromstring(
        '<div id="artboard" class="artboard is-editable">'
        '<section class="section is-editable" contenteditable="true" draggable="true" data-styler="true">'
        '<div data-editor-only="true"><button>x</button></div>'
        '<p class="is-selected">Texte</p>'
        '</section></div>'
    )
    clean_dom(root)
    out = lxml.html.tostring(root, encoding="unicode")
    assert "data-editor-only" not in out
    assert "<button>" not in out
    assert "contenteditable" not in out
    assert "draggable" not in out
    assert "data-styler" not in out
    assert "is-editable" not in out
    assert "<p>Texte</p>" in out
    assert 'class="section"' in out


def test_output_fragment_in_editing_mode(builder):
    builder.add({"name": "hero", "data": {"title": "Titre"}})
    frag = output_fragment(builder)
    assert frag.get("id") == "artboard"
    assert frag.xpath(".//*[@data-editor-only]")
    clean_dom(frag)
    assert not frag.xpath(".//*[@data-editor-only]")
    assert "Titre" in inner_html(frag)


# ── render_preview ────────────────────────────────────────────────────────

def test_preview_assembly_order(builder):
    builder.add({"name": "hero", "data": {"title": "Contenu"}})
    builder.settings = PageSettings(
        title="Ma page",
        css=".x{color:red}",
        script="console.log('custom')",
        video="/bg.mp4",
        cookiesPolicy={"enabled": True, "pdf": "/cookies.pdf"},
        fullPageScroll="yes",
    )
    page = render_preview(builder, origin="https://site.test", breakpoint=640)
    markers = [
        'href="https://site.test/sections.css"',
        "fonts.googleapis.com",
        "onepage-scroll.min.js",
        ".x{color:red}",
        'id="video_bg"',
        "Contenu",
        'id="cookies-policy"',
        "$(window).resize",
        "console.log('custom')",
        'src="https://site.test/js/cjs.js"',
    ]
    positions = [page.index(m) for m in markers]
    assert positions == sorted(positions)
    assert "< 640" in page
    assert "<title>Ma page</title>" in page
    assert "data-editor-only" not in page


def test_preview_without_full_page_scroll(builder):
    builder.settings = PageSettings(fullPageScroll="no")
    page = render_preview(builder, origin="")
    assert "onepage-scroll" not in page
    assert "$(window).resize" not in page
    assert "jquery" not in page


def test_preview_escapes_title(builder):
    builder.settings = PageSettings(title="<script>")
    assert "<title>&lt;script&gt;</title>" in render_preview(builder, origin="")


def test_preview_falls_back_on_builder_title(builder):
    assert "<title>Ma page</title>" in render_preview(builder, origin="")


def test_preview_does_not_touch_editing_state(builder):
    builder.add({"name": "hero"})
    render_preview(builder, origin="")
    assert builder.is_editing is True


# ── helpers ───────────────────────────────────────────────────────────────

def test_cookie_notice_disabled_is_empty():
    assert get_cookies_preview(PageSettings(cookiesPolicy={"enabled": False})) == ""


def test_cookie_notice_requires_policy_document():
    assert get_cookies_preview(PageSettings(cookiesPolicy={"enabled": True})) == ""
    notice = get_cookies_preview(PageSettings(cookiesPolicy={"enabled": True, "pdf": "/p.pdf"}))
    assert 'href="/p.pdf"' in notice


def test_scroll_setup_empty_unless_yes():
    assert get_scroll_setup(PageSettings()) == {"style": "", "setup": ""}
    scroll = get_scroll_setup(PageSettings(fullPageScroll="yes"), origin="o", breakpoint=500)
    assert 'src="o/js/onepage-scroll.min.js"' in scroll["style"]
    assert "detectMobile" in scroll["setup"]


def test_body_styles():
    settings = PageSettings(styles={"backgroundColor": "#fff", "backgroundImage": "/bg.png", "color": ""})
    assert get_body_styles(settings) == "background-color: #fff;background-image: url(/bg.png);"
    settings.full_page_scroll = "yes"
    assert get_body_styles(settings).endswith("overflow:hidden!important;")
    assert get_body_styles(PageSettings()) == ""


def test_video_bg():
    out = get_video_bg("/v.mp4", "bottom")
    assert 'class="bottom"' in out
    assert 'src="/v.mp4"' in out


def test_gtm_setup():
    assert gtm_setup(PageSettings()) == {"head": "", "body": ""}
    setup = gtm_setup(PageSettings(gtmId="GTM-ABC"))
    assert "'dataLayer','GTM-ABC'" in setup["head"]
    assert "ns.html?id=GTM-ABC" in setup["body"]


def test_manifest_description_from_og():
    settings = PageSettings(
        title="Site",
        favicon="/fav.png",
        ogTags=[{"property": "og:title", "content": "x"}, {"property": "og:description", "content": "Desc"}],
    )
    assert json.loads(get_manifest(settings)) == {
        "name": "Site",
        "description": "Desc",
        "icons": [{"src": "/fav.png", "sizes": "64x64"}],
        "start_url": ".",
    }


def test_manifest_description_empty_without_og():
    assert json.loads(get_manifest(PageSettings()))["description"] == ""


def test_og_meta_tags():
    out = get_og_meta_tags([OgTag(property="og:title", content='A "B"'), {"property": "og:type", "content": "website"}])
    assert out == (
        '<meta property="og:title" content="A &quot;B&quot;">'
        '<meta property="og:type" content="website">'
    )


def test_block_text_is_escaped(builder):
    builder.add({"name": "hero", "data": {"title": "Prix < 10 & plus", "subtitle": "<b>gras</b>"}})
    builder.add({"name": "footer", "data": {"copyright": "", "links": [{"label": "A&B", "href": '/x?a="1"'}]}})
    root = output_fragment(builder)
    assert root.xpath(".//h1[@class='hero__title']")[0].text_content() == "Prix < 10 & plus"
    assert root.xpath(".//p[@class='hero__subtitle']/b") == []
    link = root.xpath(".//a[@class='footer__link']")[0]
    assert link.text_content() == "A&B"
    assert link.get("href") == '/x?a="1"'
    assert "Prix &lt; 10 &amp; plus" in render_preview(builder, origin="")
