"""
Renderer HTML — surfaces d'édition / lecture et assemblage de la page autonome (preview).

Pipeline preview :
  output_fragment(builder)   →  artboard rendu en mode édition (lxml)
  clean_dom(fragment)        →  retire le scaffolding éditeur
  render_preview(builder)    →  document HTML complet
"""
import html
import json
from typing import Any, Dict, List, Optional

import lxml.html

from .. import config
from ..core.schemas import OgTag, PageSettings
from ..styler import Styler

EDITOR_ATTRIBUTES = (
    "contenteditable",
    "draggable",
    "spellcheck",
    "data-styler",
    "data-editable",
    "data-section-id",
)
EDITOR_CLASSES = ("is-editable", "is-selected", "is-active")


# ── Surfaces ────────────────────────────────────────────────────────────────

def render_sections(sections, components, editing: bool = False) -> str:
    """Concatène le rendu des sections dans l'ordre de la liste."""
    return "\n".join(
        components.resolve(section.name).render(section, editing=editing)
        for section in sections
    )


def output_fragment(builder):
    """Artboard du builder rendu dans son mode courant, sous forme d'élément lxml."""
    editing = builder.is_editing
    classes = "artboard is-editable" if editing else "artboard"
    markup = render_sections(builder.sections, builder.components, editing=editing)
    return lxml.html.fragment_fromstring(f'<div id="artboard" class="{classes}">{markup}</div>')


def clean_dom(root):
    """Retire les nœuds data-editor-only et les attributs/classes propres à l'édition."""
    for el in root.xpath(".//*[@data-editor-only]"):
        el.drop_tree()
    for el in root.iter():
        if not isinstance(el.tag, str):
            continue
        for attr in EDITOR_ATTRIBUTES:
            el.attrib.pop(attr, None)
        classes = el.get("class")
        if classes is not None:
            kept = [c for c in classes.split() if c not in EDITOR_CLASSES]
            if kept:
                el.set("class", " ".join(kept))
            else:
                del el.attrib["class"]
    return root


def inner_html(el) -> str:
    text = html.escape(el.text, quote=False) if el.text else ""
    return text + "".join(lxml.html.tostring(child, encoding="unicode") for child in el)


# ── Helpers réglages page ──────────────────────────────────────────────────

def get_custom_css(settings: PageSettings) -> str:
    return settings.css or ""


def get_js_script(settings: PageSettings) -> str:
    return settings.script or ""


def get_body_styles(settings: PageSettings, styler: Optional[Styler] = None) -> str:
    """Styles inline du body ; overflow masqué en scroll pleine page."""
    if not settings.styles:
        return ""
    styles = (styler or Styler()).inline(settings.styles)
    if settings.full_page_scroll == "yes":
        styles += "overflow:hidden!important;"
    return styles


def get_video_bg(video: str, position: str = "") -> str:
    return (
        f'<video id="video_bg" class="{position}" autoplay="true" loop="loop" muted="muted">\n'
        f'  <source src="{video}" type="video/mp4"></source>\n'
        f'</video>'
    )


def get_cookies_preview(settings: PageSettings) -> str:
    policy = settings.cookies_policy
    if not policy.enabled or not policy.pdf:
        return ""
    return f"""
<div id="cookies-policy" class="cookies-policy">
  <span id="cookies-policy-close" class="cookies-policy__close">&times;</span>
  <h2 class="cookies-policy__title">Cookies policy</h2>
  <p class="cookies-policy__description">
    This website uses cookies.
    If you do not wish us to set cookies on your device, please do not use the website.
    Please read the <a href="{policy.pdf}" target="_blank">Cookies Policy</a> for more information.
  </p>
</div>
"""


def get_scroll_setup(
    settings: PageSettings,
    origin: str = "",
    breakpoint: int = 500,
) -> Dict[str, str]:
    """
    Scroll pleine page (onepage-scroll) : `style` = librairies, `setup` = activation.
    Désactivé sous `breakpoint` px, réactivé au resize quand on repasse au-dessus.
    """
    scroll = {"style": "", "setup": ""}
    if settings.full_page_scroll != "yes":
        return scroll

    scroll["style"] = f"""
<script src="{config.JQUERY_URL}"></script>
<script src="{origin}/js/onepage-scroll.min.js"></script>
<link href="{origin}/css/onepage-scroll.css" rel="stylesheet">
"""
    scroll["setup"] = f"""
<script>
  function detectMobile () {{
    return $(window).width() < {breakpoint} ? true : false;
  }}

  if (!detectMobile()) {{
    $(".main").onepage_scroll();
  }}

  $(window).resize(function() {{
    let className = 'disabled-onepage-scroll';
    let classWrapName = 'onepage-wrapper';

    if (detectMobile()) {{
      if ($(".main").data("onepage_scroll")) {{
        $(".main").disable();
        $(".main").data("onepage_scroll").destroy();

        if ($(".main").hasClass(classWrapName)) $(".main").removeClass(classWrapName);
      }}
      $("body").addClass(className);
      $("body").css('overflow', '');

    }} else {{
      if (!$(".main").data("onepage_scroll")) {{
        $(".main").onepage_scroll();
      }}

      $("body").css('overflow', 'hidden');

      if ($("body").hasClass(className)) $("body").removeClass(className);
    }}
  }});
</script>"""
    return scroll


def gtm_setup(settings: PageSettings) -> Dict[str, str]:
    """Snippets Google Tag Manager head/body — vides sans gtmId."""
    setup = {"head": "", "body": ""}
    gtm_id = settings.gtm_id
    if not gtm_id:
        return setup

    setup["head"] = f"""<!-- Google Tag Manager -->
<script>(function(w,d,s,l,i){{w[l]=w[l]||[];w[l].push({{'gtm.start':
new Date().getTime(),event:'gtm.js'}});var f=d.getElementsByTagName(s)[0],
j=d.createElement(s),dl=l!='dataLayer'?'&l='+l:'';j.async=true;j.src=
'https://www.googletagmanager.com/gtm.js?id='+i+dl;f.parentNode.insertBefore(j,f);
}})(window,document,'script','dataLayer','{gtm_id}');</script>
<!-- End Google Tag Manager -->"""
    setup["body"] = f"""<!-- Google Tag Manager (noscript) -->
<noscript><iframe src="https://www.googletagmanager.com/ns.html?id={gtm_id}"
height="0" width="0" style="display:none;visibility:hidden"></iframe></noscript>
<!-- End Google Tag Manager (noscript) -->"""
    return setup


def get_manifest(settings: PageSettings) -> str:
    """Manifest web-app (JSON) ; description = og:description ou vide."""
    description = next((t.content for t in settings.og_tags if t.property == "og:description"), "")
    manifest = {
        "name": settings.title,
        "description": description,
        "icons": [{"src": settings.favicon, "sizes": "64x64"}],
        "start_url": ".",
    }
    return json.dumps(manifest)


def get_og_meta_tags(tags: List[Any]) -> str:
    out = ""
    for tag in tags:
        tag = tag if isinstance(tag, OgTag) else OgTag.model_validate(tag)
        out += (
            f'<meta property="{html.escape(tag.property, quote=True)}" '
            f'content="{html.escape(tag.content, quote=True)}">'
        )
    return out


# ── Page autonome ──────────────────────────────────────────────────────────

def render_preview(builder, origin: Optional[str] = None, breakpoint: Optional[int] = None) -> str:
    """Document HTML complet, sans scaffolding éditeur."""
    origin = config.ORIGIN if origin is None else origin
    breakpoint = config.MOBILE_BREAKPOINT if breakpoint is None else breakpoint
    settings = builder.settings

    artboard = clean_dom(output_fragment(builder))
    title = html.escape(settings.title or builder.title or "")
    scroll = get_scroll_setup(settings, origin, breakpoint)
    body_styles = get_body_styles(settings, builder.components.styler)
    video = get_video_bg(settings.video, settings.video_position) if settings.video else ""

    return f"""<!DOCTYPE html>
<html>
  <head>
    <title>{title}</title>
    <meta http-equiv="Content-Type" content="text/html; charset=utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <link rel="stylesheet" href="{origin}/sections.css">
    <link href="{config.FONTS_URL}" rel="stylesheet">
    {scroll["style"]}
    <style>
      {get_custom_css(settings)}
    </style>
  </head>
  <body class="b-body_preview" style="{body_styles}">
    {video}
    <div id="main" class="main">
      {inner_html(artboard)}
    </div>
    {get_cookies_preview(settings)}
    {scroll["setup"]}
    <script>
      {get_js_script(settings)}
    </script>
    <script src="{origin}/js/cjs.js"></script>
  </body>
</html>"""
