"""Bloc Hero — titre, sous-titre, CTA."""
from html import escape

from ..components import ComponentDefinition


def render_hero(data, component) -> str:
    cta = ""
    if data.get("cta_label"):
        cta = f'\n    <a href="{escape(str(data.get("cta_href", "#")))}" class="btn btn-primary">{escape(str(data["cta_label"]))}</a>'
    return f"""<div class="hero">
  <div class="hero__content">
    <h1 class="hero__title">{escape(str(data.get("title", "")))}</h1>
    <p class="hero__subtitle">{escape(str(data.get("subtitle", "")))}</p>{cta}
  </div>
</div>"""


HERO = ComponentDefinition(
    name="hero",
    group="hero",
    schema={"title": "text", "subtitle": "text", "cta_label": "text", "cta_href": "link", "styles": "styles"},
    data={"title": "", "subtitle": "", "cta_label": "", "cta_href": "#", "styles": {}},
    render=render_hero,
)
