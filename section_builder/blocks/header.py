"""Bloc Header — barre de navigation épinglée (isHeader)."""
from html import escape

from ..components import ComponentDefinition


def render_header(data, component) -> str:
    links = "".join(
        f'<li><a href="{escape(str(link.get("href", "#")))}" class="header__link">{escape(str(link.get("label", "")))}</a></li>'
        for link in data.get("links", [])
    )
    return f"""<nav class="header">
  <a href="{escape(str(data.get("logo_href", "/")))}" class="header__logo">{escape(str(data.get("logo_text", "")))}</a>
  <ul class="header__links">{links}</ul>
</nav>"""


HEADER = ComponentDefinition(
    name="header",
    group="navigation",
    is_header=True,
    data={"logo_text": "", "logo_href": "/", "links": [], "styles": {}},
    render=render_header,
)
