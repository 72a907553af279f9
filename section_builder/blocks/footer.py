"""Bloc Footer — copyright + liens."""
from html import escape

from ..components import ComponentDefinition


def render_footer(data, component) -> str:
    links = "".join(
        f'<a href="{escape(str(link.get("href", "#")))}" class="footer__link">{escape(str(link.get("label", "")))}</a>'
        for link in data.get("links", [])
    )
    return f"""<footer class="footer">
  <div class="footer__links">{links}</div>
  <p class="footer__copyright">{escape(str(data.get("copyright", "")))}</p>
</footer>"""


FOOTER = ComponentDefinition(
    name="footer",
    group="footer",
    data={"copyright": "", "links": [], "styles": {}},
    render=render_footer,
)
