"""
Bloc Content — grille de sous-composants.

data["components"] : [{"name": "...", "element": ElementHandle | clone, "columns": {"mobile": 12, ...}}]
Un sous-composant partagé (mix({"components": {name: fn}})) rend l'item s'il existe,
sinon l'élément est rendu tel quel.
"""
from html import escape

from ..components import ComponentDefinition
from ..handles import element_html


def render_item(item, component) -> str:
    renderer = component.components.get(item.get("name"))
    if callable(renderer):
        return renderer(item)
    return element_html(item.get("element"))


def render_content(data, component) -> str:
    cells = "".join(
        f'<div class="column {component.mixin.column_classes(item.get("columns"))}">'
        f"{render_item(item, component)}</div>"
        for item in data.get("components", [])
    )
    title = f'<h2 class="content__title">{escape(str(data["title"]))}</h2>' if data.get("title") else ""
    return f'<div class="content">{title}<div class="columns">{cells}</div></div>'


CONTENT = ComponentDefinition(
    name="content",
    group="content",
    data={"title": "", "components": [], "styles": {}},
    render=render_content,
)
