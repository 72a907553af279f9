"""
Sérialisation du document → snapshot portable.

    { "slug", "title", "settings", "sections": [{"name", "data"}] }

Les handles externes (éléments d'interface vivants, potentiellement circulaires)
sont remplacés par leur clone structurel ; les données vivantes ne sont pas modifiées.
"""
import json
from typing import Any, Dict

from ..handles import clone_handles


def serialize_section(section, components=None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"name": section.name, "data": clone_handles(section.data)}
    # isHeader n'est émis que s'il diffère du défaut du composant
    component = components.get(section.name) if components is not None else None
    default_header = component.is_header if component is not None else False
    if section.is_header != default_header:
        out["isHeader"] = section.is_header
    return out


def serialize(builder) -> Dict[str, Any]:
    return {
        "slug": builder.landing,
        "title": builder.title,
        "settings": builder.settings.to_json_dict(),
        "sections": [serialize_section(s, builder.components) for s in builder.sections],
    }


def to_json(builder) -> str:
    return json.dumps(serialize(builder), ensure_ascii=False)
