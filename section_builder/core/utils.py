"""Helpers génériques : merge récursif, kebab-case."""
import copy
import re
from typing import Any

_WORDS = re.compile(r"[A-Z]{2,}(?=[A-Z][a-z]|\b|\d)|[A-Z]?[a-z]+|[A-Z]+|\d+")


def deep_merge(base: Any, override: Any) -> Any:
    """
    Merge récursif de override dans une copie de base.

    dict + dict → merge clé par clé ; list + list → merge index par index ;
    sinon la valeur de override gagne.
    """
    if isinstance(base, dict) and isinstance(override, dict):
        merged = dict(base)
        for key, val in override.items():
            merged[key] = deep_merge(base[key], val) if key in base else copy.deepcopy(val)
        return merged
    if isinstance(base, list) and isinstance(override, list):
        merged = list(base)
        for i, val in enumerate(override):
            if i < len(merged):
                merged[i] = deep_merge(merged[i], val)
            else:
                merged.append(copy.deepcopy(val))
        return merged
    return copy.deepcopy(override)


def kebab_case(name: str) -> str:
    """"backgroundImage" → "background-image"."""
    return "-".join(w.lower() for w in _WORDS.findall(name))
