"""
Schémas Pydantic du builder.

Options d'installation (BuilderOptions), réglages page (PageSettings) et format
snapshot JSON (Snapshot) :

    { "slug": "...", "title": "...", "settings": {...}, "sections": [{"name": "...", "data": {...}}] }

Les clés JSON restent en camelCase (alias) ; les attributs Python en snake_case.
"""
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_COLUMNS_PREFIX: Dict[str, str] = {
    "mobile":     "is-mobile-",
    "tablet":     "is-tablet-",
    "desktop":    "is-desktop-",
    "widescreen": "is-widescreen-",
    "ultrawide":  "is-ultrawide-",
}


# ── Réglages page ──────────────────────────────────────────────────────────

class CookiesPolicy(BaseModel):
    """Bandeau cookies : affiché seulement si activé ET un document de politique est fourni."""
    enabled: bool = False
    pdf: Optional[str] = None


class OgTag(BaseModel):
    property: str
    content: str = ""


class PageSettings(BaseModel):
    """Réglages niveau page (css, script, styles body, vidéo, cookies, GTM, og, favicon…)."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str = ""
    css: str = ""
    script: str = ""
    styles: Dict[str, Any] = Field(default_factory=dict)
    video: Optional[str] = None
    video_position: str = Field(default="", alias="videoPosition")
    cookies_policy: CookiesPolicy = Field(default_factory=CookiesPolicy, alias="cookiesPolicy")
    gtm_id: str = Field(default="", alias="gtmId")
    og_tags: List[OgTag] = Field(default_factory=list, alias="ogTags")
    favicon: str = ""
    full_page_scroll: str = Field(default="no", alias="fullPageScroll")  # "yes" | "no"

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


# ── Options d'installation ─────────────────────────────────────────────────

class BuilderOptions(BaseModel):
    """Options passées à install() — fusionnées sur BUILDER_OPTIONS."""
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    landing: str = ""
    title: str = ""
    intro: bool = True
    sections: List[Any] = Field(default_factory=list)
    plugins: List[Any] = Field(default_factory=list)
    themes: List[Any] = Field(default_factory=list)
    columns_prefix: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_COLUMNS_PREFIX),
        alias="columnsPrefix",
    )
    css: Optional[str] = None
    js: Optional[str] = None
    settings: PageSettings = Field(default_factory=PageSettings)


BUILDER_OPTIONS = BuilderOptions()


# ── Snapshot ───────────────────────────────────────────────────────────────

class SnapshotSection(BaseModel):
    """Enregistrement de restauration d'une section."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    data: Optional[Dict[str, Any]] = None
    group: Optional[str] = None
    section_schema: Optional[Dict[str, Any]] = Field(default=None, alias="schema")
    is_header: Optional[bool] = Field(default=None, alias="isHeader")


class Snapshot(BaseModel):
    """
    Document portable produit par export('json') et consommé par set().

    Une entrée de `sections` est soit un nom de composant (instance fraîche),
    soit un enregistrement complet.
    """
    slug: Optional[str] = None
    title: Optional[str] = None
    settings: Optional[PageSettings] = None
    sections: Optional[List[Union[str, SnapshotSection]]] = None
