"""
Router FastAPI — endpoints du builder.

POST /builder/render    → snapshot → HTML des sections (surface lecture seule)
POST /builder/preview   → snapshot → page HTML autonome
POST /builder/export    → snapshot → snapshot normalisé (JSON)
POST /builder/validate  → snapshot → {"valid": bool, "error"?}
GET  /builder/catalog   → composants enregistrés + schémas
POST /builder/manifest  → réglages page → manifest web-app

Sans état : chaque requête réhydrate un document via RendererView.
"""
import json
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError

from .builder import Builder
from .core.schemas import PageSettings, Snapshot
from .errors import ComponentNotFound
from .renderer.html import get_manifest, render_sections
from .views import RendererView


def create_router(builder: Builder, prefix: str = "/builder") -> APIRouter:
    router = APIRouter(prefix=prefix, tags=["section_builder"])
    renderer = RendererView(builder)

    def _load(snapshot: Snapshot) -> Builder:
        try:
            return renderer.load(snapshot)
        except ComponentNotFound as e:
            raise HTTPException(status_code=422, detail=str(e))

    @router.post("/render", response_class=HTMLResponse, summary="Rend les sections d'un snapshot")
    def render(snapshot: Snapshot) -> HTMLResponse:
        document = _load(snapshot)
        return HTMLResponse(content=render_sections(document.sections, document.components))

    @router.post("/preview", response_class=HTMLResponse, summary="Page HTML autonome")
    def preview(snapshot: Snapshot) -> HTMLResponse:
        return HTMLResponse(content=_load(snapshot).render_preview())

    @router.post("/export", summary="Snapshot normalisé")
    def export(snapshot: Snapshot) -> JSONResponse:
        return JSONResponse(json.loads(_load(snapshot).export("json")))

    @router.post("/validate", summary="Valide un snapshot sans le rendre")
    def validate(payload: Dict[str, Any]) -> dict:
        try:
            renderer.load(payload)
            return {"valid": True}
        except (ValidationError, ComponentNotFound) as e:
            return {"valid": False, "error": str(e)}

    @router.get("/catalog", summary="Composants disponibles et leurs schémas")
    def catalog() -> JSONResponse:
        return JSONResponse({"components": builder.components.catalog()})

    @router.post("/manifest", summary="Manifest web-app depuis les réglages page")
    def manifest(settings: PageSettings) -> JSONResponse:
        return JSONResponse(json.loads(get_manifest(settings)))

    return router
