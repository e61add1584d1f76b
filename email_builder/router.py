"""
Router FastAPI — endpoints email_builder.

POST /email-builder/render    → EmailDocument JSON → HTMLResponse
POST /email-builder/parse     → {"html"} → EmailDocument JSON
POST /email-builder/validate  → EmailDocument JSON → ValidationResult JSON
POST /email-builder/export    → {"html", "includeStyles"} → HTMLResponse
GET  /email-builder/catalog   → liste des blocs disponibles + leurs JSON schemas
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse

from .blocks import BLOCK_CLASSES, CamelModel
from .core.schemas import DocumentError, EmailDocument, load_document
from .core.validation import validate_document
from .export import prepare_for_export
from .parser.html import parse_html
from .renderer.html import render_email

log = logging.getLogger(__name__)

router = APIRouter(prefix="/email-builder", tags=["email_builder"])


class ParseRequest(CamelModel):
    html: str


class ExportRequest(CamelModel):
    html: str
    include_styles: bool = True


def _load(payload: Dict[str, Any]) -> EmailDocument:
    try:
        return load_document(payload)
    except DocumentError as e:
        log.info("Document refusé : %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/render", response_class=HTMLResponse, summary="Rend un document en HTML email")
def render(payload: Dict[str, Any] = Body(...)) -> HTMLResponse:
    """Reçoit un EmailDocument JSON, retourne le HTML complet de l'email."""
    return HTMLResponse(content=render_email(_load(payload)))


@router.post("/parse", summary="Reconstruit un document depuis du HTML")
def parse(request: ParseRequest) -> JSONResponse:
    document = parse_html(request.html)
    return JSONResponse(document.to_json_dict())


@router.post("/validate", summary="Valide un document sans le rendre")
def validate(payload: Dict[str, Any] = Body(...)) -> JSONResponse:
    """Erreurs et warnings par bloc ; isValid = aucune erreur."""
    result = validate_document(_load(payload))
    return JSONResponse(result.model_dump(mode="json", by_alias=True))


@router.post("/export", response_class=HTMLResponse, summary="Prépare un HTML pour l'export")
def export(request: ExportRequest) -> HTMLResponse:
    return HTMLResponse(content=prepare_for_export(request.html, request.include_styles))


@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    """Retourne le catalogue des blocs avec leurs JSON schemas Pydantic."""
    catalog_data = []
    for block_type, cls in BLOCK_CLASSES.items():
        catalog_data.append({
            "blockType": block_type,
            "schema":    cls.model_json_schema(by_alias=True),
        })
    return JSONResponse({"blocks": catalog_data})
