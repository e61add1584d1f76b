"""
Helpers pour intégration FastAPI.

Démarrer : uvicorn email_builder.fastapi_integration:create_app --factory --port 8001
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import config
from .core.schemas import DocumentError
from .router import router

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Crée l'app FastAPI du Email Builder (router + /health).

    Example:
        >>> from fastapi.testclient import TestClient
        >>> client = TestClient(create_app())
        >>> client.get("/health").json()["status"]
        'ok'
    """
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s — %(message)s")

    from . import __version__

    app = FastAPI(title="Email Builder", version=__version__, docs_url="/docs")
    app.add_middleware(
        CORSMiddleware, allow_origins=config.CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"],
    )
    app.include_router(router)

    @app.exception_handler(DocumentError)
    async def document_error(request: Request, exc: DocumentError):
        log.info("Document invalide sur %s : %s", request.url.path, exc)
        return JSONResponse({"detail": str(exc)}, status_code=422)

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "email_builder", "version": __version__}

    log.info("Email Builder prêt (CORS : %s)", ", ".join(config.CORS_ORIGINS))
    return app
