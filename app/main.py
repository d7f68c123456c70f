# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from contextlib import asynccontextmanager
import json
import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.errors import BlogApiError, ValidationFailed
from app.api.v1.router import router_v1
from app.db.session import engine
from app.db.schema import create_schema, distribute_blogs

"""
BlogAPI – FastAPI entrypoint.

- Cria a instância principal do FastAPI (title/version) e monta /api/v1.
- No startup: cria o schema e distribui `blogs` (Citus) quando habilitado em settings.
- Converte erros de domínio (BlogApiError) e de validação (400) em JSON.
- Configura CORS conforme settings e expõe /health para diagnóstico rápido.
"""

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
)
log = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_CREATE_SCHEMA:
        await create_schema(engine)
    if settings.DB_DISTRIBUTE_BLOGS:
        await distribute_blogs(engine)
    log.info("%s pronto (env=%s)", settings.APP_NAME, settings.APP_ENV)
    yield
    await engine.dispose()


start_server = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

start_server.include_router(router_v1, prefix="/api/v1")


@start_server.exception_handler(BlogApiError)
async def blog_api_error_handler(request: Request, exc: BlogApiError):
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_body()))


@start_server.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # corpo inválido é ValidationFailed (400), não o 422 padrão do FastAPI
    err = ValidationFailed(exc.errors())
    return JSONResponse(status_code=err.status_code, content=jsonable_encoder(err.to_body()))


@start_server.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception("erro não tratado em %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": f"Internal server error: {type(exc).__name__}", "error": "internal_error"},
    )


def _normalize_cors(origins_setting):
    """
    Aceita: list[str], string JSON (ex: '["http://..."]') ou CSV (ex: 'http://...,http://...').
    Retorna sempre uma lista de strings (sem espaços) ou lista vazia.
    """
    if not origins_setting:
        return []
    if isinstance(origins_setting, (list, tuple)):
        return [o.strip() for o in origins_setting if o and o.strip()]
    if isinstance(origins_setting, str):
        s = origins_setting.strip()
        try:
            parsed = json.loads(s)
            if isinstance(parsed, list):
                return [o.strip() for o in parsed if o and o.strip()]
        except ValueError:
            pass
        return [o.strip() for o in s.split(",") if o and o.strip()]
    return []

origins = _normalize_cors(settings.CORS_ORIGINS)

if not origins:
    origins = ["http://localhost:5173", "http://127.0.0.1:5173"]

start_server.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

log.info("CORS habilitado para: %s", origins)

@start_server.get("/health", tags=["Health"])
def health():
    return {"status": "ok", "env": settings.APP_ENV}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:start_server", host=settings.HOST, port=settings.PORT)
