# brecho/api.py

import time

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from brecho.config.logging_config import log
from brecho.config.settings import settings
from brecho.folha.router import router as folha_router
from brecho.ponto.router import router as ponto_router
from brecho.simulador.router import router as simulador_router


def _formatar_erros(exc: RequestValidationError) -> list:
    """Uma entrada por campo violado: {'campo', 'mensagem', 'tipo'}."""
    erros = []
    for erro in exc.errors():
        # Descarta o 'body' inicial do caminho do campo
        loc = [str(parte) for parte in erro.get("loc", ()) if parte != "body"]
        erros.append(
            {
                "campo": ".".join(loc),
                "mensagem": erro.get("msg", ""),
                "tipo": erro.get("type", ""),
            }
        )
    return erros


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        inicio = time.perf_counter()
        response = await call_next(request)
        duracao_ms = (time.perf_counter() - inicio) * 1000
        log.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({duracao_ms:.1f} ms)"
        )
        return response

    # --- Tratamento de erros ---
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        erros = _formatar_erros(exc)
        log.warning(f"Entrada inválida em {request.url.path}: {erros}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": erros}
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        log.opt(exception=exc).error(f"Erro não tratado em {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Erro interno do servidor"},
        )

    # --- Rotas ---
    app.include_router(folha_router, prefix=settings.API_PREFIX)
    app.include_router(simulador_router, prefix=settings.API_PREFIX)
    app.include_router(ponto_router, prefix=settings.API_PREFIX)

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }

    log.info(f"{settings.APP_NAME} v{settings.APP_VERSION} pronto (rotas em '{settings.API_PREFIX}').")
    return app


app = create_app()


def run():
    """Sobe o servidor da API (entrypoint `brecho-dp`)."""
    log.info(f"Iniciando servidor em {settings.HOST}:{settings.PORT}")
    uvicorn.run("brecho.api:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
