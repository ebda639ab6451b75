# product_api/main.py
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .database import ProductStore
from .middleware import (
    ApiKeyMiddleware,
    CredentialVerifier,
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    StaticKeyVerifier,
)
from .routes import router

logger = logging.getLogger(__name__)

WELCOME = f"Welcome to the Product API! Go to {config.PRODUCTS_ROOT} to see all products."


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.debug("rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    return PlainTextResponse("Invalid request body.", status_code=400)


def create_app(
    store: Optional[ProductStore] = None,
    verifier: Optional[CredentialVerifier] = None,
) -> FastAPI:
    config.configure_logging()
    app = FastAPI(title="product-api (in-memory demo)")

    if store is None:
        store = ProductStore.with_samples() if config.SEED_SAMPLE_DATA else ProductStore()
    app.state.store = store

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Last added runs first on the way in.
    app.add_middleware(ApiKeyMiddleware, verifier=verifier or StaticKeyVerifier())
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/", response_class=PlainTextResponse)
    async def welcome():
        return WELCOME

    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    logger.info("Server is running on http://localhost:%d", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
