import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from core import db, log, middleware, settings
from posts import router as posts_router
from users import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


async def invalid_body_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "errorMessage": "The request body is not valid.",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


def create_app() -> FastAPI:
    log.configure_logging()

    app = FastAPI(lifespan=lifespan)

    # Registered innermost first: CORS, then security headers, then the access log.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(middleware.security_headers)
    app.middleware("http")(middleware.access_log)

    app.add_exception_handler(RequestValidationError, invalid_body_handler)

    app.include_router(users_router.router, tags=["users"])
    app.include_router(posts_router.router, tags=["posts"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "Welcome!"

    return app


app = create_app()


def run() -> None:
    port = settings.api_port()
    logger.info("=== API running on port %s ===", port)
    # Requests are logged by middleware.access_log.
    uvicorn.run(app, host=settings.api_host(), port=port, access_log=False)


if __name__ == "__main__":
    run()
