import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from empire.api import admin, ads, auth, blog, content, financial, tasks, users
from empire.core.config import CORS_ORIGINS, LOG_LEVEL
from empire.core.db import close_db, init_db
from empire.core.errors import register_exception_handlers


def create_app() -> FastAPI:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Empire Mine API",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth.router, prefix="/api")
    app.include_router(users.router, prefix="/api")
    app.include_router(ads.router, prefix="/api")
    app.include_router(tasks.router, prefix="/api")
    app.include_router(financial.router, prefix="/api")
    app.include_router(blog.router, prefix="/api")
    app.include_router(content.betting_router, prefix="/api")
    app.include_router(content.trading_router, prefix="/api")
    app.include_router(admin.router, prefix="/api")

    @app.get("/api/health")
    async def health():
        return {"status": "OK", "message": "Empire Mine API is running"}

    @app.on_event("startup")
    async def startup_event():
        await init_db()

    @app.on_event("shutdown")
    async def shutdown_event():
        await close_db()

    return app
