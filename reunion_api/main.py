import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_swagger_ui_html

from reunion_api.core.config import settings
from reunion_api.core.db import SessionLocal
from reunion_api.routers import family_tree, health
from reunion_api.services.seed import seed_demo_family

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.seed_demo_data:
        db = SessionLocal()
        try:
            seed_demo_family(db)
            db.commit()
        finally:
            db.close()
    logger.info("family tree API started (env=%s, root mode=%s)", settings.app_env, settings.tree_root_mode)
    yield


app = FastAPI(
    title="Family Reunion Tree API",
    version="1.0.0",
    description="API for maintaining the family reunion genealogy tree.",
    # Served behind a reverse proxy prefix; /docs below points Swagger at the prefixed OpenAPI URL.
    docs_url=None,
    root_path=settings.root_path,
    lifespan=lifespan,
)


@app.get("/docs", include_in_schema=False)
def swagger_ui():
    prefix = (settings.root_path or "").rstrip("/")
    openapi_url = f"{prefix}{app.openapi_url}"
    return get_swagger_ui_html(openapi_url=openapi_url, title=f"{app.title} - Docs")


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(family_tree.router)
