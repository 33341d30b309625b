import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.core.config import settings
from app.core.errors import GenealogyError
from app.core.logging_config import configure_logging
from app.db.mongo import connect_to_mongo, close_mongo
from app.db.neo4j import connect_to_neo4j, close_neo4j
from app.routers import documents, individuals, pairs

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("app")

@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_to_mongo()
    await connect_to_neo4j()
    logger.info("%s started (%s)", settings.APP_NAME, settings.APP_ENV)
    yield
    await close_neo4j()
    await close_mongo()

# Expose the Swagger UI at the root URL so visiting http://127.0.0.1:8000 opens the docs
app = FastAPI(title=settings.APP_NAME, lifespan=lifespan, docs_url="/")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(GenealogyError)
async def genealogy_error_handler(request: Request, exc: GenealogyError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

# Routers
app.include_router(individuals.router)
app.include_router(pairs.router)
app.include_router(documents.router)

@app.get("/healthz")
async def healthz():
    return {"status": "ok"}

@app.get("/version")
async def version():
    return {"name": settings.APP_NAME, "env": settings.APP_ENV}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=True,
    )
