import logging
import os
from functools import partial

from fastapi import FastAPI, HTTPException
from fastapi.staticfiles import StaticFiles

from .resources import load_text
from .seed import get_seed

# --- Config ---
SEED_DATA_DIR = os.getenv("SEED_DATA_DIR") or None
PUBLIC_DIR = os.getenv("PUBLIC_DIR", "public")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Seed content service")

# Resolve the seed on startup so requests never touch the filesystem
app.state.seed = get_seed(partial(load_text, data_dir=SEED_DATA_DIR))
logger.info("Seed ready: %d articles, %d references",
            len(app.state.seed.articles), len(app.state.seed.references))


@app.get("/api/health")
async def health():
    return {"status": "ok", "articles": len(app.state.seed.articles)}


@app.get("/api/seed")
async def seed():
    return app.state.seed.to_dict()


@app.get("/api/articles")
async def list_articles():
    return [{"id": a.id, "title": a.title} for a in app.state.seed.articles]


@app.get("/api/articles/{article_id}")
async def get_article(article_id: str):
    for article in app.state.seed.articles:
        if article.id == article_id:
            return article.to_dict()
    raise HTTPException(status_code=404, detail=f"Article not found: {article_id}")


@app.get("/api/references")
async def list_references():
    return [r.to_dict() for r in app.state.seed.references]


# Frontend goes last so the catch-all mount does not shadow /api routes
if os.path.isdir(PUBLIC_DIR):
    app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="static")
else:
    logger.warning("Static directory %s missing; serving API only", PUBLIC_DIR)
