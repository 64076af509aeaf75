# pubcatalog/main.py
import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from . import storage
from .catalog import catalog_router
from .catalog.schemas import AuthorProfile
from .catalog.store import Catalog, get_catalog
from .config import get_settings
from .sessions import router as sessions_router


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    catalog = get_catalog()
    logger.info("Serving %d publications", len(catalog.publications))
    yield
    cancelled = storage.end_all_sessions()
    if cancelled:
        await asyncio.gather(*cancelled, return_exceptions=True)
        logger.info("Shutdown: cancelled %d pending submissions", len(cancelled))


def configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


app = FastAPI(
    title="Публикации",
    description=(
        "Каталог научных статей, монографий, учебных материалов и "
        "литературных произведений автора, со страницей «Об авторе» "
        "и формой обратной связи."
    ),
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(catalog_router)
app.include_router(sessions_router)


@app.get("/")
def health_check():
    return {"status": "ok", "message": "Publications catalog is up"}


@app.get("/api/about", response_model=AuthorProfile)
def about(catalog: Catalog = Depends(get_catalog)) -> AuthorProfile:
    return catalog.author


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    configure_logging()
    uvicorn.run("pubcatalog.main:app", host="127.0.0.1", port=8000)
