"""API Routers."""

from .tmdb import router as tmdb_router
from .process_data import router as process_data_router

__all__ = [
    "tmdb_router",
    "process_data_router",
]
