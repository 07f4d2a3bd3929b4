"""Services for fetching, aggregating and normalizing catalog data."""

from .tmdb_client import TMDBClient, TMDBCredential
from .aggregator import CatalogAggregator
from .insights import InsightsService

__all__ = [
    "TMDBClient",
    "TMDBCredential",
    "CatalogAggregator",
    "InsightsService",
]
