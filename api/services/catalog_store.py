"""In-memory product catalog with atomic snapshot replacement."""

import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

import pandas as pd

from config import settings
from api.models import ProductRecord
from api.services.catalog_normalizer import CatalogNormalizer

logger = logging.getLogger(__name__)


def read_csv_rows(path: str, chunksize: Optional[int] = None) -> Iterator[Dict[str, Any]]:
    """
    Stream rows from a CSV file as dictionaries of strings.

    Args:
        path: CSV file path
        chunksize: Rows read per pandas chunk

    Yields:
        One dict per row, keyed by (whitespace-stripped) column name
    """
    reader = pd.read_csv(
        path,
        dtype=str,
        keep_default_na=False,
        chunksize=chunksize or settings.CATALOG_CHUNK_SIZE,
    )
    with reader:
        for chunk in reader:
            chunk.columns = [str(column).strip() for column in chunk.columns]
            for row in chunk.to_dict(orient="records"):
                yield row


class CatalogStore:
    """
    Holds the current catalog snapshot.

    A load is the only writer. It builds a complete new tuple and swaps the
    reference in one assignment, so readers see the old catalog or the new
    one and never a partially loaded list.
    """

    def __init__(self, normalizer: Optional[CatalogNormalizer] = None):
        self.normalizer = normalizer or CatalogNormalizer()
        self._products: Tuple[ProductRecord, ...] = ()
        self.state = "pending"
        self.loaded_at: Optional[str] = None
        self.last_error: Optional[str] = None

    def list(self) -> Tuple[ProductRecord, ...]:
        return self._products

    def __len__(self) -> int:
        return len(self._products)

    def load(self, rows: Iterable[Mapping[str, Any]]) -> None:
        """Normalize every row from the source, then publish the new snapshot."""
        logger.info("Loading catalog...")
        try:
            products = tuple(self.normalizer.normalize(row) for row in rows)
        except Exception as e:
            self.state = "failed"
            self.last_error = str(e)
            logger.error(f"Catalog load failed, keeping {len(self._products)} existing products: {str(e)}")
            return

        self._products = products
        self.state = "loaded"
        self.loaded_at = datetime.now().isoformat()
        self.last_error = None
        logger.info(f"Loaded {len(products)} products")

    def load_csv(self, path: str, chunksize: Optional[int] = None) -> None:
        self.load(read_csv_rows(path, chunksize))

    async def load_csv_async(self, path: str, chunksize: Optional[int] = None) -> None:
        """Run the blocking CSV load in a worker thread."""
        await asyncio.to_thread(self.load_csv, path, chunksize)
