"""Catalog row normalization into canonical product records."""

import logging
from typing import Any, Mapping, Optional

from config import settings
from api.models import ProductRecord
from api.utils.catalog_fields import (
    FIELD_ALIASES,
    first_present,
    interpret_price,
    clean_dimension,
    resolve_asset_url,
)

logger = logging.getLogger(__name__)

_DIMENSION_FIELDS = ("width", "depth", "height")
_ASSET_FIELDS = ("image_url", "cutout_local_path")


class CatalogNormalizer:
    """Turns one raw tabular row into a ProductRecord."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = base_url if base_url is not None else settings.ASSET_BASE_URL

    def normalize(self, row: Mapping[str, Any]) -> ProductRecord:
        """
        Resolve aliases and clean every field of a raw row.

        Missing or garbled fields degrade to empty strings; this never raises
        for a malformed row so one bad line cannot abort a catalog load.

        Args:
            row: Mapping of source column name to cell value

        Returns:
            Canonical ProductRecord
        """
        if not isinstance(row, Mapping):
            return ProductRecord()

        fields = {name: first_present(row, aliases) for name, aliases in FIELD_ALIASES.items()}

        fields["price"] = interpret_price(fields["price"])
        for name in _DIMENSION_FIELDS:
            fields[name] = clean_dimension(fields[name])
        for name in _ASSET_FIELDS:
            fields[name] = resolve_asset_url(fields[name], self.base_url)

        return ProductRecord(**fields)
