import uuid
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd
from loguru import logger

from tourguide.core.attraction import Attraction
from tourguide.core.location import Location
from tourguide.exceptions import ProviderUnavailable

from .base import AttractionProvider

ATTRACTION_NAMESPACE = uuid.UUID("6f1c0e52-3d1b-4a53-9b64-2f6bb2a8e9d1")


class StaticAttractionProvider(AttractionProvider):
    """Serves a fixed, in-memory list of attractions."""

    def __init__(self, attractions: Sequence[Attraction]):
        self._attractions = tuple(attractions)

    def list_attractions(self) -> List[Attraction]:
        return list(self._attractions)


class CsvAttractionProvider(AttractionProvider):
    """
    Reads attractions from a CSV file. The file is re-read on every call,
    so edits are picked up by the next batch.
    Rows without an attraction_id get a stable uuid5 derived from the name.
    """

    def __init__(self, filepath: str | Path, sep: str = ",", col_mapping: Optional[Dict[str, str]] = None):
        self.filepath = Path(filepath)
        self.sep = sep
        self.mapping = col_mapping or {
            "attraction_id": "attraction_id",
            "name": "name",
            "city": "city",
            "state": "state",
            "latitude": "latitude",
            "longitude": "longitude",
        }

    def list_attractions(self) -> List[Attraction]:
        try:
            frame = pd.read_csv(self.filepath, sep=self.sep)
        except (OSError, pd.errors.ParserError) as e:
            raise ProviderUnavailable("attractions", f"cannot read {self.filepath}: {e}") from e

        required = [self.mapping["name"], self.mapping["latitude"], self.mapping["longitude"]]
        missing = [c for c in required if c not in frame.columns]
        if missing:
            raise ValueError(f"CSV must contain {required} columns. Missing: {missing}")

        has_id_col = self.mapping["attraction_id"] in frame.columns
        has_city_col = self.mapping["city"] in frame.columns
        has_state_col = self.mapping["state"] in frame.columns

        attractions = []
        for _, row in frame.iterrows():
            name = str(row[self.mapping["name"]])
            raw_id = row[self.mapping["attraction_id"]] if has_id_col else None
            if raw_id is None or pd.isna(raw_id):
                attraction_id = uuid.uuid5(ATTRACTION_NAMESPACE, name)
            else:
                attraction_id = uuid.UUID(str(raw_id))

            attractions.append(Attraction(
                attraction_id=attraction_id,
                name=name,
                location=Location(
                    latitude=float(row[self.mapping["latitude"]]),
                    longitude=float(row[self.mapping["longitude"]]),
                ),
                city=str(row[self.mapping["city"]]) if has_city_col and not pd.isna(row[self.mapping["city"]]) else "",
                state=str(row[self.mapping["state"]]) if has_state_col and not pd.isna(row[self.mapping["state"]]) else "",
            ))

        logger.debug(f"Loaded {len(attractions)} attractions from {self.filepath}")
        return attractions
