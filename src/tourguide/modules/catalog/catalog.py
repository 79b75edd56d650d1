from typing import Iterator, Optional, Tuple

from loguru import logger

from tourguide.core.attraction import Attraction
from tourguide.exceptions import ProviderUnavailable, TourGuideError
from tourguide.providers.base import AttractionProvider


class AttractionCatalog:
    """
    Immutable snapshot of the attraction feed.
    Taken once at the start of a batch and shared read-only by every worker,
    so all users in the batch are matched against the same catalog version.
    """

    def __init__(self, attractions: Tuple[Attraction, ...]):
        self._attractions = tuple(attractions)

    @classmethod
    def load(cls, provider: AttractionProvider) -> "AttractionCatalog":
        """
        Fetches the attraction list once from the provider.

        Raises:
            ProviderUnavailable: if the provider call fails.
        """
        try:
            attractions = provider.list_attractions()
        except TourGuideError:
            raise
        except Exception as e:
            raise ProviderUnavailable("attractions", str(e)) from e

        catalog = cls(tuple(attractions))
        logger.debug(f"Attraction catalog loaded: {len(catalog)} entries")
        return catalog

    @property
    def attractions(self) -> Tuple[Attraction, ...]:
        return self._attractions

    def find(self, name: str) -> Optional[Attraction]:
        for attraction in self._attractions:
            if attraction.name == name:
                return attraction
        return None

    def __len__(self) -> int:
        return len(self._attractions)

    def __iter__(self) -> Iterator[Attraction]:
        return iter(self._attractions)

    def __bool__(self) -> bool:
        return bool(self._attractions)
