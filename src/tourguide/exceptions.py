from typing import Any, List, Tuple


class TourGuideError(Exception):
    """Base class for errors raised by the tracking and rewards engine."""


class InvalidCoordinate(TourGuideError, ValueError):
    """A latitude or longitude outside its valid range."""


class ProviderUnavailable(TourGuideError):
    """
    An external collaborator (GPS, attraction feed, reward or pricing oracle)
    failed to answer.
    """

    def __init__(self, provider: str, message: str = ""):
        self.provider = provider
        super().__init__(f"{provider} unavailable: {message}" if message else f"{provider} unavailable")


class PartialBatchFailure(TourGuideError):
    """
    One or more tasks of a batch failed. The first failure in input order is
    exposed as `index`/`item` and chained as __cause__.
    """

    def __init__(self, index: int, item: Any, failures: List[Tuple[int, BaseException]], total: int):
        self.index = index
        self.item = item
        self.failures = failures
        self.total = total
        first = failures[0][1]
        super().__init__(
            f"{len(failures)} of {total} tasks failed; first failure at index {index}: {first!r}"
        )


class UnknownUser(TourGuideError, KeyError):
    """No user registered under the requested name."""
