import pytest

from fakes import make_attraction
from tourguide.exceptions import ProviderUnavailable
from tourguide.modules.catalog.catalog import AttractionCatalog
from tourguide.providers.attractions import StaticAttractionProvider
from tourguide.providers.base import AttractionProvider


class BrokenProvider(AttractionProvider):
    def list_attractions(self):
        raise ConnectionError("feed offline")


def test_load_snapshot(attractions):
    provider = StaticAttractionProvider(attractions)
    catalog = AttractionCatalog.load(provider)

    assert len(catalog) == 3
    assert list(catalog) == attractions
    assert catalog.find("North Pier") is attractions[1]
    assert catalog.find("Nowhere") is None


def test_snapshot_is_isolated_from_source_list(attractions):
    source = list(attractions)
    catalog = AttractionCatalog.load(StaticAttractionProvider(source))
    source.append(make_attraction("Late Addition", 5.0, 5.0))

    assert len(catalog) == 3
    assert isinstance(catalog.attractions, tuple)


def test_empty_catalog_is_falsy():
    assert not AttractionCatalog.load(StaticAttractionProvider([]))


def test_provider_failure_is_wrapped():
    with pytest.raises(ProviderUnavailable) as exc_info:
        AttractionCatalog.load(BrokenProvider())
    assert exc_info.value.provider == "attractions"
    assert isinstance(exc_info.value.__cause__, ConnectionError)
