from .catalog import AttractionCatalog

__all__ = ["AttractionCatalog"]
