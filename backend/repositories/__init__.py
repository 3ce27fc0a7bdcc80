from .records import RecordsRepository
from .catalog import CatalogRepository
from . import models

__all__ = ["RecordsRepository", "CatalogRepository", "models"]
