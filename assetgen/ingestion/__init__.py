# Ingestion package
from assetgen.ingestion.base import BaseStore
from assetgen.ingestion.file_store import JsonFileStore
from assetgen.ingestion.registry import RegistryAccessor
from assetgen.ingestion.zone import load_zone

__all__ = [
    "BaseStore",
    "JsonFileStore",
    "RegistryAccessor",
    "load_zone",
]
