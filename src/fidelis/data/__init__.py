from ._meta import config, logger
from .data_model import DataModel
from .serializer import (
    FidelisJSONEncoder as JSONEncoder,
    serialize_json,
    serialize_mapping,
    deserialize_json,
)

__all__ = (
    "config",
    "logger",
    "DataModel",
    "JSONEncoder",
    "serialize_json",
    "serialize_mapping",
    "deserialize_json",
)
