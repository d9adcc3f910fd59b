import json
from datetime import date, datetime
from enum import Enum

from pyrsistent import PMap, PVector

from ._meta import config
from .data_model import DataModel

DATE_FORMAT = '%Y-%m-%d'

# Checked in order: datetime is a subclass of date.
ENCODERS = (
    (DataModel, lambda obj: obj.serialize()),
    (PMap, dict),
    ((PVector, set, frozenset, tuple), list),
    (datetime, lambda obj: obj.isoformat()),
    (date, lambda obj: obj.strftime(DATE_FORMAT)),
    (Enum, lambda obj: obj.value),
)


class FidelisJSONEncoder(json.JSONEncoder):
    ''' Sample usage:

        from fidelis.data import serialize_json
        serialize_json(profile)
    '''

    def default(self, obj):
        for types, encode in ENCODERS:
            if isinstance(obj, types):
                return encode(obj)

        return super().default(obj)


def serialize_json(data, cls=FidelisJSONEncoder, **kwargs) -> str:
    kwargs.setdefault('indent', config.JSON_INDENT or None)
    return json.dumps(data, cls=cls, **kwargs)


def deserialize_json(data_str) -> dict:
    return json.loads(data_str)


def serialize_mapping(data):
    ''' Convert a record into plain JSON-compatible python values. '''
    if data is None:
        return {}

    return deserialize_json(serialize_json(data))
