import json
import os

from fidelis.data import serialize_json, serialize_mapping
from fidelis.error import BadRequestError
from fidelis.helper import ClassRegistry

from . import config, logger

NS_MOBILE = "mobile"
NS_PAN = "pan"
NS_VEHICLE = "vehicle"
NS_CATALOGUE = "catalogue"
NS_APPLICATION = "application"

NAMESPACES = (NS_MOBILE, NS_PAN, NS_VEHICLE, NS_CATALOGUE, NS_APPLICATION)


class KeyValueStore(object):
    ''' Local fallback store. Values are kept as plain JSON-compatible
        data so a snapshot written by one run can be read by the next. '''

    def __init__(self, **kwargs):
        self._memory = {ns: {} for ns in NAMESPACES}

    def _namespace(self, namespace):
        if namespace not in self._memory:
            raise BadRequestError("K00.401", f"Unknown cache namespace [{namespace}]")

        return self._memory[namespace]

    def get(self, namespace, key, default=None):
        return self._namespace(namespace).get(key, default)

    def put(self, namespace, key, value):
        self._namespace(namespace)[key] = serialize_mapping(value)
        self.commit()
        return value

    def delete(self, namespace, key):
        self._namespace(namespace).pop(key, None)
        self.commit()

    def keys(self, namespace):
        return tuple(self._namespace(namespace).keys())

    def values(self, namespace):
        return tuple(self._namespace(namespace).values())

    def commit(self):
        pass

    def load(self):
        return self


KeyValueStoreRegistry = ClassRegistry(KeyValueStore)


@KeyValueStoreRegistry.register('memory')
class MemoryStore(KeyValueStore):
    pass


@KeyValueStoreRegistry.register('json-file')
class JsonFileStore(KeyValueStore):
    def __init__(self, filepath=None, **kwargs):
        super().__init__(**kwargs)
        self._filepath = filepath or config.CACHE_FILEPATH
        self.load()

    @property
    def filepath(self):
        return self._filepath

    def commit(self):
        with open(self._filepath, 'w') as f:
            f.write(serialize_json(self._memory, indent=2))

    def load(self):
        if not os.path.isfile(self._filepath):
            return self

        with open(self._filepath, 'r') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                logger.warning('Invalid cache file [%s]: %s', self._filepath, e)
                return self

        if not isinstance(data, dict):
            logger.warning('Invalid cache file content [%s]', self._filepath)
            return self

        for ns in NAMESPACES:
            if isinstance(data.get(ns), dict):
                self._memory[ns].update(data[ns])

        return self


def create_store(backend=None, **kwargs) -> KeyValueStore:
    backend = backend or config.CACHE_BACKEND
    logger.debug('Using cache backend [%s]', backend)
    return KeyValueStoreRegistry.construct(backend, **kwargs)
