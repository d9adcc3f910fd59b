from pyrsistent import pmap

from fidelis import logger
from fidelis.error import BadRequestError, NotFoundError

from .genutil import camel_to_lower


class _ClassRegistry(object):
    ''' Maps a string key to a subclass of `base_class`.

        @Registry.register              key derived from the class name
        @Registry.register('some-key')  explicit key
    '''

    def __init__(self, base_class, on_register=None):
        self.base_class = base_class
        self.name = base_class.__name__
        self._classes = {}
        self._on_register = on_register

    def _check(self, cls, key):
        current = cls.__dict__.get('__clsid__')
        if current is not None and current != key:
            raise BadRequestError("H00.301", f"Class [{cls.__name__}] is already registered as [{current}]")

        if key in self._classes:
            raise BadRequestError("H00.302", f"Key [{key}] already registered in [{self.name}]")

        if not issubclass(cls, self.base_class):
            raise BadRequestError("H00.303", f"[{cls.__name__}] is not a subclass of [{self.name}]")

    def _add(self, cls, key):
        key = camel_to_lower(cls.__name__) if key is None else key
        self._check(cls, key)

        cls.__clsid__ = key
        if self._on_register is not None:
            cls = self._on_register(cls, key) or cls

        self._classes[key] = cls
        logger.debug('Registered %s [%s => %s]', self.name, key, cls.__name__)
        return cls

    def register(self, key=None):
        if isinstance(key, type):
            return self._add(key, None)

        return lambda cls: self._add(cls, key)

    def get(self, key_or_class):
        if isinstance(key_or_class, type):
            key_or_class = getattr(key_or_class, '__clsid__', None)

        try:
            return self._classes[key_or_class]
        except KeyError:
            raise NotFoundError("H00.401", f"[{key_or_class}] not found in registry [{self.name}]") from None

    def construct(self, key, *args, **kwargs):
        return self.get(key)(*args, **kwargs)

    def keys(self):
        return tuple(self._classes.keys())

    def items(self):
        return pmap(self._classes)


def ClassRegistry(base_class, on_register=None):
    return _ClassRegistry(base_class, on_register)
