from ._meta import config, logger  # noqa
from .store import (  # noqa
    NAMESPACES,
    NS_MOBILE,
    NS_PAN,
    NS_VEHICLE,
    NS_CATALOGUE,
    NS_APPLICATION,
    KeyValueStore,
    KeyValueStoreRegistry,
    MemoryStore,
    JsonFileStore,
    create_store,
)
