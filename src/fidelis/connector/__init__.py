from ._meta import config, logger  # noqa
from .base import ServiceConnector  # noqa
from .identity import IdentityConnector, normalize_gender  # noqa
from .vehicle import VehicleConnector, extract_city  # noqa
from .policy import PolicyConnector  # noqa
from .persistence import PersistenceConnector  # noqa
from . import simulate  # noqa
