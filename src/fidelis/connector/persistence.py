from fidelis.cache import NS_APPLICATION
from fidelis.data import serialize_mapping
from fidelis.datadef import ConnectorResult, Tier
from fidelis.error import NotFoundError, UpstreamError
from fidelis.helper import epoch_ms, timestamp

from . import config, logger
from .base import ServiceConnector


def local_application_id():
    return str(epoch_ms(timestamp()))


class PersistenceConnector(ServiceConnector):
    ''' Best effort application persistence. Never raises for upstream
        failures: a local id is generated and the application kept in the
        local store instead. '''

    async def save(self, application) -> ConnectorResult:
        record = serialize_mapping(application)

        try:
            body = await self.post_json(config.PERSISTENCE_ENDPOINT, record)
            self.require_success(body, "Application was not accepted")
        except (UpstreamError, NotFoundError) as e:
            logger.warning('Application persistence failed: %s', e)
            application_id = local_application_id()
            self.cache_put(NS_APPLICATION, application_id, {**record, "application_id": application_id})
            return ConnectorResult(
                data={"application_id": application_id},
                tiers={"application_id": Tier.SIMULATED},
                notes=("Fallback: Application saved locally (API unavailable)",))

        application_id = body.get('application_id')
        if application_id in (None, ''):
            application_id = local_application_id()

        return ConnectorResult(
            data={"application_id": str(application_id)},
            tiers={"application_id": Tier.LIVE})
