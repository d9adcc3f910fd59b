import re

from fidelis.cache import NS_VEHICLE
from fidelis.datadef import ConnectorResult, Tier
from fidelis.error import InputValidationError, NotFoundError, UpstreamError
from fidelis.helper import parse_date, select_value

from . import config, logger
from .base import ServiceConnector
from .schema import RegistryData
from .simulate import simulated_vehicle

RX_CITY = re.compile(r"\b(%s)\b" % "|".join(map(re.escape, config.KNOWN_CITIES)), re.IGNORECASE)
RX_YEAR = re.compile(r"(\d{4})")

REGISTRY_FIELDS = (
    'registration_number', 'make', 'model', 'year', 'fuel_type',
    'color', 'owner_name', 'financer', 'registration_date', 'city',
)


def extract_city(address):
    match = RX_CITY.search(address or '')
    if match is None:
        return None

    return match.group(1).title()


def extract_year(value):
    match = RX_YEAR.search(str(value or ''))
    if match is None:
        return None

    return int(match.group(1))


def extract_financer(data):
    financer = select_value(data.get('financer'), data.get('hypothecation_details'))
    if isinstance(financer, dict):
        financer = select_value(financer.get('financer_name'), financer.get('name'))

    if not isinstance(financer, str):
        return None

    return " ".join(financer.split()) or None


class VehicleConnector(ServiceConnector):
    ''' Registry lookup followed by a valuation keyed by the decoded vehicle. '''

    async def fetch_registry(self, registration_number) -> dict:
        body = await self.post_json(config.REGISTRY_ENDPOINT, {"id_number": registration_number})
        self.require_success(body, "Registration not found")
        data = RegistryData.parse(self.require_data(body, config.REGISTRY_ENDPOINT), config.REGISTRY_ENDPOINT)

        return {
            "registration_number": registration_number,
            "make": data.maker_description,
            "model": data.maker_model,
            "year": extract_year(data.manufacturing_date_formatted),
            "fuel_type": data.fuel_type,
            "color": data.color,
            "owner_name": data.owner_name,
            "financer": extract_financer(dict(data)),
            "registration_date": parse_date(data.registration_date, *config.INPUT_DATE_FORMATS),
            "city": extract_city(data.present_address),
        }

    async def fetch_valuation(self, vehicle) -> int:
        body = await self.post_json(config.VALUATION_ENDPOINT, {
            "vehicleModel": vehicle['model'],
            "vehicleMake": vehicle['make'],
            "vehicleYear": vehicle['year'],
            "fuelType": vehicle['fuel_type'],
            "city": vehicle['city'],
            "condition": config.VEHICLE_CONDITION,
        })
        self.require_success(body, "Valuation not available")

        try:
            value = int(float(body.get('market_value')))
        except (TypeError, ValueError, OverflowError):
            value = 0

        if value <= 0:
            raise NotFoundError("C03.404", "Valuation returned no market value", body.get('market_value'))

        return value

    async def lookup(self, registration_number, owner_hint=None) -> ConnectorResult:
        try:
            vehicle = await self.fetch_registry(registration_number)
        except NotFoundError as e:
            raise InputValidationError("C03.400", str(e.message), {
                "registration_number": "Invalid RC number or vehicle not found"
            }) from e
        except UpstreamError as e:
            logger.warning('Registry service failed for RC [%s]: %s', registration_number, e)
            return self.fallback(registration_number, owner_hint)

        # Registry gaps stay empty; only the city is defaulted for the valuation.
        tiers = {k: Tier.LIVE for k in REGISTRY_FIELDS if vehicle.get(k) is not None}
        notes = ()
        if vehicle['city'] is None:
            vehicle['city'] = config.DEFAULT_CITY
            tiers['city'] = Tier.SIMULATED
            notes += (f"API: RC verified, city defaulted to {config.DEFAULT_CITY} (no address on record)",)

        try:
            vehicle['market_value'] = await self.fetch_valuation(vehicle)
            tiers['market_value'] = Tier.LIVE
        except (UpstreamError, NotFoundError) as e:
            logger.warning('Valuation failed for RC [%s]: %s', registration_number, e)
            vehicle['market_value'] = config.DEFAULT_MARKET_VALUE
            tiers['market_value'] = Tier.SIMULATED
            notes += ("API: RC verified, valuation simulated (valuation API unavailable)",)

        snapshot = dict(vehicle)
        if tiers['market_value'] != Tier.LIVE:
            snapshot.pop('market_value')

        self.cache_put(NS_VEHICLE, registration_number, snapshot)
        return ConnectorResult(data=vehicle, tiers=tiers, notes=notes)

    def fallback(self, registration_number, owner_hint=None) -> ConnectorResult:
        snapshot = self.cache_get(NS_VEHICLE, registration_number)
        if isinstance(snapshot, dict) and snapshot.get('make'):
            data = {k: snapshot.get(k) for k in REGISTRY_FIELDS}
            tiers = {k: Tier.CACHED for k in REGISTRY_FIELDS}

            if snapshot.get('market_value'):
                data['market_value'] = snapshot['market_value']
                tiers['market_value'] = Tier.CACHED
            else:
                data['market_value'] = config.DEFAULT_MARKET_VALUE
                tiers['market_value'] = Tier.SIMULATED

            return ConnectorResult(data=data, tiers=tiers, notes=(
                "Fallback: API unavailable, using cached vehicle data",))

        data = simulated_vehicle(registration_number, owner_hint)
        return ConnectorResult(
            data=data,
            tiers={k: Tier.SIMULATED for k in data},
            notes=("Fallback: API unavailable, using simulated vehicle data",))
