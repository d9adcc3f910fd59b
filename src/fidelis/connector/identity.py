import random

from fidelis.bureau import parse_report, parse_score
from fidelis.cache import NS_PAN
from fidelis.datadef import ConnectorResult, Tier
from fidelis.error import InputValidationError, NotFoundError, UpstreamError
from fidelis.helper import parse_date, select_value

from . import config, logger
from .base import ServiceConnector
from .schema import IdentityData
from .simulate import simulated_identity, simulated_score

IDENTITY_FIELDS = ('legal_name', 'first_name', 'last_name', 'date_of_birth', 'gender_code')
CREDIT_FIELDS = ('credit_score', 'bureau_payload')


def normalize_gender(value):
    ''' Identity services send M/F/T (or the full word); the bureau uses 1/2/3. '''
    if value is None:
        return None

    text = str(value).strip().upper()
    if text in config.GENDER_WORDS:
        return text

    return config.GENDER_CODES.get(text[:1])


def _tiers(fields, tier):
    return {name: tier for name in fields}


class IdentityConnector(ServiceConnector):
    ''' PAN identity verification followed by the credit report.

        Tiers, first success wins: live, partial-live (identity live, score
        cached or simulated), cached snapshot, simulated. An explicit "not
        found" from the identity service is an input error on `pan`.
    '''

    def __init__(self, *args, rng: random.Random = None, **kwargs):
        super().__init__(*args, **kwargs)
        self._rng = rng or random.Random()

    async def verify_pan(self, pan) -> dict:
        body = await self.post_json(config.IDENTITY_ENDPOINT, {"pan": pan})
        self.require_success(body, "PAN not found")
        data = IdentityData.parse(self.require_data(body, config.IDENTITY_ENDPOINT), config.IDENTITY_ENDPOINT)

        if data.status != config.IDENTITY_MATCH_STATUS:
            raise NotFoundError("C02.404", "PAN not found", data.status)

        full_name = select_value(data.full_name, " ".join(filter(None, (data.first_name, data.last_name))))

        return {
            "legal_name": full_name,
            "first_name": data.first_name,
            "last_name": data.last_name,
            "date_of_birth": parse_date(data.dob, *config.INPUT_DATE_FORMATS),
            "gender_code": normalize_gender(data.gender),
            "_dob": data.dob,
        }

    def credit_request(self, pan, identity, mobile=None, email=None):
        name = identity.get('legal_name') or ''
        return {
            "phone": mobile,
            "email": email or f"{''.join(name.lower().split())}@{config.EMAIL_DOMAIN}",
            "pan": pan,
            "firstName": identity.get('first_name'),
            "lastName": identity.get('last_name'),
            "gender": config.GENDER_WORDS.get(identity.get('gender_code'), 'male'),
            "dateOfBirth": identity.get('_dob'),
            "pincode": config.DEFAULT_PINCODE,
        }

    async def fetch_credit_report(self, pan, identity, mobile=None, email=None) -> dict:
        body = await self.post_json(
            config.CREDIT_REPORT_ENDPOINT, self.credit_request(pan, identity, mobile, email))
        self.require_success(body, "Credit report not available")
        return self.require_data(body, config.CREDIT_REPORT_ENDPOINT)

    async def lookup(self, pan, mobile=None, email=None) -> ConnectorResult:
        try:
            identity = await self.verify_pan(pan)
        except NotFoundError as e:
            raise InputValidationError("C02.400", str(e.message), {
                "pan": "Invalid PAN number or PAN not found"
            }) from e
        except UpstreamError as e:
            logger.warning('Identity service failed for PAN [%s]: %s', pan, e)
            return self.fallback(pan)

        try:
            payload = await self.fetch_credit_report(pan, identity, mobile, email)
        except (UpstreamError, NotFoundError) as e:
            logger.warning('Credit report failed for PAN [%s]: %s', pan, e)
            return self.partial(pan, identity)

        return self.live(pan, identity, payload)

    def _identity_values(self, identity):
        return {k: identity.get(k) for k in IDENTITY_FIELDS}

    def live(self, pan, identity, payload) -> ConnectorResult:
        data = self._identity_values(identity)
        tiers = _tiers(IDENTITY_FIELDS, Tier.LIVE)
        notes = ()

        score = parse_report(payload).score
        data['bureau_payload'] = payload
        tiers['bureau_payload'] = Tier.LIVE

        if score is None:
            score = simulated_score(self._rng)
            tiers['credit_score'] = Tier.SIMULATED
            notes = ("API: PAN verified, credit score simulated (no usable bureau score)",)
            logger.warning('Bureau report for PAN [%s] has no usable score', pan)
        else:
            tiers['credit_score'] = Tier.LIVE

        data['credit_score'] = score
        self.cache_put(NS_PAN, pan, {
            "identity": data_for_cache(data, IDENTITY_FIELDS),
            "credit_score": score if tiers['credit_score'] == Tier.LIVE else None,
            "bureau_payload": payload,
        })

        return ConnectorResult(data=data, tiers=tiers, notes=notes)

    def partial(self, pan, identity) -> ConnectorResult:
        data = self._identity_values(identity)
        tiers = _tiers(IDENTITY_FIELDS, Tier.LIVE)
        snapshot = self.cache_get(NS_PAN, pan) or {}

        cached_score = parse_score(snapshot.get('credit_score'))
        if cached_score is not None:
            data['credit_score'] = cached_score
            tiers['credit_score'] = Tier.CACHED
            if snapshot.get('bureau_payload'):
                data['bureau_payload'] = snapshot['bureau_payload']
                tiers['bureau_payload'] = Tier.CACHED
            note = "API: PAN verified, credit score from cache (credit API unavailable)"
        else:
            data['credit_score'] = simulated_score(self._rng)
            tiers['credit_score'] = Tier.SIMULATED
            note = "API: PAN verified, credit score simulated (credit API unavailable)"

        self.cache_put(NS_PAN, pan, {**snapshot, "identity": data_for_cache(data, IDENTITY_FIELDS)})
        return ConnectorResult(data=data, tiers=tiers, notes=(note,))

    def fallback(self, pan) -> ConnectorResult:
        snapshot = self.cache_get(NS_PAN, pan) or {}
        identity = snapshot.get('identity')

        if isinstance(identity, dict) and identity.get('legal_name'):
            data = {k: identity.get(k) for k in IDENTITY_FIELDS}
            tiers = _tiers(IDENTITY_FIELDS, Tier.CACHED)
            score = parse_score(snapshot.get('credit_score'))
            if score is None:
                data['credit_score'] = simulated_score(self._rng)
                tiers['credit_score'] = Tier.SIMULATED
            else:
                data['credit_score'] = score
                tiers['credit_score'] = Tier.CACHED

            if snapshot.get('bureau_payload'):
                data['bureau_payload'] = snapshot['bureau_payload']
                tiers['bureau_payload'] = Tier.CACHED

            return ConnectorResult(data=data, tiers=tiers, notes=(
                "Fallback: API unavailable, using cached identity data",))

        data = simulated_identity(pan)
        return ConnectorResult(
            data=data,
            tiers=_tiers(data.keys(), Tier.SIMULATED),
            notes=("Fallback: API unavailable, using simulated data",))


def data_for_cache(data, fields):
    return {k: data.get(k) for k in fields}
