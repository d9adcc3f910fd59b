import math
from typing import Optional, Tuple

from fidelis.cache import NS_CATALOGUE
from fidelis.data import DataModel
from fidelis.datadef import EligibleProduct, Tier
from fidelis.error import NotFoundError, UpstreamError

from . import config, logger


class EligibilityResult(DataModel):
    products: Tuple[EligibleProduct, ...] = ()
    tier: Tier = Tier.LIVE
    notes: Tuple[str, ...] = ()

    @property
    def empty(self):
        return not self.products


def _number(value) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def max_loan_amount(vehicle_value, max_ltv) -> int:
    if not vehicle_value or not max_ltv:
        return 0

    return math.floor(vehicle_value * max_ltv / 100)


def to_product(raw, vehicle_value) -> Optional[EligibleProduct]:
    ''' Decode one product entry, or None when it lacks a name or an LTV. '''
    max_ltv = _number(raw.get('max_ltv_purchase', raw.get('max_ltv')))
    if not raw.get('lender_name') or not raw.get('product_name') or max_ltv is None:
        logger.warning('Skipped an incomplete product entry: %s', raw)
        return None

    return EligibleProduct(
        lender_name=str(raw['lender_name']),
        product_name=str(raw['product_name']),
        roi_min=_number(raw.get('roi_min')),
        roi_max=_number(raw.get('roi_max')),
        max_ltv=max_ltv,
        max_loan_amount=max_loan_amount(vehicle_value, max_ltv),
        status=str(raw.get('status') or config.ACTIVE_STATUS),
    )


def _product_key(raw):
    return f"{raw.get('lender_name')}|{raw.get('product_name')}"


class EligibilityMatcher(object):
    ''' Applicant and vehicle attributes against lender policy.

        The live policy service filters server side and its list is used
        as-is. Without it the local catalogue is used, filtered only to
        active products.
    '''

    def __init__(self, policy, store=None):
        self._policy = policy
        self._store = store

    def catalogue(self):
        if self._store is not None:
            products = self._store.get(NS_CATALOGUE, config.CATALOGUE_KEY)
            if isinstance(products, list) and products:
                return products

        return list(config.DEFAULT_CATALOGUE)

    def remember(self, products):
        if self._store is None:
            return

        merged = {_product_key(p): p for p in self.catalogue()}
        for p in products:
            merged[_product_key(p)] = {**p, "status": p.get('status') or config.ACTIVE_STATUS}

        self._store.put(NS_CATALOGUE, config.CATALOGUE_KEY, list(merged.values()))

    def _build(self, raw_products, vehicle_value):
        products = (to_product(p, vehicle_value) for p in raw_products)
        return tuple(p for p in products if p is not None)

    async def match(self, credit_score, employment_type, income, fuel_type,
                    loan_amount=None, vehicle_value=None) -> EligibilityResult:
        try:
            raw_products = await self._policy.evaluate(
                credit_score=credit_score,
                fuel_type=fuel_type,
                employment_type=employment_type,
                income=income,
                loan_amount=loan_amount,
                vehicle_value=vehicle_value,
            )
        except (UpstreamError, NotFoundError) as e:
            logger.warning('Policy evaluation failed, using the local catalogue: %s', e)
            active = [p for p in self.catalogue()
                      if isinstance(p, dict) and p.get('status') == config.ACTIVE_STATUS]
            return EligibilityResult(
                products=self._build(active, vehicle_value),
                tier=Tier.CACHED,
                notes=("Fallback: Policy engine unavailable, showing active catalogue products",))

        self.remember(raw_products)
        return EligibilityResult(products=self._build(raw_products, vehicle_value), tier=Tier.LIVE)
