import pytest

from _lib.services import BASE_URL, POLICY_OK, FakeServices, html_page
from fidelis.cache import NS_CATALOGUE
from fidelis.connector import PolicyConnector
from fidelis.datadef import Tier
from fidelis.eligibility import EligibilityMatcher, config, max_loan_amount, to_product

QUERY = dict(
    credit_score=782, employment_type="S", income=85000.0, fuel_type="Diesel",
    loan_amount=650000, vehicle_value=950000)


def matcher(services, store):
    return EligibilityMatcher(PolicyConnector(client=services.client(), base_url=BASE_URL), store=store)


def test_max_loan_amount():
    assert max_loan_amount(950000, 80) == 760000
    assert max_loan_amount(999999, 85) == 849999
    assert max_loan_amount(800000, 0) == 0
    assert max_loan_amount(None, 80) == 0


def test_to_product():
    product = to_product({"lender_name": "HDFC Bank", "product_name": "Car Refinance",
                          "roi_min": "9.5", "max_ltv": 85}, 800000)
    assert product.max_ltv == 85
    assert product.roi_min == 9.5
    assert product.roi_max is None
    assert product.max_loan_amount == 680000
    assert product.status == "active"

    assert to_product({"lender_name": "HDFC Bank", "product_name": "Car Refinance"}, 800000) is None
    assert to_product({"product_name": "Car Refinance", "max_ltv": 80}, 800000) is None


@pytest.mark.asyncio
async def test_live_policy(store):
    result = await matcher(FakeServices(policy_engine=POLICY_OK), store).match(**QUERY)

    assert result.tier == Tier.LIVE
    assert not result.empty
    assert [(p.lender_name, p.max_loan_amount) for p in result.products] == [
        ("HDFC Bank", 760000),
        ("Tata Capital", 665000),
    ]

    catalogue = store.get(NS_CATALOGUE, config.CATALOGUE_KEY)
    assert {"Tata Capital|Auto Top-up", "HDFC Bank|Car Refinance"} <= {
        f"{p['lender_name']}|{p['product_name']}" for p in catalogue}


@pytest.mark.asyncio
async def test_live_policy_is_idempotent(store):
    services = FakeServices(policy_engine=POLICY_OK)
    first = await matcher(services, store).match(**QUERY)
    second = await matcher(services, store).match(**QUERY)

    assert first == second
    assert len(store.get(NS_CATALOGUE, config.CATALOGUE_KEY)) == len(config.DEFAULT_CATALOGUE) + 1


@pytest.mark.asyncio
async def test_live_policy_without_products(store):
    result = await matcher(FakeServices(policy_engine={"success": True, "eligible_products": []}), store).match(**QUERY)

    assert result.empty
    assert result.tier == Tier.LIVE


@pytest.mark.asyncio
async def test_fallback_to_active_catalogue(store):
    result = await matcher(FakeServices(policy_engine=html_page(503)), store).match(**QUERY)

    assert result.tier == Tier.CACHED
    assert result.notes == ("Fallback: Policy engine unavailable, showing active catalogue products",)
    assert [p.lender_name for p in result.products] == ["HDFC Bank", "ICICI Bank", "Bajaj Finance"]
    assert all(p.status == "active" for p in result.products)
    assert [p.max_loan_amount for p in result.products] == [807500, 760000, 855000]


@pytest.mark.asyncio
async def test_fallback_uses_remembered_catalogue(store):
    store.put(NS_CATALOGUE, config.CATALOGUE_KEY, [
        {"lender_name": "Tata Capital", "product_name": "Auto Top-up", "max_ltv": 70, "status": "active"},
        {"lender_name": "Axis Bank", "product_name": "Car Balance Transfer", "max_ltv": 75, "status": "inactive"},
    ])
    result = await matcher(FakeServices(), store).match(**QUERY)

    assert [(p.lender_name, p.max_loan_amount) for p in result.products] == [("Tata Capital", 665000)]
