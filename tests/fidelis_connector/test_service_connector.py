import httpx
import pytest

from _lib.services import BASE_URL, FakeServices, html_page
from fidelis.connector import PersistenceConnector, PolicyConnector, ServiceConnector
from fidelis.cache import NS_APPLICATION
from fidelis.datadef import Tier
from fidelis.error import MalformedResponseError, NotFoundError, TransportError


async def post(route):
    services = FakeServices(ping=route)
    connector = ServiceConnector(client=services.client(), base_url=BASE_URL)
    return await connector.post_json('ping', {"value": 1})


def test_endpoint_url():
    connector = ServiceConnector(base_url="http://services.test/api/")
    assert connector.endpoint_url('/pan-verify') == "http://services.test/api/pan-verify"


@pytest.mark.asyncio
async def test_post_json():
    body = await post({"success": True, "data": {"x": 1}})
    assert body == {"success": True, "data": {"x": 1}}


@pytest.mark.asyncio
async def test_transport_failures():
    with pytest.raises(TransportError):
        await post(None)

    with pytest.raises(TransportError):
        await post(lambda request: httpx.ReadTimeout("timed out", request=request))

    with pytest.raises(TransportError):
        await post(httpx.Response(500, json={"success": False}))


@pytest.mark.asyncio
async def test_malformed_responses():
    for route in (
        html_page(),
        httpx.Response(200, text="<!DOCTYPE html><p>proxy error</p>"),
        httpx.Response(200, text="OK"),
        [1, 2, 3],
        {"data": {"x": 1}},
    ):
        with pytest.raises(MalformedResponseError):
            await post(route)


def test_require_success_and_data():
    connector = ServiceConnector()

    with pytest.raises(NotFoundError):
        connector.require_success({"success": False, "message": "No record"})

    with pytest.raises(MalformedResponseError):
        connector.require_data({"success": True, "data": "n/a"}, "ping")

    assert connector.require_data({"success": True, "data": {"x": 1}}, "ping") == {"x": 1}


@pytest.mark.asyncio
async def test_policy_connector():
    services = FakeServices(policy_engine={"success": True, "eligible_products": [{"lender_name": "A"}, "junk"]})
    connector = PolicyConnector(client=services.client(), base_url=BASE_URL)

    products = await connector.evaluate(
        credit_score=782, fuel_type="Diesel", employment_type="S", income=85000.0,
        loan_amount=650000, vehicle_value=950000)
    assert products == [{"lender_name": "A"}]

    request = services.called('policy-engine')[0]
    assert request["creditScore"] == 782
    assert request["employment"] == "S"
    assert request["loanType"] == "purchase"

    services.routes['policy-engine'] = {"success": True}
    with pytest.raises(MalformedResponseError):
        await connector.evaluate(credit_score=782, fuel_type="Diesel", employment_type="S", income=1.0)


@pytest.mark.asyncio
async def test_persistence_live(store):
    services = FakeServices(loan_application={"success": True, "application_id": 1001})
    connector = PersistenceConnector(client=services.client(), store=store, base_url=BASE_URL)

    result = await connector.save({"applicant": {"pan": "ABCDE1234F"}})
    assert result.data == {"application_id": "1001"}
    assert result.tier == Tier.LIVE
    assert services.called('loan-application') == [{"applicant": {"pan": "ABCDE1234F"}}]
    assert store.keys(NS_APPLICATION) == ()


@pytest.mark.asyncio
async def test_persistence_fallback(store):
    services = FakeServices(loan_application=html_page(502))
    connector = PersistenceConnector(client=services.client(), store=store, base_url=BASE_URL)

    result = await connector.save({"applicant": {"pan": "ABCDE1234F"}})
    application_id = result.data['application_id']

    assert application_id.isdigit()
    assert result.tier == Tier.SIMULATED
    assert result.notes == ("Fallback: Application saved locally (API unavailable)",)
    assert store.get(NS_APPLICATION, application_id) == {
        "applicant": {"pan": "ABCDE1234F"},
        "application_id": application_id,
    }
