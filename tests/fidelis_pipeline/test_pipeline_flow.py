import pytest

from _lib.services import FakeServices, LIVE_ROUTES, html_page
from fidelis.cache import NS_APPLICATION, NS_MOBILE
from fidelis.datadef import Tier
from fidelis.pipeline import Stage

MOBILE = "9876543210"
PAN = "ABCDE1234F"


async def run_until_selection(pipeline, rc="RJ14AB1234"):
    await pipeline.submit_mobile(MOBILE)
    await pipeline.submit_identity(PAN)
    await pipeline.confirm_score()
    await pipeline.submit_vehicle(rc)


@pytest.mark.asyncio
async def test_live_onboarding(make_pipeline, live_services, store):
    pipeline = make_pipeline(live_services)
    assert pipeline.stage == Stage.MOBILE

    outcome = await pipeline.submit_mobile(MOBILE)
    assert outcome.advanced
    assert outcome.current == Stage.IDENTITY

    await pipeline.submit_identity("abcde1234f", email="ravi@example.com")
    profile = pipeline.profile
    assert profile.pan == PAN
    assert profile.legal_name == "Ravi Kumar"
    assert profile.credit_score == 782
    assert profile.tier_of('legal_name') == Tier.LIVE
    assert profile.tier_of('pan') is None
    assert pipeline.stage == Stage.SCORE_REVIEW

    await pipeline.confirm_score()
    await pipeline.submit_vehicle("mh12ab1234")

    assert pipeline.vehicle_record.registration_number == "MH12AB1234"
    assert pipeline.vehicle_record.market_value == 950000
    match = pipeline.financer_match
    assert match.has_match
    assert match.account.lender_name == "Canara Auto Finance"

    outcome = await pipeline.submit_selection(monthly_income="85,000", employment_type="s")
    assert outcome.current == Stage.SUMMARY
    assert pipeline.terminal

    state = pipeline.state
    assert state.selected_account.candidate_id == "T01"
    assert state.application_id == "APP-1001"
    assert state.eligibility.tier == Tier.LIVE
    assert len(state.eligibility.products) == 2
    assert state.profile.monthly_income == 85000.0
    assert state.profile.employment_type == "S"
    assert not state.degraded
    assert all(not note.startswith("Fallback") for note in pipeline.data_source)
    assert [stage for stage, _ in pipeline.history] == [
        Stage.MOBILE, Stage.IDENTITY, Stage.SCORE_REVIEW, Stage.VEHICLE_REGISTRY, Stage.ACCOUNT_SELECTION]

    policy_request = live_services.called('policy-engine')[0]
    assert policy_request["creditScore"] == 782
    assert policy_request["loanAmount"] == 650000
    assert policy_request["vehicleValue"] == 950000

    application = live_services.called('loan-application')[0]
    assert application["applicant"]["pan"] == PAN
    assert "bureau_payload" not in application["applicant"]
    assert application["selected_account"]["lender_name"] == "Canara Auto Finance"

    assert store.get(NS_MOBILE, MOBILE) == {
        "legal_name": "Ravi Kumar", "pan": PAN, "application_id": "APP-1001"}


@pytest.mark.asyncio
async def test_unreachable_services(make_pipeline, dead_services, store):
    ''' Every upstream service down: the session still completes on
        simulated and catalogue data. '''
    pipeline = make_pipeline(dead_services)
    await run_until_selection(pipeline)

    profile = pipeline.profile
    assert profile.legal_name == "User 1234"
    assert 650 <= profile.credit_score <= 849
    assert profile.tier_of('credit_score') == Tier.SIMULATED

    vehicle = pipeline.vehicle_record
    assert vehicle.registration_number == "RJ14AB1234"
    assert vehicle.owner_name == "User 1234"
    assert vehicle.market_value == 800000
    assert vehicle.tier_of('market_value') == Tier.SIMULATED

    match = pipeline.financer_match
    assert not match.has_match
    assert [c.candidate_id for c in match.candidates] == ["EST-01"]
    assert match.candidates[0].sanctioned_amount == 640000

    await pipeline.submit_selection("EST-01", 50000, "S")

    state = pipeline.state
    assert pipeline.terminal
    assert state.degraded
    assert state.selected_account.is_estimated
    assert state.eligibility.tier == Tier.CACHED
    assert [p.max_loan_amount for p in state.eligibility.products] == [680000, 640000, 720000]
    assert state.application_id.isdigit()
    assert store.get(NS_APPLICATION, state.application_id)["status"] == "submitted"

    notes = pipeline.data_source
    assert "Fallback: API unavailable, using simulated data" in notes
    assert "Fallback: API unavailable, using simulated vehicle data" in notes
    assert "Fallback: Application saved locally (API unavailable)" in notes


@pytest.mark.asyncio
async def test_simulated_score_is_stable_per_pan(make_pipeline, dead_services):
    scores = set()
    for _ in range(3):
        pipeline = make_pipeline(dead_services)
        await pipeline.submit_mobile(MOBILE)
        await pipeline.submit_identity(PAN)
        scores.add(pipeline.profile.credit_score)

    assert len(scores) == 1


@pytest.mark.asyncio
async def test_partial_identity(make_pipeline):
    services = FakeServices(**{**LIVE_ROUTES, "credit-report": html_page()})
    pipeline = make_pipeline(services)
    await run_until_selection(pipeline)

    profile = pipeline.profile
    assert profile.legal_name == "Ravi Kumar"
    assert profile.tier_of('legal_name') == Tier.LIVE
    assert profile.tier_of('credit_score') == Tier.SIMULATED
    assert 300 <= profile.credit_score <= 900
    assert "API: PAN verified, credit score simulated (credit API unavailable)" in pipeline.data_source

    # Without a bureau report the registry financer yields an estimated candidate
    match = pipeline.financer_match
    assert not match.has_match
    assert match.candidates[0].lender_name == "Canara Bank"
    assert match.candidates[0].sanctioned_amount == 760000


@pytest.mark.asyncio
async def test_returning_applicant(make_pipeline, live_services, store):
    store.put(NS_MOBILE, MOBILE, {"legal_name": "Ravi Kumar", "pan": PAN, "application_id": "APP-0999"})
    pipeline = make_pipeline(live_services)

    await pipeline.submit_mobile(MOBILE)

    assert pipeline.state.known_applicant["application_id"] == "APP-0999"
    assert pipeline.profile.legal_name is None
    assert pipeline.profile.mobile == MOBILE
    assert pipeline.data_source == ("Cache: returning applicant found for this mobile number",)


@pytest.mark.asyncio
async def test_malformed_fields_degrade_instead_of_failing(make_pipeline):
    routes = dict(LIVE_ROUTES)
    routes["pan-verify"] = {"success": True, "data": {**LIVE_ROUTES["pan-verify"]["data"], "first_name": 7}}
    routes["rc-verify"] = {"success": True, "data": {**LIVE_ROUTES["rc-verify"]["data"], "maker_model": 3}}
    pipeline = make_pipeline(FakeServices(**routes))

    await run_until_selection(pipeline)

    assert pipeline.stage == Stage.ACCOUNT_SELECTION
    assert pipeline.profile.legal_name == "User 1234"
    assert pipeline.profile.tier_of('legal_name') == Tier.SIMULATED
    assert 300 <= pipeline.profile.credit_score <= 900
    assert pipeline.vehicle_record.model == "Swift VDI"
    assert pipeline.vehicle_record.tier_of('model') == Tier.SIMULATED
    assert "Fallback: API unavailable, using simulated data" in pipeline.data_source
