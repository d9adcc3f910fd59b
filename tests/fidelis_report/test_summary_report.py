from datetime import date

import pytest

from fidelis.datadef import ApplicantProfile, Tier, VehicleRecord
from fidelis.pipeline import PipelineState
from fidelis.report import SummaryRendererRegistry, compile_summary, format_amount, render_summary


def test_format_amount():
    assert format_amount(0) == "₹0"
    assert format_amount(999) == "₹999"
    assert format_amount(1000) == "₹1,000"
    assert format_amount(123456) == "₹1,23,456"
    assert format_amount(12345678) == "₹1,23,45,678"
    assert format_amount(85000.0) == "₹85,000"
    assert format_amount(None) == "N/A"


def test_renderer_registry():
    assert set(SummaryRendererRegistry.keys()) == {'full', 'compact'}


def test_compile_empty_state():
    doc = compile_summary(PipelineState(
        profile=ApplicantProfile(mobile="9876543210"),
        vehicle=VehicleRecord(),
    ), today=date(2024, 2, 1))

    assert doc.credit_score is None
    assert doc.score_category == "N/A"
    assert doc.eligible_products == ()
    assert not doc.verification.pan_verified

    text = render_summary(doc, 'full')
    assert "No eligible products found based on your profile." in text
    assert "No financer information" in text


async def completed(make_pipeline, services):
    pipeline = make_pipeline(services)
    await pipeline.submit_mobile("9876543210")
    await pipeline.submit_identity("ABCDE1234F", email="ravi@example.com")
    await pipeline.confirm_score()
    await pipeline.submit_vehicle("MH12AB1234")
    await pipeline.submit_selection(None, 85000, "S")
    return pipeline


@pytest.mark.asyncio
async def test_live_summary(make_pipeline, live_services):
    pipeline = await completed(make_pipeline, live_services)
    doc = compile_summary(pipeline.state, today=date(2024, 2, 1))

    assert doc.application_id == "APP-1001"
    assert doc.credit_score == 782
    assert doc.score_category == "Excellent"
    assert doc.applicant.bureau_payload is None
    assert doc.account_summary.auto_count == 1
    assert doc.enquiry_summary.window(90).total == 3
    assert doc.verification.pan_verified
    assert doc.verification.credit_verified
    assert doc.verification.vehicle_verified
    assert doc.eligibility_tier == Tier.LIVE

    text = render_summary(doc, 'full')
    assert "Application ID: APP-1001" in text
    assert "Name: Ravi Kumar" in text
    assert "Credit Score: 782/900" in text
    assert "Market Value: ₹9,50,000" in text
    assert "RC Document Financer: Canara Bank" in text
    assert "Credit Bureau Match: Yes" in text
    assert "Lender: Canara Auto Finance" in text
    assert "Last 30 Days: Total 1 (Auto Loans: 1, Others: 0)" in text
    assert "=== ELIGIBLE PRODUCTS (2) ===" in text
    assert "  Max Loan Amount: ₹7,60,000" in text
    assert "PAN Verified: Yes" in text


@pytest.mark.asyncio
async def test_degraded_summary(make_pipeline, dead_services):
    pipeline = make_pipeline(dead_services)
    await pipeline.submit_mobile("9876543210")
    await pipeline.submit_identity("ABCDE1234F")
    await pipeline.confirm_score()
    await pipeline.submit_vehicle("RJ14AB1234")
    await pipeline.submit_selection("EST-01", 50000, "E")

    doc = pipeline.summary()
    assert not doc.verification.pan_verified
    assert not doc.verification.vehicle_verified
    assert doc.eligibility_tier == Tier.CACHED

    text = pipeline.render()
    assert "Name: User 1234 (simulated)" in text
    assert f"Credit Score: {doc.credit_score}/900 (simulated)" in text
    assert "Market Value: ₹8,00,000 (simulated)" in text
    assert "Lender: Unknown Financer (estimated)" in text
    assert "Employment: Self-employed" in text
    assert "=== DATA SOURCE ===" in text
    assert "- Fallback: API unavailable, using simulated data" in text


@pytest.mark.asyncio
async def test_compact_summary(make_pipeline, live_services):
    pipeline = await completed(make_pipeline, live_services)
    text = pipeline.render('compact')

    lines = text.splitlines()
    assert lines[0] == "Loan Onboarding Report #APP-1001"
    assert "Score: 782 (Excellent)" in lines
    assert "Financer: Canara Bank | Bureau match: Canara Auto Finance" in lines
    assert "Products: 2 eligible" in lines
