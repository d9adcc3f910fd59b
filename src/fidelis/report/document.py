from datetime import date, datetime
from typing import Optional, Tuple

from pydantic import Field

from fidelis.bureau import (
    AccountSummary,
    EnquirySummary,
    parse_report,
    score_category,
    summarize_accounts,
    summarize_enquiries,
)
from fidelis.data import DataModel
from fidelis.datadef import (
    ApplicantProfile,
    DecodedAccountRecord,
    EligibleProduct,
    FinancerMatch,
    Tier,
    VehicleRecord,
)
from fidelis.helper import timestamp


class VerificationStatus(DataModel):
    pan_verified: bool = False
    credit_verified: bool = False
    vehicle_verified: bool = False


class SummaryDocument(DataModel):
    application_id: Optional[str] = None
    generated_at: datetime = Field(default_factory=timestamp)
    applicant: ApplicantProfile
    vehicle: VehicleRecord
    credit_score: Optional[int] = None
    score_category: str = "N/A"
    financer_match: Optional[FinancerMatch] = None
    selected_account: Optional[DecodedAccountRecord] = None
    account_summary: AccountSummary = Field(default_factory=AccountSummary)
    enquiry_summary: EnquirySummary = Field(default_factory=EnquirySummary)
    eligible_products: Tuple[EligibleProduct, ...] = ()
    eligibility_tier: Optional[Tier] = None
    verification: VerificationStatus = Field(default_factory=VerificationStatus)
    data_source: Tuple[str, ...] = ()


def _is_live(record, name):
    return record.tier_of(name) == Tier.LIVE


def compile_summary(state, today: date = None) -> SummaryDocument:
    ''' Assemble the summary of a completed session. No decisions are made
        here; every value comes from the state. '''
    profile, vehicle = state.profile, state.vehicle
    report = parse_report(profile.bureau_payload)
    eligibility = state.eligibility

    return SummaryDocument(
        application_id=state.application_id,
        applicant=profile.set(bureau_payload=None),
        vehicle=vehicle,
        credit_score=profile.credit_score,
        score_category=score_category(profile.credit_score),
        financer_match=state.financer_match,
        selected_account=state.selected_account,
        account_summary=summarize_accounts(report.accounts),
        enquiry_summary=summarize_enquiries(report.enquiries, today),
        eligible_products=eligibility.products if eligibility else (),
        eligibility_tier=eligibility.tier if eligibility else None,
        verification=VerificationStatus(
            pan_verified=_is_live(profile, 'legal_name'),
            credit_verified=_is_live(profile, 'credit_score'),
            vehicle_verified=_is_live(vehicle, 'make'),
        ),
        data_source=state.data_source,
    )
