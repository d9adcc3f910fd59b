from datetime import date
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import Field, model_validator

from fidelis.data import DataModel


class Tier(Enum):
    LIVE = "live"
    CACHED = "cached"
    SIMULATED = "simulated"


class Classification(Enum):
    CONFIRMED_AUTO_LOAN = "confirmed-auto-loan"
    LENDER_NAME_MATCH = "lender-name-match"
    AMOUNT_RANGE_HEURISTIC = "amount-range-heuristic"
    UNCLASSIFIED = "unclassified"

    @property
    def rank(self):
        ''' Lower is more specific. '''
        return CLASSIFICATION_RANK[self]


CLASSIFICATION_RANK = {
    Classification.CONFIRMED_AUTO_LOAN: 0,
    Classification.LENDER_NAME_MATCH: 1,
    Classification.AMOUNT_RANGE_HEURISTIC: 2,
    Classification.UNCLASSIFIED: 3,
}


class TieredRecord(DataModel):
    ''' A record whose connector-sourced fields carry a provenance tier.

        Records are folded, never mutated: `fold` fills the fields that
        are still empty and tags each of them once. Populated fields and
        their tiers are left untouched.
    '''
    tiers: Dict[str, Tier] = Field(default_factory=dict)

    def fold(self, values: Mapping[str, Any], tiers=None):
        fields = type(self).model_fields
        updates = {}
        new_tiers = dict(self.tiers)

        for name, value in values.items():
            if name == 'tiers' or name not in fields:
                continue

            if value is None or getattr(self, name) is not None:
                continue

            updates[name] = value
            tier = tiers.get(name) if isinstance(tiers, Mapping) else tiers
            if tier is not None and name not in new_tiers:
                new_tiers[name] = Tier(tier)

        if not updates:
            return self

        return self.__class__(**{**dict(self), **updates, 'tiers': new_tiers})

    def tier_of(self, name) -> Optional[Tier]:
        return self.tiers.get(name)

    @property
    def degraded(self) -> bool:
        return any(tier != Tier.LIVE for tier in self.tiers.values())


class ApplicantProfile(TieredRecord):
    mobile: Optional[str] = None
    pan: Optional[str] = None
    email: Optional[str] = None
    legal_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender_code: Optional[str] = None
    monthly_income: Optional[float] = None
    employment_type: Optional[str] = None
    credit_score: Optional[int] = Field(default=None, ge=300, le=900)
    bureau_payload: Optional[Dict[str, Any]] = None


class VehicleRecord(TieredRecord):
    registration_number: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    fuel_type: Optional[str] = None
    color: Optional[str] = None
    owner_name: Optional[str] = None
    financer: Optional[str] = None
    registration_date: Optional[date] = None
    city: Optional[str] = None
    market_value: Optional[int] = None


class CreditAccountRecord(DataModel):
    account_type: Optional[str] = None
    account_status: Optional[str] = None
    lender_name: Optional[str] = None
    institution_code: Optional[str] = None
    holder_type: Optional[str] = None
    sanctioned_amount: int = 0
    current_balance: int = 0
    emi_amount: int = 0
    amount_past_due: int = 0
    open_date: Optional[date] = None
    payment_history: Tuple[str, ...] = ()

    @property
    def effective_amount(self) -> int:
        return self.sanctioned_amount or self.current_balance


class EnquiryRecord(DataModel):
    enquiry_date: Optional[date] = None
    enquiry_reason: Optional[str] = None
    finance_purpose: Optional[str] = None
    subscriber_name: Optional[str] = None
    amount: int = 0


class DecodedAccountRecord(CreditAccountRecord):
    candidate_id: Optional[str] = None
    account_type_desc: str = "N/A"
    account_status_desc: str = "N/A"
    institution_type_desc: str = "N/A"
    payment_history_desc: Tuple[str, ...] = ()
    classification: Classification = Classification.UNCLASSIFIED
    match_reason: Optional[str] = None
    matched_rules: Tuple[str, ...] = ()
    is_estimated: bool = False

    @model_validator(mode='after')
    def _check_reason(self):
        if self.classification == Classification.UNCLASSIFIED and self.match_reason is not None:
            raise ValueError('An unclassified account cannot carry a match reason.')

        return self


class FinancerMatch(DataModel):
    financer_name: Optional[str] = None
    account: Optional[DecodedAccountRecord] = None
    has_match: bool = False
    rule: Optional[str] = None
    candidates: Tuple[DecodedAccountRecord, ...] = ()

    @model_validator(mode='after')
    def _check_match(self):
        if self.has_match != (self.account is not None):
            raise ValueError('has_match must be set iff an account was selected.')

        return self


class EligibleProduct(DataModel):
    lender_name: str
    product_name: str
    roi_min: Optional[float] = None
    roi_max: Optional[float] = None
    max_ltv: float
    max_loan_amount: int = 0
    status: str = "active"


class ConnectorResult(DataModel):
    ''' Field values gathered by a connector, each with its tier. '''
    data: Dict[str, Any] = Field(default_factory=dict)
    tiers: Dict[str, Tier] = Field(default_factory=dict)
    notes: Tuple[str, ...] = ()

    @property
    def degraded(self) -> bool:
        return any(tier != Tier.LIVE for tier in self.tiers.values())

    @property
    def tier(self) -> Optional[Tier]:
        ''' The weakest tier among the returned fields. '''
        if not self.tiers:
            return None

        order = (Tier.SIMULATED, Tier.CACHED, Tier.LIVE)
        return next(t for t in order if t in self.tiers.values())
