''' Partial schema of the credit bureau payload.

    Only the sections the pipeline reads are declared. Every field is
    optional and coerced leniently; a value that cannot be coerced is
    dropped (None / 0) instead of failing the whole report. A payload that
    is not a mapping at all yields an empty report.
'''
from typing import Annotated, Any, Optional, Tuple

from pydantic import BeforeValidator, ConfigDict, Field, ValidationError

from fidelis.data import DataModel
from fidelis.datadef import CreditAccountRecord, EnquiryRecord
from fidelis.helper import parse_bureau_date

from . import config, logger


def _as_code(value):
    if value is None:
        return None

    text = str(value).strip()
    return text or None


def _as_text(value):
    if value is None:
        return None

    text = " ".join(str(value).split())
    return text or None


def _as_amount(value):
    if value is None or isinstance(value, bool):
        return 0

    try:
        return max(int(round(float(str(value).replace(',', '').strip()))), 0)
    except (ValueError, OverflowError):
        return 0


def _as_history(value):
    if not value:
        return ()

    if isinstance(value, (list, tuple)):
        return tuple(str(v).strip() for v in value if str(v).strip())

    return tuple(c for c in str(value).strip() if not c.isspace())


Code = Annotated[Optional[str], BeforeValidator(_as_code)]
Text = Annotated[Optional[str], BeforeValidator(_as_text)]
Amount = Annotated[int, BeforeValidator(_as_amount)]
BureauDate = Annotated[Optional[Any], BeforeValidator(parse_bureau_date)]
History = Annotated[tuple, BeforeValidator(_as_history)]


class BureauSection(DataModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')


class ScoreSection(BureauSection):
    score: Code = Field(default=None, alias='FCIREXScore')


class AccountDetail(BureauSection):
    account_type: Code = Field(default=None, alias='Account_Type')
    account_status: Code = Field(default=None, alias='Account_Status')
    subscriber_name: Text = Field(default=None, alias='Subscriber_Name')
    identification_number: Code = Field(default=None, alias='Identification_Number')
    holder_type: Code = Field(default=None, alias='AccountHoldertypeCode')
    sanctioned_amount: Amount = Field(default=0, alias='Sanctioned_Amount')
    original_amount: Amount = Field(default=0, alias='Highest_Credit_or_Original_Loan_Amount')
    current_balance: Amount = Field(default=0, alias='Current_Balance')
    amount_past_due: Amount = Field(default=0, alias='Amount_Past_Due')
    emi_amount: Amount = Field(default=0, alias='EMI_Amount')
    scheduled_payment: Amount = Field(default=0, alias='Scheduled_Monthly_Payment_Amount')
    open_date: BureauDate = Field(default=None, alias='Open_Date')
    payment_history: History = Field(default=(), alias='Payment_History_Profile')

    def to_record(self) -> CreditAccountRecord:
        return CreditAccountRecord(
            account_type=self.account_type,
            account_status=self.account_status,
            lender_name=self.subscriber_name,
            institution_code=self.identification_number,
            holder_type=self.holder_type,
            sanctioned_amount=self.sanctioned_amount or self.original_amount,
            current_balance=self.current_balance,
            emi_amount=self.emi_amount or self.scheduled_payment,
            amount_past_due=self.amount_past_due,
            open_date=self.open_date,
            payment_history=self.payment_history,
        )


class AccountSection(BureauSection):
    details: Any = Field(default=None, alias='CAIS_Account_DETAILS')


class EnquiryDetail(BureauSection):
    enquiry_date: BureauDate = Field(default=None, alias='Date_of_Request')
    enquiry_reason: Code = Field(default=None, alias='Enquiry_Reason')
    finance_purpose: Code = Field(default=None, alias='Finance_Purpose')
    subscriber_name: Text = Field(default=None, alias='Subscriber_Name')
    amount: Amount = Field(default=0, alias='Amount_Financed')

    def to_record(self) -> EnquiryRecord:
        return EnquiryRecord(
            enquiry_date=self.enquiry_date,
            enquiry_reason=self.enquiry_reason,
            finance_purpose=self.finance_purpose,
            subscriber_name=self.subscriber_name,
            amount=self.amount,
        )


class EnquirySection(BureauSection):
    details: Any = Field(default=None, alias='CAPS_Application_Details')


class BureauReport(DataModel):
    score: Optional[int] = None
    accounts: Tuple[CreditAccountRecord, ...] = ()
    enquiries: Tuple[EnquiryRecord, ...] = ()


def parse_score(value) -> Optional[int]:
    ''' A usable bureau score, or None when missing or out of range. '''
    try:
        score = int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return None

    if config.SCORE_MIN <= score <= config.SCORE_MAX:
        return score

    return None


def _section(schema, payload, key):
    value = payload.get(key)
    if not isinstance(value, dict):
        return schema()

    try:
        return schema.model_validate(value)
    except ValidationError as e:
        logger.warning('Bureau section [%s] ignored: %s', key, e)
        return schema()


def _entries(schema, items, section):
    if isinstance(items, dict):
        items = [items]

    for item in items or ():
        if not isinstance(item, dict):
            logger.warning('Skipped a non-mapping entry in bureau section [%s]', section)
            continue

        try:
            yield schema.model_validate(item).to_record()
        except ValidationError as e:
            logger.warning('Skipped a malformed entry in bureau section [%s]: %s', section, e)


def parse_report(payload) -> BureauReport:
    ''' Decode the raw bureau payload (the `data` member of the credit
        report response). Never raises. '''
    if not isinstance(payload, dict):
        return BureauReport()

    score = _section(ScoreSection, payload, 'SCORE')
    accounts = _section(AccountSection, payload, 'CAIS_Account')
    enquiries = _section(EnquirySection, payload, 'CAPS')

    return BureauReport(
        score=parse_score(score.score),
        accounts=tuple(_entries(AccountDetail, accounts.details, 'CAIS_Account')),
        enquiries=tuple(_entries(EnquiryDetail, enquiries.details, 'CAPS')),
    )
