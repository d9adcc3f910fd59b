from datetime import date, timedelta
from typing import Iterable, Optional, Tuple

from fidelis import codes
from fidelis.data import DataModel
from fidelis.helper import tokenize

from . import config

NOT_AVAILABLE = "N/A"


class AccountSummary(DataModel):
    total_accounts: int = 0
    active_accounts: int = 0
    secured_count: int = 0
    secured_total: int = 0
    unsecured_count: int = 0
    unsecured_total: int = 0
    auto_count: int = 0
    auto_total: int = 0
    outstanding_balance: int = 0
    monthly_emi: int = 0
    highest_sanction: int = 0
    overdue_accounts: int = 0
    dpd_count: int = 0


class EnquiryWindow(DataModel):
    days: int
    total: int = 0
    auto_loans: int = 0

    @property
    def others(self) -> int:
        return self.total - self.auto_loans


class EnquirySummary(DataModel):
    windows: Tuple[EnquiryWindow, ...] = ()

    def window(self, days) -> Optional[EnquiryWindow]:
        for w in self.windows:
            if w.days == days:
                return w

        return None


def score_category(score) -> str:
    if score is None:
        return NOT_AVAILABLE

    for lower_bound, label in config.SCORE_CATEGORIES:
        if score >= lower_bound:
            return label

    return NOT_AVAILABLE


def _is_delinquent(bucket):
    # Only numeric buckets count days past due; letters are asset classes.
    return bucket.isdigit() and int(bucket) > 0


def summarize_accounts(accounts: Iterable) -> AccountSummary:
    secured_types = set(config.SECURED_ACCOUNT_TYPES)
    auto_types = set(config.AUTO_LOAN_ACCOUNT_TYPES)
    values = dict.fromkeys(AccountSummary.model_fields, 0)

    for acc in accounts:
        amount = acc.effective_amount
        values['total_accounts'] += 1

        if acc.account_type in secured_types:
            values['secured_count'] += 1
            values['secured_total'] += amount
        else:
            values['unsecured_count'] += 1
            values['unsecured_total'] += amount

        if acc.account_type in auto_types:
            values['auto_count'] += 1
            values['auto_total'] += amount

        if codes.account_status(acc.account_status) == config.ACTIVE_STATUS_DESCRIPTION:
            values['active_accounts'] += 1
            values['outstanding_balance'] += acc.current_balance
            values['monthly_emi'] += acc.emi_amount

        if acc.amount_past_due > 0:
            values['overdue_accounts'] += 1

        values['highest_sanction'] = max(values['highest_sanction'], acc.sanctioned_amount)
        values['dpd_count'] += sum(1 for bucket in acc.payment_history if _is_delinquent(bucket))

    return AccountSummary(**values)


def is_auto_enquiry(enquiry) -> bool:
    keywords = set(config.AUTO_ENQUIRY_KEYWORDS)
    text = " ".join((
        codes.enquiry_reason(enquiry.enquiry_reason),
        codes.finance_purpose(enquiry.finance_purpose),
    ))
    return bool(keywords.intersection(tokenize(text)))


def summarize_enquiries(enquiries: Iterable, today: date = None) -> EnquirySummary:
    ''' Count enquiries in each trailing window (30/60/90 days by default).
        Enquiries without a date are left out of every window. '''
    today = today or date.today()
    dated = [e for e in enquiries if e.enquiry_date is not None]

    windows = []
    for days in config.ENQUIRY_WINDOWS:
        start = today - timedelta(days=days)
        in_window = [e for e in dated if start <= e.enquiry_date <= today]
        windows.append(EnquiryWindow(
            days=days,
            total=len(in_window),
            auto_loans=sum(1 for e in in_window if is_auto_enquiry(e)),
        ))

    return EnquirySummary(windows=tuple(windows))
