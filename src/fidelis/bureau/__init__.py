from ._meta import config, logger  # noqa
from .schema import BureauReport, parse_report, parse_score  # noqa
from .summary import (  # noqa
    AccountSummary,
    EnquiryWindow,
    EnquirySummary,
    summarize_accounts,
    summarize_enquiries,
    score_category,
)
