from ._meta import config, logger  # noqa
from .matcher import (  # noqa
    EligibilityMatcher,
    EligibilityResult,
    max_loan_amount,
    to_product,
)
