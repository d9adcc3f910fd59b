REPORT_TITLE = "Loan Onboarding Report"
CURRENCY_PREFIX = "₹"
MAX_SCORE = 900
COMPACT_PRODUCT_LIMIT = 3
