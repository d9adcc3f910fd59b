VEHICLE_LOAN_ACCOUNT_TYPES = ["1", "13", "32", "46"]
LENDER_NAME_KEYWORDS = ["auto", "vehicle", "car", "motor"]

# Words dropped before comparing lender names
GENERIC_NAME_WORDS = [
    "bank", "ltd", "limited", "finance", "financial", "financiers", "services",
    "pvt", "private", "co", "company", "corp", "corporation", "the", "of", "india",
]

AMOUNT_BAND_MIN = 500000
AMOUNT_BAND_MAX = 1500000

ESTIMATED_SANCTION_RATIO = 0.8
ESTIMATED_BALANCE_RATIO = 0.65
ESTIMATED_TENURE_MONTHS = 60
UNKNOWN_FINANCER = "Unknown Financer"
