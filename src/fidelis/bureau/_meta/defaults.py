SCORE_MIN = 300
SCORE_MAX = 900

# Lower bounds of the score categories, best first
SCORE_CATEGORIES = [[750, "Excellent"], [700, "Good"], [650, "Fair"], [0, "Poor"]]

AUTO_LOAN_ACCOUNT_TYPES = ["1", "13", "32", "46"]
SECURED_ACCOUNT_TYPES = [
    "1", "2", "3", "4", "7", "11", "13", "15", "17", "23", "31", "32",
    "33", "34", "42", "44", "46", "50", "59", "70",
]
ACTIVE_STATUS_DESCRIPTION = "ACTIVE"

ENQUIRY_WINDOWS = [30, 60, 90]
AUTO_ENQUIRY_KEYWORDS = ["auto", "vehicle", "car", "wheeler"]
