SERVICE_BASE_URL = "http://localhost:8080/api"
REQUEST_TIMEOUT = 15.0

IDENTITY_ENDPOINT = "pan-verify"
CREDIT_REPORT_ENDPOINT = "credit-report"
REGISTRY_ENDPOINT = "rc-verify"
VALUATION_ENDPOINT = "vehicle-valuation"
POLICY_ENDPOINT = "policy-engine"
PERSISTENCE_ENDPOINT = "loan-application"

IDENTITY_MATCH_STATUS = "1"
DEFAULT_PINCODE = "110001"
EMAIL_DOMAIN = "example.com"
GENDER_CODES = {"M": "1", "F": "2", "T": "3"}
GENDER_WORDS = {"1": "male", "2": "female", "3": "transgender"}

SIMULATED_SCORE_MIN = 650
SIMULATED_SCORE_MAX = 849
SIMULATED_NAME_PREFIX = "User"
SIMULATED_DATE_OF_BIRTH = "1990-01-01"
SIMULATED_GENDER_CODE = "1"

DEFAULT_MARKET_VALUE = 800000
DEFAULT_CITY = "Mumbai"
KNOWN_CITIES = ["mumbai", "delhi", "bangalore", "chennai", "kolkata", "hyderabad", "pune"]
VEHICLE_CONDITION = "Good"
INPUT_DATE_FORMATS = ["%Y-%m-%d", "%Y%m%d", "%d-%m-%Y", "%d/%m/%Y", "%d %b %Y"]

SIMULATED_VEHICLE_MAKE = "Maruti Suzuki"
SIMULATED_VEHICLE_MODEL = "Swift VDI"
SIMULATED_VEHICLE_YEAR = 2020
SIMULATED_VEHICLE_FUEL = "Petrol"
SIMULATED_VEHICLE_COLOR = "White"
SIMULATED_OWNER_NAME = "Vehicle Owner"

LOAN_PURPOSE = "purchase"
