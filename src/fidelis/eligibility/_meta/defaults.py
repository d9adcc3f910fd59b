ACTIVE_STATUS = "active"
CATALOGUE_KEY = "products"

# Used when the local store holds no catalogue yet
DEFAULT_CATALOGUE = [
    {"lender_name": "HDFC Bank", "product_name": "Car Refinance", "roi_min": 9.5,
     "roi_max": 13.0, "max_ltv_purchase": 85, "status": "active"},
    {"lender_name": "ICICI Bank", "product_name": "Car Top-up Loan", "roi_min": 10.25,
     "roi_max": 14.0, "max_ltv_purchase": 80, "status": "active"},
    {"lender_name": "Bajaj Finance", "product_name": "Used Car Refinance", "roi_min": 12.0,
     "roi_max": 16.5, "max_ltv_purchase": 90, "status": "active"},
    {"lender_name": "Axis Bank", "product_name": "Car Balance Transfer", "roi_min": 9.75,
     "roi_max": 12.5, "max_ltv_purchase": 75, "status": "inactive"},
]
