import json

import httpx

BASE_URL = "http://services.test/api"

IDENTITY_OK = {
    "success": True,
    "data": {
        "status": "1",
        "full_name": "Ravi Kumar",
        "first_name": "Ravi",
        "last_name": "Kumar",
        "dob": "1988-04-12",
        "gender": "M",
    },
}

IDENTITY_NOT_FOUND = {"success": False, "message": "No record found"}

BUREAU_PAYLOAD = {
    "SCORE": {"FCIREXScore": "782"},
    "CAIS_Account": {
        "CAIS_Account_DETAILS": [
            {
                "Account_Type": "1",
                "Subscriber_Name": "Canara Auto Finance",
                "Identification_Number": "PUB0021",
                "Sanctioned_Amount": "650000",
                "Current_Balance": "410000",
                "Amount_Past_Due": "0",
                "EMI_Amount": "13500",
                "Account_Status": "11",
                "Open_Date": "20210315",
                "Payment_History_Profile": "000000",
            },
            {
                "Account_Type": "10",
                "Subscriber_Name": "HDFC Bank",
                "Sanctioned_Amount": "150000",
                "Current_Balance": "23000",
                "Account_Status": "11",
                "Open_Date": "20190102",
            },
            {
                "Account_Type": "5",
                "Subscriber_Name": "Bajaj Finance Ltd",
                "Sanctioned_Amount": "300000",
                "Current_Balance": "0",
                "Amount_Past_Due": "4500",
                "Account_Status": "13",
                "Payment_History_Profile": "010200",
            },
        ]
    },
    "CAPS": {
        "CAPS_Application_Details": [
            {"Date_of_Request": "20240125", "Enquiry_Reason": "2", "Finance_Purpose": "8", "Amount_Financed": "700000"},
            {"Date_of_Request": "20231220", "Enquiry_Reason": "13", "Finance_Purpose": "35", "Amount_Financed": "200000"},
            {"Date_of_Request": "20231110", "Enquiry_Reason": "16", "Finance_Purpose": "55", "Amount_Financed": "90000"},
        ]
    },
}

CREDIT_OK = {"success": True, "data": BUREAU_PAYLOAD}

REGISTRY_OK = {
    "success": True,
    "data": {
        "maker_description": "Hyundai",
        "maker_model": "Creta SX",
        "manufacturing_date_formatted": "2021-03",
        "fuel_type": "Diesel",
        "color": "Grey",
        "owner_name": "Ravi Kumar",
        "financer": "Canara Bank",
        "registration_date": "2021-03-20",
        "present_address": "12 MG Road, Pune, Maharashtra",
    },
}

REGISTRY_NOT_FOUND = {"success": False, "message": "Invalid registration"}

VALUATION_OK = {"success": True, "market_value": 950000}

POLICY_OK = {
    "success": True,
    "eligible_products": [
        {"lender_name": "HDFC Bank", "product_name": "Car Refinance", "roi_min": 9.5,
         "roi_max": 12.0, "max_ltv_purchase": 80, "status": "active"},
        {"lender_name": "Tata Capital", "product_name": "Auto Top-up", "roi_min": 11.0,
         "roi_max": 15.0, "max_ltv_purchase": 70},
    ],
}

PERSIST_OK = {"success": True, "application_id": "APP-1001"}

LIVE_ROUTES = {
    "pan-verify": IDENTITY_OK,
    "credit-report": CREDIT_OK,
    "rc-verify": REGISTRY_OK,
    "vehicle-valuation": VALUATION_OK,
    "policy-engine": POLICY_OK,
    "loan-application": PERSIST_OK,
}


def html_page(status=200):
    return httpx.Response(
        status, text="<html><body>Service Unavailable</body></html>",
        headers={"content-type": "text/html"})


class FakeServices(object):
    ''' Routes connector requests by the last path segment. A route is a
        JSON body, an httpx.Response, an exception or a callable taking the
        request. Unrouted endpoints are unreachable. '''

    def __init__(self, **routes):
        self.routes = {k.replace('_', '-'): v for k, v in routes.items()}
        self.requests = []

    def handler(self, request):
        name = request.url.path.rsplit('/', 1)[-1]
        self.requests.append((name, json.loads(request.content or b'null')))

        route = self.routes.get(name)
        if route is None:
            raise httpx.ConnectError("Connection refused", request=request)

        if callable(route) and not isinstance(route, httpx.Response):
            route = route(request)

        if isinstance(route, Exception):
            raise route

        if isinstance(route, httpx.Response):
            return route

        return httpx.Response(200, json=route)

    def client(self):
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def called(self, name):
        return [body for n, body in self.requests if n == name]
