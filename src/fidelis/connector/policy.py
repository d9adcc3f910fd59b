from fidelis.error import MalformedResponseError

from . import config
from .base import ServiceConnector


class PolicyConnector(ServiceConnector):
    ''' Server side lender policy evaluation. Failures propagate; the
        eligibility matcher owns the fallback. '''

    def policy_request(self, credit_score, fuel_type, employment_type, income,
                       loan_amount=None, vehicle_value=None):
        return {
            "creditScore": credit_score,
            "fuelType": fuel_type,
            "employment": employment_type,
            "income": income,
            "loanType": config.LOAN_PURPOSE,
            "loanAmount": loan_amount,
            "vehicleValue": vehicle_value,
        }

    async def evaluate(self, **query) -> list:
        body = await self.post_json(config.POLICY_ENDPOINT, self.policy_request(**query))
        self.require_success(body, "Policy evaluation failed")

        products = body.get('eligible_products')
        if not isinstance(products, list):
            raise MalformedResponseError("C04.505", "Policy response has no product list")

        return [p for p in products if isinstance(p, dict)]
