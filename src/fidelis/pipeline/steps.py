from fidelis.bureau import parse_report
from fidelis.cache import NS_MOBILE
from fidelis.error import InputValidationError
from fidelis.reconcile import select_candidate

from . import logger
from .status import Stage
from .step import Step, register_step, transition
from .validate import (
    collect,
    validate_email,
    validate_employment_type,
    validate_income,
    validate_mobile,
    validate_pan,
    validate_registration_number,
)


@register_step
class MobileStep(Step, name="Mobile Number", stage=Stage.MOBILE):
    def validate(self, mobile=None):
        return {"mobile": validate_mobile(mobile)}

    @transition(Stage.IDENTITY)
    async def enter_mobile(self, pipeline, state, mobile):
        state = state.fold_profile({"mobile": mobile})
        known = pipeline.cache_get(NS_MOBILE, mobile)
        if not known:
            return state

        logger.info('Returning applicant for mobile [%s]', mobile)
        return state.set(known_applicant=known).note("Cache: returning applicant found for this mobile number")


@register_step
class IdentityStep(Step, name="PAN Verification", stage=Stage.IDENTITY):
    def validate(self, pan=None, email=None):
        return collect(pan=(validate_pan, pan), email=(validate_email, email))

    @transition(Stage.SCORE_REVIEW)
    async def verify_identity(self, pipeline, state, pan, email=None):
        result = await pipeline.identity.lookup(pan, mobile=state.profile.mobile, email=email)
        return state.fold_profile({"pan": pan, "email": email}).apply_profile(result)


@register_step
class ScoreReviewStep(Step, name="Credit Score Review", stage=Stage.SCORE_REVIEW):
    @transition(Stage.VEHICLE_REGISTRY)
    async def confirm_score(self, pipeline, state):
        return state


@register_step
class VehicleStep(Step, name="Vehicle Registration", stage=Stage.VEHICLE_REGISTRY):
    def validate(self, registration_number=None):
        return {"registration_number": validate_registration_number(registration_number)}

    @transition(Stage.ACCOUNT_SELECTION)
    async def verify_vehicle(self, pipeline, state, registration_number):
        result = await pipeline.vehicle.lookup(registration_number, owner_hint=state.profile.legal_name)
        state = state.apply_vehicle(result)

        vehicle = state.vehicle
        accounts = parse_report(state.profile.bureau_payload).accounts
        match = pipeline.reconciler.reconcile(accounts, vehicle.financer, vehicle.market_value)

        if match.has_match:
            note = f"Match: registry financer [{match.financer_name}] found in bureau tradelines"
        else:
            note = f"Match: no bureau tradeline matches registry financer [{match.financer_name}]"

        return state.set(financer_match=match).note(note)


@register_step
class SelectionStep(Step, name="Account Selection", stage=Stage.ACCOUNT_SELECTION):
    def validate(self, candidate_id=None, monthly_income=None, employment_type=None):
        values = collect(
            monthly_income=(validate_income, monthly_income),
            employment_type=(validate_employment_type, employment_type),
        )
        values["candidate_id"] = candidate_id
        return values

    def choose(self, state, candidate_id):
        match = state.financer_match
        if candidate_id is None and match.has_match:
            return match.account

        if candidate_id is None:
            raise InputValidationError("P01.400", "No account selected", {
                "candidate_id": "Please select the account to refinance"
            })

        return select_candidate(match, candidate_id)

    @transition(Stage.SUMMARY)
    async def select_account(self, pipeline, state, candidate_id, monthly_income, employment_type):
        selected = self.choose(state, candidate_id)
        state = state.fold_profile({
            "monthly_income": monthly_income,
            "employment_type": employment_type,
        }).set(selected_account=selected)

        profile, vehicle = state.profile, state.vehicle
        eligibility = await pipeline.eligibility.match(
            credit_score=profile.credit_score,
            employment_type=profile.employment_type,
            income=profile.monthly_income,
            fuel_type=vehicle.fuel_type,
            loan_amount=selected.effective_amount,
            vehicle_value=vehicle.market_value,
        )
        state = state.set(eligibility=eligibility).note(*eligibility.notes)

        receipt = await pipeline.persistence.save(pipeline.application_record(state))
        state = state.set(application_id=receipt.data['application_id']).note(*receipt.notes)

        pipeline.cache_put(NS_MOBILE, profile.mobile, {
            "legal_name": profile.legal_name,
            "pan": profile.pan,
            "application_id": state.application_id,
        })
        return state
