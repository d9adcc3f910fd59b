import random

from fidelis.cache import create_store
from fidelis.connector import IdentityConnector, PersistenceConnector, PolicyConnector, VehicleConnector
from fidelis.data import serialize_mapping
from fidelis.eligibility import EligibilityMatcher
from fidelis.error import InputValidationError
from fidelis.reconcile import TradelineReconciler

from . import config, logger
from .error import StepTransitionError
from .state import PipelineState, StepOutcome
from .status import Stage, FINISH_STAGE, next_stage
from .step import StepRegistry


class VerificationPipeline(object):
    ''' Linear onboarding state machine for one applicant session.

        MOBILE -> IDENTITY -> SCORE_REVIEW -> VEHICLE_REGISTRY
               -> ACCOUNT_SELECTION -> SUMMARY

        A submission is only accepted for the current stage. Connector
        failures are absorbed by the connectors, so a valid submission
        always advances; only input errors block it. A response that
        arrives after the step was restarted or resubmitted is discarded.
    '''

    def __init__(self, identity, vehicle, eligibility, persistence, reconciler=None, store=None):
        self.identity = identity
        self.vehicle = vehicle
        self.eligibility = eligibility
        self.persistence = persistence
        self.reconciler = reconciler or TradelineReconciler()
        self._store = store
        self._state = PipelineState()
        self._history = ()
        self._errors = {}
        self._ticket = 0

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def stage(self) -> Stage:
        return self._state.stage

    @property
    def profile(self):
        return self._state.profile

    @property
    def vehicle_record(self):
        return self._state.vehicle

    @property
    def financer_match(self):
        return self._state.financer_match

    @property
    def data_source(self):
        return self._state.data_source

    @property
    def history(self):
        ''' (stage, profile) pairs, one per completed step. '''
        return self._history

    @property
    def errors(self):
        ''' Field errors of the last rejected submission for the current step. '''
        return dict(self._errors)

    @property
    def terminal(self):
        return self.stage == FINISH_STAGE

    def cache_get(self, namespace, key):
        if self._store is None or not key:
            return None

        return self._store.get(namespace, key)

    def cache_put(self, namespace, key, value):
        if self._store is None or not key:
            return None

        return self._store.put(namespace, key, value)

    def _next_ticket(self):
        self._ticket += 1
        return self._ticket

    def restart_step(self):
        ''' Reset the current step. Any response still in flight for it is
            discarded when it arrives. '''
        self._errors = {}
        self._next_ticket()
        logger.info('Restarted step [%s]', self.stage.value)

    async def submit(self, stage, **inputs) -> StepOutcome:
        stage = Stage(stage)
        if stage != self.stage:
            raise StepTransitionError(
                'P00.422', f'Cannot submit [{stage.value}] while at [{self.stage.value}]')

        to_state = next_stage(stage)
        if to_state is None:
            raise StepTransitionError('P00.423', 'The pipeline is complete; nothing left to submit')

        step = StepRegistry.construct(stage.value)
        try:
            values = step.validate(**inputs)
        except InputValidationError as e:
            self._errors = e.field_errors
            raise

        ticket = self._next_ticket()
        origin = self._state

        try:
            new_state = await step.transit(to_state, self, origin, **values)
        except InputValidationError as e:
            if ticket != self._ticket:
                return self._discarded(stage)

            self._errors = e.field_errors
            raise

        if ticket != self._ticket or self._state is not origin:
            return self._discarded(stage)

        self._state = new_state
        self._errors = {}
        self._history += ((stage, new_state.profile),)

        notes = new_state.data_source[len(origin.data_source):]
        for note in notes:
            if note.startswith(('Fallback', 'API')):
                logger.warning('[%s] %s', stage.value, note)

        logger.info('Step [%s] completed, now at [%s]', stage.value, to_state.value)
        return StepOutcome(stage=stage, current=to_state, advanced=True, notes=notes)

    def _discarded(self, stage):
        logger.info('Discarded a stale response for step [%s]', stage.value)
        return StepOutcome(stage=stage, current=self.stage, discarded=True)

    async def submit_mobile(self, mobile):
        return await self.submit(Stage.MOBILE, mobile=mobile)

    async def submit_identity(self, pan, email=None):
        return await self.submit(Stage.IDENTITY, pan=pan, email=email)

    async def confirm_score(self):
        return await self.submit(Stage.SCORE_REVIEW)

    async def submit_vehicle(self, registration_number):
        return await self.submit(Stage.VEHICLE_REGISTRY, registration_number=registration_number)

    async def submit_selection(self, candidate_id=None, monthly_income=None, employment_type=None):
        return await self.submit(
            Stage.ACCOUNT_SELECTION,
            candidate_id=candidate_id,
            monthly_income=monthly_income,
            employment_type=employment_type,
        )

    def application_record(self, state=None):
        ''' The structured application sent to persistence. '''
        state = state or self._state
        profile = state.profile.serialize(exclude={'bureau_payload'})
        return serialize_mapping({
            "applicant": profile,
            "vehicle": state.vehicle.serialize(),
            "selected_account": state.selected_account,
            "eligible_products": state.eligibility.products if state.eligibility else (),
            "data_source": state.data_source,
            "status": "submitted",
        })

    def summary(self):
        if not self.terminal:
            raise StepTransitionError('P00.424', f'Summary is not available at [{self.stage.value}]')

        from fidelis.report import compile_summary
        return compile_summary(self._state)

    def render(self, style=None):
        from fidelis.report import render_summary
        return render_summary(self.summary(), style or config.DEFAULT_RENDER_STYLE)


def create_pipeline(client=None, store=None, rng: random.Random = None, base_url=None, **kwargs) -> VerificationPipeline:
    ''' Wire the connectors around one HTTP client and one local store. '''
    store = store if store is not None else create_store()
    options = dict(client=client, store=store, base_url=base_url)

    return VerificationPipeline(
        identity=IdentityConnector(rng=rng, **options),
        vehicle=VehicleConnector(**options),
        eligibility=EligibilityMatcher(PolicyConnector(**options), store=store),
        persistence=PersistenceConnector(**options),
        reconciler=TradelineReconciler(**kwargs),
        store=store,
    )
