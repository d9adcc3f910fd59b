from typing import Any, Dict, Optional, Tuple

from pydantic import Field

from fidelis.data import DataModel
from fidelis.datadef import (
    ApplicantProfile,
    ConnectorResult,
    DecodedAccountRecord,
    FinancerMatch,
    VehicleRecord,
)
from fidelis.eligibility import EligibilityResult

from .status import Stage, BEGIN_STAGE


class PipelineState(DataModel):
    ''' Everything a session has accumulated. Each step returns a new value. '''
    stage: Stage = BEGIN_STAGE
    profile: ApplicantProfile = Field(default_factory=ApplicantProfile)
    vehicle: VehicleRecord = Field(default_factory=VehicleRecord)
    known_applicant: Optional[Dict[str, Any]] = None
    financer_match: Optional[FinancerMatch] = None
    selected_account: Optional[DecodedAccountRecord] = None
    eligibility: Optional[EligibilityResult] = None
    application_id: Optional[str] = None
    data_source: Tuple[str, ...] = ()

    def note(self, *notes):
        if not notes:
            return self

        return self.set(data_source=self.data_source + tuple(notes))

    def fold_profile(self, values, tiers=None):
        return self.set(profile=self.profile.fold(values, tiers))

    def fold_vehicle(self, values, tiers=None):
        return self.set(vehicle=self.vehicle.fold(values, tiers))

    def apply_profile(self, result: ConnectorResult):
        return self.fold_profile(result.data, result.tiers).note(*result.notes)

    def apply_vehicle(self, result: ConnectorResult):
        return self.fold_vehicle(result.data, result.tiers).note(*result.notes)

    @property
    def degraded(self):
        return self.profile.degraded or self.vehicle.degraded


class StepOutcome(DataModel):
    stage: Stage
    current: Stage
    advanced: bool = False
    discarded: bool = False
    notes: Tuple[str, ...] = ()
