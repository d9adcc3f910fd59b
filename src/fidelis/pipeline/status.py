from enum import Enum


class Stage(Enum):
    MOBILE = "MOBILE"
    IDENTITY = "IDENTITY"
    SCORE_REVIEW = "SCORE_REVIEW"
    VEHICLE_REGISTRY = "VEHICLE_REGISTRY"
    ACCOUNT_SELECTION = "ACCOUNT_SELECTION"
    SUMMARY = "SUMMARY"


STAGE_ORDER = (
    Stage.MOBILE,
    Stage.IDENTITY,
    Stage.SCORE_REVIEW,
    Stage.VEHICLE_REGISTRY,
    Stage.ACCOUNT_SELECTION,
    Stage.SUMMARY,
)

BEGIN_STAGE = STAGE_ORDER[0]
FINISH_STAGE = STAGE_ORDER[-1]


def next_stage(stage):
    stage = Stage(stage)
    if stage == FINISH_STAGE:
        return None

    return STAGE_ORDER[STAGE_ORDER.index(stage) + 1]
