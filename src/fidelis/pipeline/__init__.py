from ._meta import config, logger  # noqa
from .status import Stage, STAGE_ORDER, next_stage  # noqa
from .error import StepTransitionError, PipelineConfigurationError  # noqa
from .state import PipelineState, StepOutcome  # noqa
from .step import Step, StepRegistry, transition  # noqa
from . import steps  # noqa
from .orchestrator import VerificationPipeline, create_pipeline  # noqa
