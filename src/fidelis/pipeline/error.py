from fidelis.error import UnprocessableError


class StepTransitionError(UnprocessableError):
    ''' A submission for a stage other than the current one. '''
    label = "Invalid Step Transition"


class PipelineConfigurationError(UnprocessableError):
    label = "Pipeline Configuration Error"
