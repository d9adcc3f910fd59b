from fidelis.helper import ClassRegistry, camel_to_title

from .error import PipelineConfigurationError, StepTransitionError
from .status import Stage


def transition(to_state, allowed_origins=None):
    def _decorator(func):
        setattr(func, '__transition__', (Stage(to_state), allowed_origins))
        return func
    return _decorator


class Step(object):
    ''' One stage of the pipeline: input validation and the transition
        handler that produces the next state. Steps hold no session data. '''
    __stage__ = None
    __title__ = None

    def __init_subclass__(cls, name=None, stage=None):
        _stage = stage or cls.__stage__

        cls.__title__ = name or camel_to_title(cls.__name__)
        cls.__stage__ = None if _stage is None else Stage(_stage)
        cls.__transitions__ = {}

        for attr in dir(cls):
            func = getattr(cls, attr)
            if not hasattr(func, '__transition__'):
                continue

            to_state, allowed_origins = func.__transition__
            if to_state in cls.__transitions__:
                raise PipelineConfigurationError(
                    'P00.301', f'Duplicated transition handler to state [{to_state.value}]')

            origins = (cls.__stage__,) if allowed_origins is None else tuple(Stage(s) for s in allowed_origins)
            cls.__transitions__[to_state] = origins, func

    @property
    def stage(self):
        return self.__stage__

    @property
    def title(self):
        return self.__title__

    def validate(self, **inputs):
        return inputs

    async def transit(self, to_state, pipeline, state, **values):
        try:
            origins, handler = self.__transitions__[to_state]
        except KeyError:
            raise StepTransitionError(
                'P00.404', f'Step [{self.title}] has no transition to [{to_state.value}]')

        if state.stage not in origins:
            raise StepTransitionError(
                'P00.405', f'Transition to [{to_state.value}] not allowed from [{state.stage.value}]')

        new_state = await handler(self, pipeline, state, **values)
        return new_state.set(stage=to_state)


StepRegistry = ClassRegistry(Step)


def register_step(cls):
    return StepRegistry.register(cls.__stage__.value)(cls)
