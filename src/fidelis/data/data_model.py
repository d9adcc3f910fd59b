from types import SimpleNamespace
from pydantic import BaseModel, ConfigDict


def _public_fields(source):
    if isinstance(source, dict):
        return source

    if isinstance(source, BaseModel):
        return source.model_dump()

    if isinstance(source, (type, SimpleNamespace)):
        return {k: v for k, v in vars(source).items() if not k.startswith('_')}

    raise ValueError(f'Cannot read model fields from: {source!r}')


class DataModel(BaseModel):
    ''' Immutable record shared between pipeline stages.

        Updates go through `set`, which returns a copy. Dumps use field
        aliases and leave out unset (None) values.
    '''

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def create(cls, data=None, defaults=None, **kwargs):
        values = dict(defaults or {})
        if data is not None:
            values.update(_public_fields(data))

        values.update(kwargs)
        return cls(**values)

    def set(self, **kwargs):
        return self.model_copy(update=kwargs)

    def model_dump(self, by_alias=True, exclude_none=True, **kwargs):
        return super().model_dump(by_alias=by_alias, exclude_none=exclude_none, **kwargs)

    def serialize(self, **kwargs):
        return self.model_dump(mode='json', **kwargs)
