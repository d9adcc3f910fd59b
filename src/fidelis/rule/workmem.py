from . import config

RESERVED_ATTRS = frozenset(('KE',))


class WorkingMemory(object):
    ''' Scratch space shared by the rules of a single run.
        Capitalized members belong to the engine and are read-only. '''

    def __init__(self, ke):
        object.__setattr__(self, '_ke', ke)

    @property
    def KE(self):
        return self._ke

    def __setattr__(self, name, value):
        if config.CHECK_WORKING_MEMORY_ATTRS and name in RESERVED_ATTRS:
            raise ValueError(f'WorkingMemory attribute [{name}] is reserved.')

        object.__setattr__(self, name, value)


class MemoryView(object):
    ''' Read-only view of a working memory for pre-condition expressions. '''

    __slots__ = ('_mem',)

    def __init__(self, mem):
        object.__setattr__(self, '_mem', mem)

    def __getattr__(self, name):
        value = getattr(self._mem, name)
        if callable(value):
            raise RuntimeError(f'Pre-conditions cannot call memory attribute [{name}].')

        return value

    def __setattr__(self, name, value):
        raise RuntimeError('Pre-conditions cannot write to working memory.')
