from typing import Optional, Tuple, Type

from pyrsistent import PRecord, freeze

from .workmem import WorkingMemory


class KnowledgeBase(object):
    ''' A named set of rules evaluated against one fact at a time.

        Rules run in (priority, key) order. Subclasses may narrow the context
        and fact shapes with pyrsistent records and supply their own
        working memory class. '''

    __revision__: int = 0
    ContextSchema: Type[PRecord] = PRecord
    FactSchema: Optional[Type[PRecord]] = None
    WorkingMemorySchema: Type[WorkingMemory] = WorkingMemory

    def __init__(self, context):
        self._context = self.ContextSchema.create(context)
        self._rules = self._collect_rules()

    @classmethod
    def _collect_rules(cls) -> Tuple:
        found = {}
        for klass in reversed(cls.__mro__):
            for value in vars(klass).values():
                func = getattr(value, '__func__', None)
                info = getattr(func, '__kb_rule__', None)
                if info is not None:
                    found[info.key] = (info.key, func, info)

        return tuple(sorted(found.values(), key=lambda r: (r[2].priority, r[0])))

    @property
    def rules(self):
        return self._rules

    @property
    def context(self):
        return self._context

    @property
    def kb_revision(self) -> int:
        return self.__revision__

    @property
    def kb_name(self) -> str:
        return type(self).__name__

    def fact_check(self, fact):
        ''' Facts are frozen for the duration of a run. '''
        if self.FactSchema is not None:
            return self.FactSchema.create(fact)

        return freeze(fact)
