from collections import deque

from .datadef import NARRATION_RULE_FAIL_PRECOND, NARRATION_RULE_FIRED, RuleNarration
from .kbase import KnowledgeBase
from .workmem import MemoryView, WorkingMemory

from . import config, logger


def _narration(resp, **meta) -> RuleNarration:
    if isinstance(resp, RuleNarration):
        return resp.set(**meta)

    if isinstance(resp, str):
        return RuleNarration(message=resp, code=NARRATION_RULE_FIRED, **meta)

    message, code = resp[:2]
    return RuleNarration(message=message, code=code, **meta)


class KnowledgeEngine(object):
    ''' Runs the rules of a knowledge base over a fact.

        Each call to `execute` gets a fresh working memory. Narrations pile
        up until `consume_narration` drains them. '''

    def __init__(self, kb: KnowledgeBase):
        self._kb = kb
        self._narrations = deque()

    @property
    def KB(self) -> KnowledgeBase:
        return self._kb

    def _run_rule(self, key, func, info, fact, mem, scope):
        meta = dict(
            rule=key,
            ruleset=self._kb.kb_name,
            revision=(self._kb.kb_revision << 16) + info.revision,
        )

        for cond_key, code in info.conditions:
            if not eval(code, {}, scope):
                config.DEBUG_RULE_ENGINE and logger.debug('Rule [%s] skipped: [%s] not met', key, cond_key)
                yield _narration((f'Unmatched pre-condition [{cond_key}]', NARRATION_RULE_FAIL_PRECOND), **meta)
                return

        for resp in func(self._kb.context, fact, mem):
            yield _narration(resp, **meta)

    def execute(self, fact) -> WorkingMemory:
        fact = self._kb.fact_check(fact)
        mem = self._kb.WorkingMemorySchema(self)
        scope = {"F": fact, "C": self._kb.context, "M": MemoryView(mem)}

        for key, func, info in self._kb.rules:
            self._narrations.extend(self._run_rule(key, func, info, fact, mem, scope))

        return mem

    def consume_narration(self):
        while self._narrations:
            yield self._narrations.popleft()
