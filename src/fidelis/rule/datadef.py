from pyrsistent import PClass, field


# Narration codes
NARRATION_RULE_FIRED = 0
NARRATION_RULE_FAIL_PRECOND = 100


class RuleInfo(PClass):
    key = field(type=str, mandatory=True)
    statement = field(type=str, mandatory=True)
    priority = field(type=int, initial=0)
    revision = field(type=int, initial=0)
    conditions = field(type=tuple, initial=())


class RuleNarration(PClass):
    ''' One line of the engine's account of a run: a rule either fired
        or was skipped on a pre-condition. '''
    code = field(type=int, mandatory=True)
    message = field(type=str)
    rule = field(type=str)
    ruleset = field(type=str)
    revision = field(type=int)
