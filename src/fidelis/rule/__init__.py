from ._meta import config, logger  # noqa
from .engine import KnowledgeBase, KnowledgeEngine, WorkingMemory  # noqa
from .decorator import kb_rule, kb_cond  # noqa
from .datadef import RuleNarration  # noqa
