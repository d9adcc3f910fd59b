from ._meta import config, logger  # noqa
from .names import core_name, names_overlap, overlap_size  # noqa
from .ruleset import TradelineKnowledgeBase  # noqa
from .reconciler import TradelineReconciler, decode_account, reconcile, select_candidate  # noqa
