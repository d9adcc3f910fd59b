from fidelis.helper import tokenize

from . import config

GENERIC_NAME_WORDS = frozenset(config.GENERIC_NAME_WORDS)


def core_name(name):
    ''' Distinguishing tokens of a lender name.
        "Canara Bank Ltd." => ('canara',) '''
    return tuple(t for t in tokenize(name) if t not in GENERIC_NAME_WORDS)


def _contains(outer, inner):
    return f" {' '.join(inner)} " in f" {' '.join(outer)} "


def names_overlap(lender_core, financer_core):
    ''' Whole-word containment in either direction. An empty core never
        matches, so two names made only of generic words do not overlap. '''
    if not lender_core or not financer_core:
        return False

    return _contains(lender_core, financer_core) or _contains(financer_core, lender_core)


def overlap_size(lender_core, financer_core):
    if not names_overlap(lender_core, financer_core):
        return 0

    return min(len(lender_core), len(financer_core))
