from typing import Callable

from .datadef import RuleInfo


def kb_cond(statement: str, key: str = None) -> Callable:
    ''' Pre-condition of a rule, a python expression over
        F (the fact), C (the knowledge base context) and M (working memory). '''
    code = compile(statement, f'<cond {key or statement}>', 'eval')

    def decorator(func):
        # Decorators apply bottom-up; keep the conditions in reading order.
        func.__kb_cond__ = ((key or statement, code),) + getattr(func, '__kb_cond__', ())
        return func

    return decorator


def kb_rule(statement: str, key: str = None, priority: int = 0, revision: int = 0) -> Callable:
    ''' Mark a knowledge base function as a rule.

        The function is called as `func(context, fact, mem)` and yields its
        narrations: a string, a `(message, code)` pair or a RuleNarration. '''
    def decorator(func):
        func.__kb_rule__ = RuleInfo(
            key=key or func.__name__,
            statement=statement,
            priority=priority,
            revision=revision,
            conditions=getattr(func, '__kb_cond__', ()),
        )
        return staticmethod(func)

    return decorator
