from fidelis.rule import KnowledgeBase, kb_rule, kb_cond, KnowledgeEngine, WorkingMemory, config, datadef
from pyrsistent import PRecord, field, pmap
import pytest


class SampleContext(PRecord):
    ctx01 = field(type=str)


class SampleMemory(WorkingMemory):
    ctx01 = None
    test01 = None


class SampleKnowledgeBase(KnowledgeBase):
    ContextSchema = SampleContext
    WorkingMemorySchema = SampleMemory

    @kb_rule("Sample rule on the context value")
    @kb_cond("C.ctx01 == 'test01'", key="ctx01_is_test01")
    def sample_rule(ctx, fact, mem):
        if fact.test01:
            mem.test01 = True

        mem.ctx01 = ctx.ctx01
        yield "sample_rule matched"

    @kb_rule("Clears the memory value first", priority=-100)
    @kb_cond("C.ctx01 == 'test02'", "ctx01_is_test02")
    @kb_cond("F.test01 == 'TRUE'", "flag_is_set")
    def sample_rule02(ctx, fact, mem):
        mem.ctx01 = None
        yield ("sample_rule02 matched", datadef.NARRATION_RULE_FIRED)

    @kb_rule("Copies the context value", priority=100)
    def sample_rule03(ctx, fact, mem):
        mem.ctx01 = ctx.ctx01
        yield "sample_rule03 matched"

    @kb_rule("Tries to overwrite reserved attributes", priority=100)
    @kb_cond("F.test_work_mem")
    def sample_rule04(ctx, fact, mem):
        mem.KE = None
        yield "should not reach here"


def test_rule_order_and_narration():
    kb = SampleKnowledgeBase({"ctx01": "test01"})
    assert [key for key, _, _ in kb.rules] == ['sample_rule02', 'sample_rule', 'sample_rule03', 'sample_rule04']

    ke = KnowledgeEngine(kb)
    mem = ke.execute(pmap({'test01': 'TRUE', 'test_work_mem': False}))
    narrations = list(ke.consume_narration())

    fired = [n.rule for n in narrations if n.code == datadef.NARRATION_RULE_FIRED]
    skipped = [n.rule for n in narrations if n.code == datadef.NARRATION_RULE_FAIL_PRECOND]

    assert fired == ['sample_rule', 'sample_rule03']
    assert skipped == ['sample_rule02', 'sample_rule04']
    assert all(n.ruleset == 'SampleKnowledgeBase' for n in narrations)
    assert mem.test01 is True
    assert mem.ctx01 == 'test01'


def test_rules_share_working_memory():
    kb = SampleKnowledgeBase(SampleKnowledgeBase.ContextSchema(ctx01="test02"))
    ke = KnowledgeEngine(kb)
    mem = ke.execute(pmap({'test01': 'TRUE', 'test_work_mem': False}))
    narrations = list(ke.consume_narration())

    fired = [n.rule for n in narrations if n.code == datadef.NARRATION_RULE_FIRED]
    assert fired == ['sample_rule02', 'sample_rule03']
    assert narrations[0].message == "sample_rule02 matched"
    assert mem.ctx01 == 'test02'
    assert list(ke.consume_narration()) == []


def test_precondition_reports_first_unmet_condition():
    kb = SampleKnowledgeBase({"ctx01": "test02"})
    ke = KnowledgeEngine(kb)
    ke.execute(pmap({'test01': 'FALSE', 'test_work_mem': False}))

    skipped = {n.rule: n.message for n in ke.consume_narration() if n.code == datadef.NARRATION_RULE_FAIL_PRECOND}
    assert skipped['sample_rule02'] == 'Unmatched pre-condition [flag_is_set]'


def test_rule_engine_workmem():
    f01 = pmap({
        'test01': 'TRUE',
        "test_work_mem": config.CHECK_WORKING_MEMORY_ATTRS
    })

    kb = SampleKnowledgeBase({"ctx01": "test02"})
    ke = KnowledgeEngine(kb)

    with pytest.raises(ValueError):
        ke.execute(f01)
