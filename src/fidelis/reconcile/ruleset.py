from pyrsistent import PRecord, field

from fidelis.datadef import Classification
from fidelis.rule import KnowledgeBase, WorkingMemory, kb_rule, kb_cond

from .names import names_overlap

RULE_CONFIRMED_AUTO_LOAN = "confirmed-auto-loan"
RULE_LENDER_KEYWORD = "lender-keyword"
RULE_FINANCER_NAME = "financer-name"
RULE_AMOUNT_BAND = "amount-band"


class TradelineContext(PRecord):
    vehicle_loan_types = field(type=tuple, initial=())
    lender_keywords = field(type=tuple, initial=())
    amount_min = field(type=int, initial=0)
    amount_max = field(type=int, initial=0)


class TradelineFact(PRecord):
    account_type = field(initial=None)
    lender_name = field(initial=None)
    lender_tokens = field(type=tuple, initial=())
    lender_core = field(type=tuple, initial=())
    financer_name = field(initial=None)
    financer_core = field(type=tuple, initial=())
    sanctioned_amount = field(type=int, initial=0)
    current_balance = field(type=int, initial=0)


class TradelineMemory(WorkingMemory):
    def __init__(self, ke):
        super().__init__(ke)
        self.matches = []

    def match(self, rule_key, classification, reason):
        self.matches.append((rule_key, classification, reason))
        return reason


class TradelineKnowledgeBase(KnowledgeBase):
    ''' Vehicle-loan likeness of a single bureau tradeline. Every rule that
        fires appends to `mem.matches`; the caller keeps the most specific. '''
    ContextSchema = TradelineContext
    FactSchema = TradelineFact
    WorkingMemorySchema = TradelineMemory

    @kb_rule("Account type belongs to the vehicle loan family", key=RULE_CONFIRMED_AUTO_LOAN)
    @kb_cond("F.account_type in C.vehicle_loan_types", key="vehicle-loan-type")
    def confirmed_auto_loan(ctx, fact, mem):
        yield mem.match(
            RULE_CONFIRMED_AUTO_LOAN, Classification.CONFIRMED_AUTO_LOAN,
            f"Account type {fact.account_type} is a vehicle loan")

    @kb_rule("Lender name carries a vehicle finance keyword", key=RULE_LENDER_KEYWORD, priority=10)
    @kb_cond("set(F.lender_tokens) & set(C.lender_keywords)", key="lender-keyword")
    def lender_keyword(ctx, fact, mem):
        found = sorted(set(fact.lender_tokens) & set(ctx.lender_keywords))
        yield mem.match(
            RULE_LENDER_KEYWORD, Classification.LENDER_NAME_MATCH,
            f"Lender name contains [{', '.join(found)}]")

    @kb_rule("Lender name overlaps the registry financer", key=RULE_FINANCER_NAME, priority=11)
    @kb_cond("F.lender_core and F.financer_core", key="names-present")
    def financer_name(ctx, fact, mem):
        if not names_overlap(fact.lender_core, fact.financer_core):
            return

        yield mem.match(
            RULE_FINANCER_NAME, Classification.LENDER_NAME_MATCH,
            f"Lender name matches registry financer [{fact.financer_name}]")

    @kb_rule("Amount within the vehicle loan band", key=RULE_AMOUNT_BAND, priority=20)
    @kb_cond(
        "C.amount_min <= F.sanctioned_amount <= C.amount_max"
        " or C.amount_min <= F.current_balance <= C.amount_max", key="amount-in-band")
    def amount_band(ctx, fact, mem):
        yield mem.match(
            RULE_AMOUNT_BAND, Classification.AMOUNT_RANGE_HEURISTIC,
            f"Amount within {ctx.amount_min} - {ctx.amount_max}")
