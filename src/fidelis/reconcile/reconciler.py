import math
from typing import Iterable, Optional

from fidelis import codes
from fidelis.datadef import (
    Classification,
    CreditAccountRecord,
    DecodedAccountRecord,
    FinancerMatch,
)
from fidelis.error import InputValidationError
from fidelis.helper import tokenize
from fidelis.rule import KnowledgeEngine

from . import config, logger
from .names import core_name, overlap_size
from .ruleset import TradelineKnowledgeBase

ESTIMATED_CANDIDATE_ID = "EST-01"
ESTIMATED_REASON = "Estimated from registry financer"


def round_half_up(value):
    return int(math.floor(value + 0.5))


def _keyword_tokens(name):
    tokens = tokenize(name)
    return tokens + tuple(t[:-1] for t in tokens if len(t) > 3 and t.endswith('s'))


def decode_account(account: CreditAccountRecord, **kwargs) -> DecodedAccountRecord:
    return DecodedAccountRecord(
        **dict(account),
        account_type_desc=codes.account_type(account.account_type),
        account_status_desc=codes.account_status(account.account_status),
        institution_type_desc=codes.institution_type(account.institution_code),
        payment_history_desc=tuple(codes.payment_history(c) for c in account.payment_history),
        **kwargs
    )


class TradelineReconciler(object):
    ''' Classifies bureau tradelines and matches them against the financer
        named in the vehicle registry record. '''

    def __init__(self, amount_min=None, amount_max=None, keywords=None, loan_types=None):
        self._kb = TradelineKnowledgeBase({
            "vehicle_loan_types": tuple(loan_types or config.VEHICLE_LOAN_ACCOUNT_TYPES),
            "lender_keywords": tuple(keywords or config.LENDER_NAME_KEYWORDS),
            "amount_min": config.AMOUNT_BAND_MIN if amount_min is None else amount_min,
            "amount_max": config.AMOUNT_BAND_MAX if amount_max is None else amount_max,
        })

    @property
    def knowledge_base(self):
        return self._kb

    def classify(self, account: CreditAccountRecord, financer_name=None, candidate_id=None) -> DecodedAccountRecord:
        engine = KnowledgeEngine(self._kb)
        mem = engine.execute({
            "account_type": account.account_type,
            "lender_name": account.lender_name,
            "lender_tokens": _keyword_tokens(account.lender_name),
            "lender_core": core_name(account.lender_name),
            "financer_name": financer_name,
            "financer_core": core_name(financer_name),
            "sanctioned_amount": account.sanctioned_amount,
            "current_balance": account.current_balance,
        })

        if not mem.matches:
            return decode_account(account, candidate_id=candidate_id)

        _, classification, reason = min(mem.matches, key=lambda m: m[1].rank)
        return decode_account(
            account,
            candidate_id=candidate_id,
            classification=classification,
            match_reason=reason,
            matched_rules=tuple(m[0] for m in mem.matches),
        )

    def classify_all(self, accounts: Iterable[CreditAccountRecord], financer_name=None):
        return tuple(
            self.classify(acc, financer_name, candidate_id=f"T{idx:02d}")
            for idx, acc in enumerate(accounts, start=1)
        )

    def estimate(self, financer_name, vehicle_value) -> DecodedAccountRecord:
        value = vehicle_value or 0
        account = CreditAccountRecord(
            lender_name=financer_name or config.UNKNOWN_FINANCER,
            sanctioned_amount=round_half_up(value * config.ESTIMATED_SANCTION_RATIO),
            current_balance=round_half_up(value * config.ESTIMATED_BALANCE_RATIO),
            emi_amount=round_half_up(value * config.ESTIMATED_SANCTION_RATIO / config.ESTIMATED_TENURE_MONTHS),
        )
        return decode_account(
            account,
            candidate_id=ESTIMATED_CANDIDATE_ID,
            classification=Classification.LENDER_NAME_MATCH,
            match_reason=ESTIMATED_REASON,
            is_estimated=True,
        )

    def candidates(self, accounts, financer_name=None, vehicle_value=None):
        classified = self.classify_all(accounts, financer_name)
        found = tuple(
            acc for acc in classified
            if acc.classification != Classification.UNCLASSIFIED and acc.effective_amount > 0
        )

        if found:
            return found

        logger.warning('No vehicle loan tradeline found, estimating from registry financer [%s]', financer_name)
        return (self.estimate(financer_name, vehicle_value),)

    def reconcile(self, accounts, financer_name=None, vehicle_value=None) -> FinancerMatch:
        candidates = self.candidates(accounts, financer_name, vehicle_value)
        financer_core = core_name(financer_name)

        ranked = []
        for order, acc in enumerate(candidates):
            if acc.is_estimated:
                continue

            size = overlap_size(core_name(acc.lender_name), financer_core)
            if size:
                ranked.append((acc.classification.rank, -size, order, acc))

        if not ranked:
            return FinancerMatch(financer_name=financer_name, candidates=candidates)

        selected = min(ranked, key=lambda r: r[:3])[-1]
        return FinancerMatch(
            financer_name=financer_name,
            account=selected,
            has_match=True,
            rule=selected.classification.value,
            candidates=candidates,
        )


def select_candidate(match: FinancerMatch, candidate_id) -> DecodedAccountRecord:
    for acc in match.candidates:
        if acc.candidate_id == candidate_id:
            return acc

    raise InputValidationError("R00.400", f"Unknown candidate [{candidate_id}]", {
        "candidate_id": "Please select one of the listed accounts"
    })


def reconcile(accounts, financer_name=None, vehicle_value=None, **kwargs) -> FinancerMatch:
    return TradelineReconciler(**kwargs).reconcile(accounts, financer_name, vehicle_value)
