''' Code Table Resolver.

    Decodes bureau-coded values into their canonical descriptions. Unknown
    codes come back unchanged so that downstream consumers can still trace
    the raw value; a missing code renders as "N/A".
'''
from enum import Enum

from pyrsistent import pmap

from . import tables

NOT_AVAILABLE = "N/A"


class CodeCategory(Enum):
    ACCOUNT_TYPE = "account-type"
    ACCOUNT_STATUS = "account-status"
    ACCOUNT_HOLDER_TYPE = "account-holder-type"
    ADDRESS_INDICATOR = "address-indicator"
    ASSET_CLASSIFICATION = "asset-classification"
    EMPLOYMENT_STATUS = "employment-status"
    ENQUIRY_REASON = "enquiry-reason"
    FINANCE_PURPOSE = "finance-purpose"
    GENDER = "gender"
    INSTITUTION_TYPE = "institution-type"
    MARITAL_STATUS = "marital-status"
    PAYMENT_HISTORY = "payment-history"
    STATE = "state"
    TERMS_FREQUENCY = "terms-frequency"


CODE_TABLES = pmap({
    CodeCategory.ACCOUNT_TYPE: pmap(tables.ACCOUNT_TYPE),
    CodeCategory.ACCOUNT_STATUS: pmap(tables.ACCOUNT_STATUS),
    CodeCategory.ACCOUNT_HOLDER_TYPE: pmap(tables.ACCOUNT_HOLDER_TYPE),
    CodeCategory.ADDRESS_INDICATOR: pmap(tables.ADDRESS_INDICATOR),
    CodeCategory.ASSET_CLASSIFICATION: pmap(tables.ASSET_CLASSIFICATION),
    CodeCategory.EMPLOYMENT_STATUS: pmap(tables.EMPLOYMENT_STATUS),
    CodeCategory.ENQUIRY_REASON: pmap(tables.ENQUIRY_REASON),
    CodeCategory.FINANCE_PURPOSE: pmap(tables.FINANCE_PURPOSE),
    CodeCategory.GENDER: pmap(tables.GENDER),
    CodeCategory.INSTITUTION_TYPE: pmap(tables.INSTITUTION_TYPE),
    CodeCategory.MARITAL_STATUS: pmap(tables.MARITAL_STATUS),
    CodeCategory.PAYMENT_HISTORY: pmap(tables.PAYMENT_HISTORY),
    CodeCategory.STATE: pmap(tables.STATE),
    CodeCategory.TERMS_FREQUENCY: pmap(tables.TERMS_FREQUENCY),
})


def _category(category):
    if isinstance(category, CodeCategory):
        return category

    try:
        return CodeCategory(category)
    except ValueError:
        return None


def describe(category, code):
    ''' Return the canonical description of `code`, or the code itself.

        Never raises: an unknown category or code yields the code as a
        string, and a missing code yields "N/A". A mapping to an empty
        description also yields the code.
    '''
    if code is None:
        return NOT_AVAILABLE

    key = str(code).strip()
    if not key:
        return NOT_AVAILABLE

    table = CODE_TABLES.get(_category(category))
    if table is None:
        return key

    return table.get(key) or key


def lookup(category, code):
    ''' Strict variant of `describe`: None when there is no mapping. '''
    table = CODE_TABLES.get(_category(category))
    if table is None or code is None:
        return None

    return table.get(str(code).strip()) or None


def categories():
    return tuple(c.value for c in CodeCategory)


def account_type(code):
    return describe(CodeCategory.ACCOUNT_TYPE, code)


def account_status(code):
    return describe(CodeCategory.ACCOUNT_STATUS, code)


def account_holder_type(code):
    return describe(CodeCategory.ACCOUNT_HOLDER_TYPE, code)


def address_indicator(code):
    return describe(CodeCategory.ADDRESS_INDICATOR, code)


def asset_classification(code):
    return describe(CodeCategory.ASSET_CLASSIFICATION, code)


def employment_status(code):
    return describe(CodeCategory.EMPLOYMENT_STATUS, code)


def enquiry_reason(code):
    return describe(CodeCategory.ENQUIRY_REASON, code)


def finance_purpose(code):
    return describe(CodeCategory.FINANCE_PURPOSE, code)


def gender(code):
    return describe(CodeCategory.GENDER, code)


def institution_type(code):
    ''' Institution type is keyed by the two letter prefix of the
        subscriber identification number (e.g. PUB0001 => PU => BANK). '''
    if code is None:
        return NOT_AVAILABLE

    key = str(code).strip()
    return describe(CodeCategory.INSTITUTION_TYPE, key[:2].upper() if len(key) > 2 else key)


def marital_status(code):
    return describe(CodeCategory.MARITAL_STATUS, code)


def payment_history(code):
    return describe(CodeCategory.PAYMENT_HISTORY, code)


def state(code):
    ''' Bureau state codes are zero padded to two digits. '''
    if code is not None and str(code).strip().isdigit():
        code = str(code).strip().zfill(2)

    return describe(CodeCategory.STATE, code)


def terms_frequency(code):
    return describe(CodeCategory.TERMS_FREQUENCY, code)
