from fidelis import codes
from fidelis.datadef import Tier
from fidelis.helper import ClassRegistry, datetime_to_str

from . import config

YES_NO = {True: "Yes", False: "No"}


def format_amount(value):
    ''' Indian digit grouping: 1234567 => ₹12,34,567 '''
    if value is None:
        return "N/A"

    digits = str(int(value))
    sign = "-" if digits.startswith("-") else ""
    digits = digits.lstrip("-")

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]

    if head:
        groups.insert(0, head)

    return f"{sign}{config.CURRENCY_PREFIX}{','.join(groups + [tail])}"


def _value(record, name, formatter=None):
    value = getattr(record, name)
    text = "N/A" if value is None else (formatter(value) if formatter else str(value))
    tier = record.tier_of(name)
    if tier is None or tier == Tier.LIVE:
        return text

    return f"{text} ({tier.value})"


def _rate(product):
    if product.roi_min is None and product.roi_max is None:
        return "N/A"

    return f"{product.roi_min}% - {product.roi_max}%"


class SummaryRenderer(object):
    ''' Presentation strategy for a SummaryDocument. '''

    def render(self, doc) -> str:
        return "\n".join(self.lines(doc)) + "\n"

    def lines(self, doc):
        raise NotImplementedError('SummaryRenderer.lines')


SummaryRendererRegistry = ClassRegistry(SummaryRenderer)


@SummaryRendererRegistry.register('full')
class FullTextRenderer(SummaryRenderer):
    def section(self, title):
        return ["", f"=== {title} ==="]

    def lines(self, doc):
        applicant, vehicle = doc.applicant, doc.vehicle

        yield config.REPORT_TITLE
        yield ""
        yield f"Application ID: {doc.application_id or 'N/A'}"
        yield f"Generated: {datetime_to_str(doc.generated_at, '%Y-%m-%d %H:%M:%S %Z')}"

        yield from self.section("APPLICANT")
        yield f"Name: {_value(applicant, 'legal_name')}"
        yield f"Mobile: {applicant.mobile or 'N/A'}"
        yield f"PAN: {applicant.pan or 'N/A'}"
        yield f"Email: {applicant.email or 'N/A'}"
        yield f"Date of Birth: {_value(applicant, 'date_of_birth')}"
        yield f"Gender: {_value(applicant, 'gender_code', codes.gender)}"
        yield f"Employment: {codes.employment_status(applicant.employment_type)}"
        yield f"Monthly Income: {format_amount(applicant.monthly_income)}"

        yield from self.section("VEHICLE INFORMATION")
        yield f"{vehicle.make or ''} {vehicle.model or ''}".strip() or "N/A"
        yield f"Registration Number: {vehicle.registration_number or 'N/A'}"
        yield f"Registration Date: {_value(vehicle, 'registration_date')}"
        yield f"Year: {_value(vehicle, 'year')}"
        yield f"Color / Fuel: {_value(vehicle, 'color')} / {_value(vehicle, 'fuel_type')}"
        yield f"Owner: {_value(vehicle, 'owner_name')}"
        yield f"City: {_value(vehicle, 'city')}"
        yield f"Market Value: {_value(vehicle, 'market_value', format_amount)}"

        yield from self.section("CREDIT SCORE ANALYSIS")
        tier = applicant.tier_of('credit_score')
        suffix = "" if tier in (None, Tier.LIVE) else f" ({tier.value})"
        yield f"Credit Score: {applicant.credit_score or 'N/A'}/{config.MAX_SCORE}{suffix}"
        yield f"Rating: {doc.score_category}"

        yield from self.financer_lines(doc)

        summary = doc.account_summary
        yield from self.section("ACCOUNT SUMMARY")
        yield f"Secured Loans: {summary.secured_count} (Total: {format_amount(summary.secured_total)})"
        yield f"Unsecured Loans: {summary.unsecured_count} (Total: {format_amount(summary.unsecured_total)})"
        yield f"Auto Loans: {summary.auto_count} (Total: {format_amount(summary.auto_total)})"

        account = doc.selected_account
        if account is not None:
            yield from self.section("SELECTED LOAN DETAILS")
            yield f"Lender: {account.lender_name or 'N/A'}" + (" (estimated)" if account.is_estimated else "")
            yield f"Account Type: {account.account_type_desc}"
            yield f"Sanctioned Amount: {format_amount(account.sanctioned_amount)}"
            yield f"Principal Outstanding: {format_amount(account.current_balance)}"
            yield f"Overdue Amount: {format_amount(account.amount_past_due)}"
            yield f"Monthly EMI: {format_amount(account.emi_amount)}"
            yield f"Account Open Date: {account.open_date or 'N/A'}"
            yield f"Payment History: {''.join(account.payment_history) or 'N/A'}"
            yield f"Classification: {account.classification.value}"

        yield from self.section("CREDIT OVERVIEW")
        yield f"Outstanding Balance: {format_amount(summary.outstanding_balance)}"
        yield f"Active Accounts: {summary.active_accounts}"
        yield f"Monthly EMI: {format_amount(summary.monthly_emi)}"
        yield f"Highest Sanction: {format_amount(summary.highest_sanction)}"
        yield f"Overdue Accounts: {summary.overdue_accounts}"
        yield f"DPD Count: {summary.dpd_count}"

        yield from self.section("CREDIT ENQUIRY HISTORY")
        for w in doc.enquiry_summary.windows:
            yield f"Last {w.days} Days: Total {w.total} (Auto Loans: {w.auto_loans}, Others: {w.others})"

        yield from self.product_lines(doc)

        status = doc.verification
        yield from self.section("VERIFICATION STATUS")
        yield f"PAN Verified: {YES_NO[status.pan_verified]}"
        yield f"Credit Verified: {YES_NO[status.credit_verified]}"
        yield f"Vehicle Verified: {YES_NO[status.vehicle_verified]}"

        if doc.data_source:
            yield from self.section("DATA SOURCE")
            yield from (f"- {note}" for note in doc.data_source)

    def financer_lines(self, doc):
        match = doc.financer_match
        yield from self.section("VEHICLE FINANCER INFORMATION")
        if match is None:
            yield "No financer information"
            return

        yield f"RC Document Financer: {match.financer_name or 'N/A'}"
        yield f"Credit Bureau Match: {YES_NO[match.has_match]}"
        if match.has_match:
            yield f"Matched Lender: {match.account.lender_name} ({match.account.match_reason})"
        else:
            yield f"Candidate Accounts: {len(match.candidates)}"

    def product_lines(self, doc):
        products = doc.eligible_products
        yield from self.section(f"ELIGIBLE PRODUCTS ({len(products)})")
        if not products:
            yield "No eligible products found based on your profile."
            return

        for p in products:
            yield f"{p.lender_name} {p.product_name}"
            yield f"  Interest Rate: {_rate(p)}"
            yield f"  Max LTV: {p.max_ltv:g}%"
            yield f"  Max Loan Amount: {format_amount(p.max_loan_amount)}"


@SummaryRendererRegistry.register('compact')
class CompactTextRenderer(SummaryRenderer):
    def lines(self, doc):
        applicant, vehicle = doc.applicant, doc.vehicle
        match = doc.financer_match

        yield f"{config.REPORT_TITLE} #{doc.application_id or 'N/A'}"
        yield f"Applicant: {_value(applicant, 'legal_name')} | PAN {applicant.pan or 'N/A'}"
        yield f"Score: {_value(applicant, 'credit_score')} ({doc.score_category})"
        yield (f"Vehicle: {vehicle.make or ''} {vehicle.model or ''} {vehicle.year or ''}".rstrip()
               + f" | Value {_value(vehicle, 'market_value', format_amount)}")

        if match is not None:
            matched = match.account.lender_name if match.has_match else "none"
            yield f"Financer: {match.financer_name or 'N/A'} | Bureau match: {matched}"

        products = doc.eligible_products
        if not products:
            yield "Products: no eligible products"
            return

        yield f"Products: {len(products)} eligible"
        for p in products[:config.COMPACT_PRODUCT_LIMIT]:
            yield f"  {p.lender_name} {p.product_name} up to {format_amount(p.max_loan_amount)}"


def render_summary(doc, style="full") -> str:
    return SummaryRendererRegistry.construct(style).render(doc)
