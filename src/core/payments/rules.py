"""
FILE: src/core/payments/rules.py
Ordered business-rule chain for parsed payment instructions.

Rules run in declaration order and the first failure wins, so the order of
VALIDATION_RULES defines precedence between simultaneous failures.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable, Mapping, Optional, Tuple

from src.core.payments.messages import StatusCode, status_message
from src.core.payments.models import Account, ParsedInstruction, ValidationFailure
from src.core.payments.validators import is_valid_account_id, is_valid_execution_date

SUPPORTED_CURRENCIES = frozenset({"USD", "NGN", "GBP", "GHS"})

# Amounts of 10**MAX_AMOUNT_DIGITS or more are rejected before any arithmetic.
MAX_AMOUNT_DIGITS = 30

_NUMERIC_TOKEN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


@dataclass(frozen=True)
class RuleContext:
    parsed: ParsedInstruction
    accounts_by_id: Mapping[str, Account]

    @property
    def debit(self) -> Optional[Account]:
        return _lookup(self.accounts_by_id, self.parsed.debit_account)

    @property
    def credit(self) -> Optional[Account]:
        return _lookup(self.accounts_by_id, self.parsed.credit_account)


Rule = Callable[[RuleContext], Optional[ValidationFailure]]


def _lookup(
    accounts_by_id: Mapping[str, Account], account_id: Optional[str]
) -> Optional[Account]:
    if account_id is None:
        return None
    return accounts_by_id.get(account_id)


def _fail(code: StatusCode) -> ValidationFailure:
    return ValidationFailure(code=code, message=status_message(code))


def parse_amount(raw: Optional[str]) -> Optional[Decimal]:
    """
    Numeric value of an amount token, or None when it is not a finite number.

    Magnitudes at or above 10**MAX_AMOUNT_DIGITS also give None so exponent forms
    such as "1e3000000" never reach settlement.
    """
    if not raw or not _NUMERIC_TOKEN.fullmatch(raw):
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation:
        return None
    if not value.is_finite() or value.adjusted() >= MAX_AMOUNT_DIGITS:
        return None
    return value


def whole_amount(raw: Optional[str]) -> Optional[Decimal]:
    """Amount as written when it is a whole number without a decimal point, else None."""
    value = parse_amount(raw)
    if value is None or "." in raw or value != value.to_integral_value():
        return None
    return value


def check_type_present(ctx: RuleContext) -> Optional[ValidationFailure]:
    if ctx.parsed.type is None:
        return _fail(StatusCode.MALFORMED_INSTRUCTION)
    return None


def check_amount_numeric(ctx: RuleContext) -> Optional[ValidationFailure]:
    if parse_amount(ctx.parsed.amount) is None:
        return _fail(StatusCode.INVALID_AMOUNT)
    return None


def check_amount_has_no_fraction(ctx: RuleContext) -> Optional[ValidationFailure]:
    if "." in (ctx.parsed.amount or ""):
        return _fail(StatusCode.INVALID_AMOUNT)
    return None


def check_amount_positive(ctx: RuleContext) -> Optional[ValidationFailure]:
    amount = parse_amount(ctx.parsed.amount)
    if amount is None or amount <= 0:
        return _fail(StatusCode.INVALID_AMOUNT)
    # exponent notation can still produce fractions, e.g. "5e-1"
    if amount != amount.to_integral_value():
        return _fail(StatusCode.INVALID_AMOUNT)
    return None


def check_currency_supported(ctx: RuleContext) -> Optional[ValidationFailure]:
    currency = ctx.parsed.currency
    if not currency or currency.upper() not in SUPPORTED_CURRENCIES:
        return _fail(StatusCode.UNSUPPORTED_CURRENCY)
    return None


def check_account_id_format(ctx: RuleContext) -> Optional[ValidationFailure]:
    if not is_valid_account_id(ctx.parsed.debit_account) and not is_valid_account_id(
        ctx.parsed.credit_account
    ):
        return _fail(StatusCode.INVALID_ACCOUNT_ID)
    return None


def check_accounts_exist(ctx: RuleContext) -> Optional[ValidationFailure]:
    if ctx.debit is None or ctx.credit is None:
        return _fail(StatusCode.ACCOUNT_NOT_FOUND)
    return None


def check_distinct_accounts(ctx: RuleContext) -> Optional[ValidationFailure]:
    if ctx.parsed.debit_account == ctx.parsed.credit_account:
        return _fail(StatusCode.SAME_ACCOUNT)
    return None


def check_account_currencies_match(ctx: RuleContext) -> Optional[ValidationFailure]:
    if ctx.debit.currency.upper() != ctx.credit.currency.upper():
        return _fail(StatusCode.CURRENCY_MISMATCH)
    return None


def check_type_keyword(ctx: RuleContext) -> Optional[ValidationFailure]:
    # Unreachable through map_instruction_fields; guards hand-built instructions.
    if (ctx.parsed.type or "").lower() not in {"credit", "debit"}:
        return _fail(StatusCode.MISSING_KEYWORD)
    return None


def check_sufficient_funds(ctx: RuleContext) -> Optional[ValidationFailure]:
    if ctx.parsed.type == "DEBIT" and ctx.debit.balance < parse_amount(ctx.parsed.amount):
        return _fail(StatusCode.INSUFFICIENT_FUNDS)
    return None


def check_execute_by_format(ctx: RuleContext) -> Optional[ValidationFailure]:
    if ctx.parsed.execute_by and not is_valid_execution_date(ctx.parsed.execute_by):
        return _fail(StatusCode.INVALID_DATE_FORMAT)
    return None


VALIDATION_RULES: Tuple[Rule, ...] = (
    check_type_present,
    check_amount_numeric,
    check_amount_has_no_fraction,
    check_amount_positive,
    check_currency_supported,
    check_account_id_format,
    check_accounts_exist,
    check_distinct_accounts,
    check_account_currencies_match,
    check_type_keyword,
    check_sufficient_funds,
    check_execute_by_format,
)


def validate_instruction(
    parsed: ParsedInstruction,
    accounts_by_id: Mapping[str, Account],
    rules: Tuple[Rule, ...] = VALIDATION_RULES,
) -> Optional[ValidationFailure]:
    ctx = RuleContext(parsed=parsed, accounts_by_id=accounts_by_id)
    for rule in rules:
        failure = rule(ctx)
        if failure is not None:
            return failure
    return None
