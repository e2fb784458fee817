"""
FILE: src/core/payments/settlement.py
Settlement decision, balance movement and result assembly.
"""

from datetime import date
from decimal import Decimal, Inexact, localcontext
from typing import Dict, List, Mapping, Optional, Sequence

from src.core.payments.messages import StatusCode, status_message
from src.core.payments.models import (
    Account,
    AccountSnapshot,
    ParsedInstruction,
    PaymentInstructionResult,
    SettlementStatus,
    ValidationFailure,
)

# Covers any bounded balance plus any accepted amount without rounding.
SETTLEMENT_PRECISION = 64

_STATUS_BY_CODE: Dict[StatusCode, SettlementStatus] = {
    StatusCode.TRANSACTION_SUCCESSFUL: "successful",
    StatusCode.TRANSACTION_PENDING: "pending",
}


def execution_date(execute_by: str) -> date:
    return date(int(execute_by[0:4]), int(execute_by[5:7]), int(execute_by[8:10]))


def resolve_execution_code(execute_by: Optional[str], business_date: date) -> StatusCode:
    """
    AP02 when execute_by falls strictly after the business date, AP00 otherwise.

    Comparison is by calendar day, so an execute_by equal to the business date executes
    immediately regardless of time of day.
    """
    if execute_by and execution_date(execute_by) > business_date:
        return StatusCode.TRANSACTION_PENDING
    return StatusCode.TRANSACTION_SUCCESSFUL


def settlement_status(code: StatusCode) -> SettlementStatus:
    return _STATUS_BY_CODE.get(code, "failed")


def involved_accounts(
    accounts: Sequence[Account],
    accounts_by_id: Mapping[str, Account],
    parsed: ParsedInstruction,
) -> List[Account]:
    """Accounts referenced by the instruction, in input order, one entry per id."""
    wanted = {parsed.debit_account, parsed.credit_account} - {None}
    return [
        account
        for account in accounts
        if account.id in wanted and accounts_by_id.get(account.id) is account
    ]


def capture_balances(accounts: Sequence[Account]) -> Dict[str, Decimal]:
    return {account.id: account.balance for account in accounts}


def apply_transfer(debit: Account, credit: Account, amount: Decimal) -> None:
    with localcontext() as ctx:
        ctx.prec = SETTLEMENT_PRECISION
        ctx.traps[Inexact] = True
        debit.balance -= amount
        credit.balance += amount


def _whole_amount(amount: Optional[Decimal]) -> Optional[int]:
    return None if amount is None else int(amount)


def assemble_result(
    parsed: ParsedInstruction,
    *,
    code: StatusCode,
    reason: str,
    amount: Optional[Decimal],
    accounts: Sequence[Account],
    balances_before: Mapping[str, Decimal],
) -> PaymentInstructionResult:
    return PaymentInstructionResult(
        type=parsed.type,
        amount=_whole_amount(amount),
        currency=parsed.currency,
        debit_account=parsed.debit_account,
        credit_account=parsed.credit_account,
        execute_by=parsed.execute_by,
        status=settlement_status(code),
        status_code=code.value,
        status_reason=reason,
        accounts=[
            AccountSnapshot(
                id=account.id,
                balance=account.balance,
                balance_before=balances_before[account.id],
                currency=account.currency.upper(),
            )
            for account in accounts
        ],
    )


def settle_instruction(
    parsed: ParsedInstruction,
    *,
    amount: Optional[Decimal],
    accounts: Sequence[Account],
    accounts_by_id: Mapping[str, Account],
    failure: Optional[ValidationFailure],
    business_date: date,
) -> PaymentInstructionResult:
    """
    Decide failed / pending / successful and move balances only for the latter.

    Before-balances are captured ahead of any movement. Failed and pending outcomes
    leave every account untouched.
    """
    involved = involved_accounts(accounts, accounts_by_id, parsed)
    balances_before = capture_balances(involved)

    if failure is not None:
        return assemble_result(
            parsed,
            code=failure.code,
            reason=failure.message,
            amount=amount,
            accounts=involved,
            balances_before=balances_before,
        )

    code = resolve_execution_code(parsed.execute_by, business_date)
    if code == StatusCode.TRANSACTION_SUCCESSFUL:
        apply_transfer(
            accounts_by_id[parsed.debit_account],
            accounts_by_id[parsed.credit_account],
            amount,
        )

    return assemble_result(
        parsed,
        code=code,
        reason=status_message(code),
        amount=amount,
        accounts=involved,
        balances_before=balances_before,
    )
