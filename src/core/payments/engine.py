"""
FILE: src/core/payments/engine.py
Entry point for evaluating one payment instruction against an account snapshot.
"""

import logging
from datetime import date, datetime, timezone
from typing import Dict, Optional, Sequence

from src.core.payments.models import Account, PaymentInstructionResult
from src.core.payments.parser import parse_instruction_text
from src.core.payments.rules import validate_instruction, whole_amount
from src.core.payments.settlement import settle_instruction

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def build_accounts_lookup(accounts: Sequence[Account]) -> Dict[str, Account]:
    accounts_by_id: Dict[str, Account] = {}
    for account in accounts:
        if account.id in accounts_by_id:
            logger.warning("Duplicate account id in snapshot; last entry wins. id=%s", account.id)
        accounts_by_id[account.id] = account
    return accounts_by_id


def process_payment_instruction(
    instruction: str,
    accounts: Sequence[Account],
    *,
    business_date: Optional[date] = None,
) -> PaymentInstructionResult:
    """
    Parse, validate and settle a single instruction.

    Business rule failures come back as a result with status "failed". Accounts are
    mutated in place only when the instruction executes immediately. Any unexpected
    error is logged and re-raised to the caller.
    """
    try:
        accounts_by_id = build_accounts_lookup(accounts)
        parsed = parse_instruction_text(instruction)
        failure = validate_instruction(parsed, accounts_by_id)
        result = settle_instruction(
            parsed,
            amount=whole_amount(parsed.amount),
            accounts=accounts,
            accounts_by_id=accounts_by_id,
            failure=failure,
            business_date=business_date or utc_today(),
        )
    except Exception:
        logger.exception("payment-instruction-error")
        raise

    logger.info(
        "Payment instruction evaluated. type=%s status=%s code=%s",
        result.type,
        result.status,
        result.status_code,
    )
    return result
