"""Payment instruction parsing, validation and settlement package."""

from src.core.payments.engine import build_accounts_lookup, process_payment_instruction
from src.core.payments.messages import StatusCode, status_message
from src.core.payments.models import (
    Account,
    AccountSnapshot,
    ParsedInstruction,
    PaymentInstructionResult,
    ValidationFailure,
)
from src.core.payments.parser import parse_instruction_text, tokenize_instruction
from src.core.payments.rules import VALIDATION_RULES, validate_instruction

__all__ = [
    "Account",
    "AccountSnapshot",
    "ParsedInstruction",
    "PaymentInstructionResult",
    "StatusCode",
    "VALIDATION_RULES",
    "ValidationFailure",
    "build_accounts_lookup",
    "parse_instruction_text",
    "process_payment_instruction",
    "status_message",
    "tokenize_instruction",
    "validate_instruction",
]
