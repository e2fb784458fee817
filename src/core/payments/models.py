"""
FILE: src/core/payments/models.py
Contracts for payment instruction evaluation.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from src.core.payments.messages import StatusCode

InstructionType = Literal["CREDIT", "DEBIT"]
SettlementStatus = Literal["successful", "pending", "failed"]

BALANCE_MAX_DIGITS = 48
BALANCE_DECIMAL_PLACES = 18


class Account(BaseModel):
    model_config = {
        "json_schema_extra": {"example": {"id": "acc-001", "balance": 1000, "currency": "USD"}}
    }

    id: str = Field(
        description="Account identifier referenced by instructions.", examples=["acc-001"]
    )
    balance: Decimal = Field(
        description="Signed account balance before the instruction is applied.",
        examples=["1000"],
        max_digits=BALANCE_MAX_DIGITS,
        decimal_places=BALANCE_DECIMAL_PLACES,
    )
    currency: str = Field(
        description="Three-letter account currency code (case-insensitive).",
        examples=["USD"],
    )


@dataclass(frozen=True)
class ParsedInstruction:
    type: Optional[InstructionType] = None
    amount: Optional[str] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None


@dataclass(frozen=True)
class ValidationFailure:
    code: StatusCode
    message: str


class AccountSnapshot(BaseModel):
    id: str = Field(description="Account identifier.", examples=["acc-001"])
    balance: Decimal = Field(
        description=(
            "Balance after the instruction (equal to balance_before unless executed). "
            "Serialized as an exact decimal string."
        ),
        examples=["500"],
    )
    balance_before: Decimal = Field(
        description=(
            "Balance captured before any settlement movement, as an exact decimal string."
        ),
        examples=["1000"],
    )
    currency: str = Field(description="Upper-cased account currency.", examples=["USD"])


class PaymentInstructionResult(BaseModel):
    model_config = {
        "json_schema_extra": {
            "example": {
                "type": "DEBIT",
                "amount": 500,
                "currency": "USD",
                "debit_account": "acc-001",
                "credit_account": "acc-002",
                "execute_by": None,
                "status": "successful",
                "status_code": "AP00",
                "status_reason": "Transaction executed successfully",
                "accounts": [
                    {
                        "id": "acc-001",
                        "balance": "500",
                        "balance_before": "1000",
                        "currency": "USD",
                    },
                    {"id": "acc-002", "balance": "500", "balance_before": "0", "currency": "USD"},
                ],
            }
        }
    }

    type: Optional[InstructionType] = Field(
        default=None, description="Normalized instruction keyword."
    )
    amount: Optional[int] = Field(
        default=None, description="Whole-unit transfer amount when it could be parsed."
    )
    currency: Optional[str] = Field(default=None, description="Upper-cased instruction currency.")
    debit_account: Optional[str] = Field(default=None, description="Source account identifier.")
    credit_account: Optional[str] = Field(
        default=None, description="Destination account identifier."
    )
    execute_by: Optional[str] = Field(
        default=None, description="Requested execution date (YYYY-MM-DD), verbatim."
    )
    status: SettlementStatus = Field(description="Settlement outcome for the instruction.")
    status_code: str = Field(
        description="Stable outcome code (category letters plus index).", examples=["AP00"]
    )
    status_reason: str = Field(description="Human-readable outcome text for status_code.")
    accounts: List[AccountSnapshot] = Field(
        default_factory=list,
        description="Involved accounts in input order with before/after balances.",
    )
