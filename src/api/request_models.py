from typing import List

from pydantic import BaseModel, Field

from src.core.payments.models import Account, PaymentInstructionResult


class PaymentInstructionRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "example": {
                "accounts": [
                    {"id": "acc-001", "balance": 1000, "currency": "USD"},
                    {"id": "acc-002", "balance": 0, "currency": "USD"},
                ],
                "instruction": (
                    "DEBIT 500 USD FROM ACCOUNT acc-001 FOR CREDIT TO ACCOUNT acc-002"
                ),
            }
        }
    }

    accounts: List[Account] = Field(
        description="Account snapshot the instruction is evaluated against, in caller order."
    )
    instruction: str = Field(
        description="Single-line payment instruction text.",
        examples=["CREDIT 200 GBP TO ACCOUNT acc-002 FOR DEBIT FROM ACCOUNT acc-001"],
    )


class PaymentInstructionResponse(BaseModel):
    message: str = Field(description="Transport-level summary of the outcome.")
    data: PaymentInstructionResult = Field(description="Settlement result for the instruction.")
