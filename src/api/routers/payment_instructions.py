import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.api.request_models import PaymentInstructionRequest, PaymentInstructionResponse
from src.api.routers.payment_instructions_config import business_date_override
from src.api.routers.runtime_utils import assert_feature_enabled
from src.core.payments import process_payment_instruction
from src.core.payments.messages import FAILED_GENERIC_MESSAGE

router = APIRouter(tags=["Payment Instructions"])
logger = logging.getLogger(__name__)

EXECUTED_MESSAGE = "Transaction executed successfully"

SUCCESSFUL_EXAMPLE = {
    "summary": "Executed immediately",
    "value": {
        "message": EXECUTED_MESSAGE,
        "data": {"status": "successful", "status_code": "AP00"},
    },
}
PENDING_EXAMPLE = {
    "summary": "Scheduled for a future execute_by date",
    "value": {
        "message": EXECUTED_MESSAGE,
        "data": {"status": "pending", "status_code": "AP02"},
    },
}
FAILED_EXAMPLE = {
    "summary": "Rejected by business validation",
    "value": {
        "message": "Insufficient funds in debit account",
        "data": {"status": "failed", "status_code": "AC01"},
    },
}


@router.post(
    "/payment-instructions",
    response_model=PaymentInstructionResponse,
    status_code=status.HTTP_200_OK,
    summary="Process a Payment Instruction",
    description=(
        "Parses one free-text instruction, validates it against the supplied accounts and "
        "settles it when its execute_by date is today or earlier.\n\n"
        "Outcomes `successful` and `pending` return 200; `failed` returns 400 with the "
        "status code and reason in the body.\n\n"
        "Account `balance` and `balance_before` in the response are exact decimal strings "
        "(for example `\"1000\"`); request balances may be numbers or decimal strings."
    ),
    responses={
        200: {
            "description": "Instruction executed or scheduled.",
            "content": {
                "application/json": {
                    "examples": {"successful": SUCCESSFUL_EXAMPLE, "pending": PENDING_EXAMPLE}
                }
            },
        },
        400: {
            "description": "Instruction rejected; see data.status_code.",
            "content": {"application/json": {"examples": {"failed": FAILED_EXAMPLE}}},
        },
        404: {"description": "Payment instruction processing is disabled."},
        422: {"description": "Request body does not match the accounts/instruction schema."},
    },
)
def process_payment_instruction_endpoint(request: PaymentInstructionRequest) -> JSONResponse:
    assert_feature_enabled(
        name="PAYMENT_INSTRUCTIONS_ENABLED",
        default=True,
        detail="PAYMENT_INSTRUCTIONS_DISABLED",
    )
    result = process_payment_instruction(
        request.instruction,
        request.accounts,
        business_date=business_date_override(),
    )

    if result.status in {"successful", "pending"}:
        http_status = status.HTTP_200_OK
        message = EXECUTED_MESSAGE
    else:
        http_status = status.HTTP_400_BAD_REQUEST
        message = result.status_reason or FAILED_GENERIC_MESSAGE
        logger.info("Payment instruction rejected. code=%s", result.status_code)

    body = PaymentInstructionResponse(message=message, data=result)
    return JSONResponse(status_code=http_status, content=body.model_dump(mode="json"))
