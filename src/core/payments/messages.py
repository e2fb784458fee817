from enum import Enum


class StatusCode(str, Enum):
    MALFORMED_INSTRUCTION = "PR01"
    INVALID_AMOUNT = "AM01"
    UNSUPPORTED_CURRENCY = "CU02"
    INVALID_ACCOUNT_ID = "AC04"
    ACCOUNT_NOT_FOUND = "AC03"
    SAME_ACCOUNT = "AC02"
    CURRENCY_MISMATCH = "CU01"
    MISSING_KEYWORD = "SY03"
    INSUFFICIENT_FUNDS = "AC01"
    INVALID_DATE_FORMAT = "DT01"
    TRANSACTION_SUCCESSFUL = "AP00"
    TRANSACTION_PENDING = "AP02"


STATUS_MESSAGES = {
    StatusCode.MALFORMED_INSTRUCTION: "Malformed instruction: unable to parse keywords",
    StatusCode.INVALID_AMOUNT: "Amount must be a positive integer",
    StatusCode.UNSUPPORTED_CURRENCY: (
        "Unsupported currency. Only NGN, USD, GBP, and GHS are supported"
    ),
    StatusCode.INVALID_ACCOUNT_ID: "Invalid account ID format",
    StatusCode.ACCOUNT_NOT_FOUND: "Account not found",
    StatusCode.SAME_ACCOUNT: "Debit and credit accounts cannot be the same",
    StatusCode.CURRENCY_MISMATCH: "Account currency mismatch",
    StatusCode.MISSING_KEYWORD: "Missing required keyword",
    StatusCode.INSUFFICIENT_FUNDS: "Insufficient funds in debit account",
    StatusCode.INVALID_DATE_FORMAT: "Invalid date format",
    StatusCode.TRANSACTION_SUCCESSFUL: "Transaction executed successfully",
    StatusCode.TRANSACTION_PENDING: "Transaction scheduled for future execution",
}

FAILED_GENERIC_MESSAGE = "Failed to process instruction"


def status_message(code: StatusCode) -> str:
    return STATUS_MESSAGES.get(code, FAILED_GENERIC_MESSAGE)
