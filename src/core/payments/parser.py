"""
FILE: src/core/payments/parser.py
Tokenizer and positional field mapper for payment instruction text.

Instruction grammar (0-indexed tokens):

    <credit|debit> <amount> <currency> _ _ <account@5> _ _ _ _ <account@10> _ <execute_by@12>

Credit and debit instructions share the grammar but swap which account token is the
source and which is the destination. That difference lives in PARSER_CONFIG, not in
parsing code.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional

from src.core.payments.models import ParsedInstruction

SUPPORTED_TYPES: Mapping[str, str] = MappingProxyType({"credit": "CREDIT", "debit": "DEBIT"})

PARSER_CONFIG: Mapping[str, Mapping[str, int]] = MappingProxyType(
    {
        "credit": MappingProxyType(
            {
                "amount": 1,
                "currency": 2,
                "credit_account": 5,
                "debit_account": 10,
                "execute_by": 12,
            }
        ),
        "debit": MappingProxyType(
            {
                "amount": 1,
                "currency": 2,
                "debit_account": 5,
                "credit_account": 10,
                "execute_by": 12,
            }
        ),
    }
)


def tokenize_instruction(instruction: str) -> List[str]:
    words = (word.strip() for word in instruction.strip().split(" "))
    return [word for word in words if word]


def _token_at(tokens: List[str], index: int) -> Optional[str]:
    return tokens[index] if index < len(tokens) else None


def map_instruction_fields(tokens: List[str]) -> ParsedInstruction:
    keyword = tokens[0].lower() if tokens else None
    if keyword not in SUPPORTED_TYPES:
        return ParsedInstruction()

    fields = {
        name: _token_at(tokens, index) for name, index in PARSER_CONFIG[keyword].items()
    }
    if fields["currency"]:
        fields["currency"] = fields["currency"].upper()
    return ParsedInstruction(type=SUPPORTED_TYPES[keyword], **fields)


def parse_instruction_text(instruction: str) -> ParsedInstruction:
    return map_instruction_fields(tokenize_instruction(instruction))
