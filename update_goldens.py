import json
import os
from datetime import date
from decimal import Decimal

from src.core.payments import Account, process_payment_instruction

OUTPUT_DIR = "tests/golden_data"
BUSINESS_DATE = date(2026, 1, 15)


def _accounts(*rows):
    return [Account(id=row[0], balance=Decimal(row[1]), currency=row[2]) for row in rows]


def save_golden(name: str, instruction: str, accounts):
    """Evaluates the scenario and saves inputs plus expected output to a JSON file."""
    inputs = {
        "accounts": [json.loads(account.model_dump_json()) for account in accounts],
        "instruction": instruction,
    }
    result = process_payment_instruction(instruction, accounts, business_date=BUSINESS_DATE)

    data = {
        "scenario_name": name,
        "business_date": BUSINESS_DATE.isoformat(),
        "inputs": inputs,
        "expected_outputs": json.loads(result.model_dump_json()),
    }

    filepath = os.path.join(OUTPUT_DIR, f"{name}.json")
    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    print(f"Generated {filepath}")


def generate_scenarios():
    os.makedirs(OUTPUT_DIR, exist_ok=True)

    save_golden(
        "scenario_01_debit_executes_now",
        "DEBIT 300 USD FROM ACCOUNT ACC1 FOR CREDIT TO ACCOUNT ACC2",
        _accounts(("ACC1", "1000", "USD"), ("ACC2", "250", "usd")),
    )
    save_golden(
        "scenario_02_credit_due_today",
        "CREDIT 75 NGN TO ACCOUNT ng-2 FOR DEBIT FROM ACCOUNT ng-1 ON 2026-01-15",
        _accounts(("ng-1", "100", "NGN"), ("ng-2", "5", "NGN"), ("ng-3", "1", "NGN")),
    )
    save_golden(
        "scenario_03_debit_scheduled",
        "DEBIT 40 GHS FROM ACCOUNT gh.1 FOR CREDIT TO ACCOUNT gh.2 ON 2026-01-16",
        _accounts(("gh.2", "0", "GHS"), ("gh.1", "40", "GHS")),
    )
    save_golden(
        "scenario_04_credit_overdraws_debit",
        "CREDIT 500 GBP TO ACCOUNT g2 FOR DEBIT FROM ACCOUNT g1",
        _accounts(("g1", "100", "GBP"), ("g2", "0", "GBP")),
    )
    save_golden(
        "scenario_05_fractional_amount",
        "DEBIT 10.5 USD FROM ACCOUNT ACC1 FOR CREDIT TO ACCOUNT ACC2",
        _accounts(("ACC1", "1000", "USD"), ("ACC2", "0", "USD")),
    )
    save_golden(
        "scenario_06_unknown_account",
        "DEBIT 10 USD FROM ACCOUNT ACC1 FOR CREDIT TO ACCOUNT ACC9",
        _accounts(("ACC1", "1000", "USD"), ("ACC2", "0", "USD")),
    )


if __name__ == "__main__":
    generate_scenarios()
