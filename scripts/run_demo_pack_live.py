import argparse
import json
from pathlib import Path
from typing import Any

import httpx

ROOT = Path(__file__).resolve().parents[1]
DEMO_DIR = ROOT / "docs" / "demo"

# file name -> (expected HTTP status, expected data.status, expected data.status_code)
DEMO_EXPECTATIONS: dict[str, tuple[int, str, str]] = {
    "01_debit_immediate.json": (200, "successful", "AP00"),
    "02_credit_past_date.json": (200, "successful", "AP00"),
    "03_debit_scheduled.json": (200, "pending", "AP02"),
    "04_insufficient_funds.json": (400, "failed", "AC01"),
    "05_currency_mismatch.json": (400, "failed", "CU01"),
    "06_malformed_instruction.json": (400, "failed", "PR01"),
    "07_invalid_leap_day.json": (400, "failed", "DT01"),
}


class DemoRunError(RuntimeError):
    pass


def _load_json(filename: str) -> dict[str, Any]:
    return json.loads((DEMO_DIR / filename).read_text(encoding="utf-8"))


def _assert(condition: bool, message: str) -> None:
    if not condition:
        raise DemoRunError(message)


def _run_scenario(
    client: httpx.Client,
    *,
    name: str,
    expected_http: int,
    payload_file: str,
    headers: dict[str, str] | None = None,
) -> dict[str, Any]:
    payload = _load_json(payload_file)
    response = client.post("/payment-instructions", json=payload, headers=headers)
    _assert(
        response.status_code == expected_http,
        f"{name}: expected HTTP {expected_http}, got {response.status_code}, body={response.text}",
    )
    return response.json()


def run_demo_pack(base_url: str) -> None:
    timeout = httpx.Timeout(30.0)
    with httpx.Client(base_url=base_url, timeout=timeout) as client:
        health = client.get("/health")
        _assert(health.status_code == 200, f"health: got HTTP {health.status_code}")

        for index, (file_name, expected) in enumerate(DEMO_EXPECTATIONS.items(), start=1):
            expected_http, expected_status, expected_code = expected
            body = _run_scenario(
                client,
                name=file_name,
                expected_http=expected_http,
                payload_file=file_name,
                headers={"X-Correlation-Id": f"live-demo-{index:02d}"},
            )
            data = body.get("data", {})
            _assert(
                data.get("status") == expected_status,
                f"{file_name}: unexpected status {data.get('status')}",
            )
            _assert(
                data.get("status_code") == expected_code,
                f"{file_name}: unexpected status_code {data.get('status_code')}",
            )

    print(f"Demo pack validation passed for {base_url}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Run live demo pack scenarios against API base URL"
    )
    parser.add_argument(
        "--base-url", required=True, help="API base URL, for example http://127.0.0.1:8001"
    )
    args = parser.parse_args()
    run_demo_pack(args.base_url)
