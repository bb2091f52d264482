"""
End-to-end API tests — HTTP request → schema validation → calculator → response.

No server and no external services: httpx AsyncClient over ASGITransport.
Run from the repository root: pytest docsuite/tests/test_api.py -v
"""
from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from docsuite.main import app


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def client():
    """Async httpx client using ASGI transport — no live server needed."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ---------------------------------------------------------------------------
# System
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert "version" in body
    assert "timestamp" in body


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client: AsyncClient) -> None:
    response = await client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_wrong_method_uses_error_envelope(client: AsyncClient) -> None:
    response = await client.get("/api/gst/calculate")
    assert response.status_code == 405
    assert response.json()["error"]["code"] == "METHOD_NOT_ALLOWED"


@pytest.mark.asyncio
async def test_amount_in_words(client: AsyncClient) -> None:
    response = await client.get("/api/amount-in-words", params={"amount": 1234567})
    assert response.status_code == 200
    assert response.json()["words"] == (
        "Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven Rupees Only"
    )


@pytest.mark.asyncio
async def test_amount_in_words_negative_is_422(client: AsyncClient) -> None:
    response = await client.get("/api/amount-in-words", params={"amount": -5})
    assert response.status_code == 422
    assert response.json()["error"]["details"][0]["field"] == "amount"


# ---------------------------------------------------------------------------
# Income tax
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_income_tax_compare(client: AsyncClient) -> None:
    response = await client.post("/api/income-tax/compare", json={
        "gross_income": 1_000_000,
        "age_group": "below-60",
    })
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["recommendation"] == "new"
    assert abs(body["old_regime"]["total_tax"] - 106_600) <= 1
    assert abs(body["new_regime"]["total_tax"] - 54_600) <= 1
    assert body["savings"] == 52_000
    assert len(body["suggestions"]) == 3


@pytest.mark.asyncio
async def test_income_tax_compare_very_large_income(client: AsyncClient) -> None:
    response = await client.post("/api/income-tax/compare", json={"gross_income": 1e30})
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["old_regime"]["total_tax"] > 0
    assert body["new_regime"]["total_tax"] > 0


@pytest.mark.asyncio
async def test_income_tax_validation_lists_every_field(client: AsyncClient) -> None:
    response = await client.post("/api/income-tax/compare", json={
        "gross_income": -1,
        "age_group": "teenager",
        "deductions": {"section_80c": -5},
    })
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in error["details"]}
    assert {"gross_income", "age_group", "deductions.section_80c"} <= fields


@pytest.mark.asyncio
async def test_income_tax_rejects_unknown_fields(client: AsyncClient) -> None:
    response = await client.post("/api/income-tax/compare", json={
        "gross_income": 500_000, "pan": "ABCDE1234F",
    })
    assert response.status_code == 422


# ---------------------------------------------------------------------------
# GST / TDS penalties
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_gst_calculate(client: AsyncClient) -> None:
    response = await client.post("/api/gst/calculate", json={
        "return_type": "GSTR3B",
        "tax_amount": 50_000,
        "due_date": "2024-12-20",
        "filing_date": "2025-01-15",
    })
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["late_days"] == 26
    assert body["late_fee"] == 2_600
    assert body["risk_level"] == "critical"


@pytest.mark.asyncio
async def test_gst_filing_before_due_date_is_422(client: AsyncClient) -> None:
    response = await client.post("/api/gst/calculate", json={
        "return_type": "GSTR1",
        "tax_amount": 1_000,
        "due_date": "2024-12-20",
        "filing_date": "2024-12-01",
    })
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"] == [
        {"field": "filing_date", "issue": "Filing date cannot be before the due date"},
    ]


@pytest.mark.asyncio
async def test_gst_malformed_date_is_422(client: AsyncClient) -> None:
    response = await client.post("/api/gst/calculate", json={
        "return_type": "GSTR1",
        "tax_amount": 1_000,
        "due_date": "20/12/2024",
        "filing_date": "2024-12-21",
    })
    assert response.status_code == 422
    assert response.json()["error"]["details"][0]["field"] == "due_date"


@pytest.mark.asyncio
async def test_tds_calculate(client: AsyncClient) -> None:
    response = await client.post("/api/tds/calculate", json={
        "deduction_type": "salary",
        "tds_amount": 100_000,
        "due_date": "2024-10-31",
        "filing_date": "2024-11-15",
        "deducted_late": True,
        "deposited_late": True,
        "deposit_date": "2024-11-15",
    })
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["section"] == "192"
    assert body["total_penalty"] == 5_500


@pytest.mark.asyncio
async def test_tds_non_resident_section(client: AsyncClient) -> None:
    response = await client.post("/api/tds/calculate", json={
        "deduction_type": "non-resident",
        "tds_amount": 50_000,
        "due_date": "2024-10-31",
        "filing_date": "2024-11-10",
    })
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["section"] == "195"
    assert body["late_fee"] == 2_000


@pytest.mark.asyncio
async def test_tds_missing_deposit_date_is_422(client: AsyncClient) -> None:
    response = await client.post("/api/tds/calculate", json={
        "deduction_type": "rent",
        "tds_amount": 10_000,
        "due_date": "2024-10-31",
        "filing_date": "2024-11-15",
        "deposited_late": True,
    })
    assert response.status_code == 422
    assert response.json()["error"]["details"][0]["field"] == "deposit_date"


# ---------------------------------------------------------------------------
# Rent agreement
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_rent_agreement_calculate(client: AsyncClient) -> None:
    response = await client.post("/api/rent-agreement/calculate", json={
        "monthly_rent": 25_000,
        "security_deposit": 100_000,
        "agreement_start_date": "2024-01-01",
        "agreement_duration": 11,
        "state_code": "KA",
    })
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["stamp_duty_estimate"] == 2_750
    assert body["agreement_end_date"] == "2024-11-30"
    assert body["first_month_total"] == 125_000


@pytest.mark.asyncio
async def test_rent_agreement_states(client: AsyncClient) -> None:
    response = await client.get("/api/rent-agreement/states")
    assert response.status_code == 200
    states = response.json()
    assert len(states) == 36
    assert {"code": "MH", "name": "Maharashtra", "stamp_duty_percent": 0.25} in states


# ---------------------------------------------------------------------------
# Invoice
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_invoice_totals(client: AsyncClient) -> None:
    response = await client.post("/api/invoice/totals", json={
        "quantity": 10,
        "rate": 15_000,
        "seller_gstin": "29ABCDE1234F1Z5",
        "buyer_gstin": "29PQRST6789K1Z3",
        "cgst_rate": 9,
        "sgst_rate": 9,
        "igst_rate": 18,
    })
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["is_inter_state"] is False
    assert body["cgst_amount"] == body["sgst_amount"] == 13_500
    assert body["igst_amount"] == 0


@pytest.mark.asyncio
async def test_invoice_totals_very_large_amount(client: AsyncClient) -> None:
    response = await client.post("/api/invoice/totals", json={
        "quantity": 1e15,
        "rate": 1e15,
        "seller_gstin": "29ABCDE1234F1Z5",
        "buyer_gstin": "27PQRST6789K1Z3",
    })
    assert response.status_code == 200, response.text
    assert response.json()["is_inter_state"] is True


@pytest.mark.asyncio
async def test_invoice_inter_state_without_igst_rate_is_422(client: AsyncClient) -> None:
    response = await client.post("/api/invoice/totals", json={
        "quantity": 1,
        "rate": 1_000,
        "seller_gstin": "29ABCDE1234F1Z5",
        "buyer_gstin": "27PQRST6789K1Z3",
        "igst_rate": 0,
    })
    assert response.status_code == 422
    assert response.json()["error"]["details"][0]["field"] == "igst_rate"


@pytest.mark.asyncio
async def test_gstin_lookup(client: AsyncClient) -> None:
    response = await client.get("/api/invoice/gstin/27PQRST6789K1Z3")
    assert response.status_code == 200
    body = response.json()
    assert body["is_valid"] is True
    assert body["state_name"] == "Maharashtra"
    assert body["pan"] == "PQRST6789K"


# ---------------------------------------------------------------------------
# Salary slip / influencer contract
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_salary_slip_calculate(client: AsyncClient) -> None:
    response = await client.post("/api/salary-slip/calculate", json={
        "earnings": {"basic_salary": 30_000, "dearness": 5_000, "house_rent": 15_000},
        "deductions": {"income_tax": 2_000},
    })
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["provident_fund"] == 4_200
    assert body["net_salary"] == 43_800


@pytest.mark.asyncio
async def test_age_calculator(client: AsyncClient) -> None:
    response = await client.post("/api/age-calculator/calculate", json={
        "birth_date": "1990-05-15",
        "target_date": "2024-10-19",
    })
    assert response.status_code == 200, response.text
    body = response.json()
    assert (body["years"], body["months"], body["days"]) == (34, 5, 4)
    assert body["next_birthday"]["on_date"] == "2025-05-15"
    assert body["eligibility"]["years_to_retirement"] == 26


@pytest.mark.asyncio
async def test_age_calculator_future_birth_date_is_422(client: AsyncClient) -> None:
    response = await client.post("/api/age-calculator/calculate", json={
        "birth_date": "2030-01-01",
        "target_date": "2024-10-19",
    })
    assert response.status_code == 422
    assert response.json()["error"]["details"][0]["field"] == "birth_date"


@pytest.mark.asyncio
async def test_influencer_payment_breakdown(client: AsyncClient) -> None:
    response = await client.post("/api/influencer-contract/payment-breakdown", json={
        "total_amount": 25_001,
        "structure": "half-advance",
    })
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["advance_amount"] == 12_501
    assert body["remaining_amount"] == 12_500
    assert body["structure"] == "half-advance"
