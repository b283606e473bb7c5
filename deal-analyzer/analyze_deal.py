"""CLI client for the Flip Analyzer API — posts a deal and prints a terminal report.

Usage:
    python deal-analyzer/analyze_deal.py                      # example deal
    python deal-analyzer/analyze_deal.py my_deal.json --detailed
    python deal-analyzer/analyze_deal.py my_deal.json --loan-basis property_value

The JSON file holds any subset of the /api/v1/analyze request fields; the
rest take the API's defaults.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

import httpx


# ── Helpers ──────────────────────────────────────────────────────────────────

def _pct(v) -> str:
    """Format a percent figure (already x100) as a string."""
    return f"{float(v):.2f}%"


def _eur(v) -> str:
    return f"{float(v):,.2f} €"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def _line(label: str, value: str) -> None:
    print(f"  {label:<28}{value:>20}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_summary(data: dict) -> None:
    _header("Summary")
    _line("Total Project Cost:", _eur(data["total_project_cost"]))
    _line("Sale Profitability:", _pct(data["sale_profitability"]))
    _line("Profit Before Tax:", _eur(data["sale_profit_before_tax"]))
    _line("Net Profit After Tax:", _eur(data["net_profit_after_tax"]))
    _line("Return on Capital:", _pct(data["return_on_capital"]))
    _line("Gross Rental Yield:", _pct(data["gross_rental_yield"]))
    _line("Net Rental Yield:", _pct(data["net_rental_yield"]))
    if not data["participation_valid"]:
        print(f"\n  WARNING: investor participation totals {_pct(data['participation_total'])}, not 100%")


def print_financing(data: dict) -> None:
    _header("Financing")
    print(f"  Loan basis: {data['loan_basis']}")
    _line("Loan:", _eur(data["loan_amount"]))
    _line("Loan Costs:", _eur(data["loan_associated_costs"]))
    _line("Capital Provided:", _eur(data["total_capital_provided"]))


def print_investors(data: dict) -> None:
    breakdown = data.get("investor_breakdown", [])
    if not breakdown:
        return
    _header("Investors")
    print(
        f"  {'#':>2}  {'Share':>7}  {'Tax':<10}  {'Capital':>13}  "
        f"{'Gross':>13}  {'Tax Due':>12}  {'Net':>13}"
    )
    print(f"  {'--':>2}  {'-' * 7}  {'-' * 10}  {'-' * 13}  {'-' * 13}  {'-' * 12}  {'-' * 13}")
    for i, inv in enumerate(breakdown, start=1):
        print(
            f"  {i:>2}  {_pct(inv['participation']):>7}  {inv['tax_type']:<10}  "
            f"{_eur(inv['capital_provided']):>13}  {_eur(inv['gross_profit']):>13}  "
            f"{_eur(inv['tax_amount']):>12}  {_eur(inv['net_profit']):>13}"
        )


def print_itemized(data: dict) -> None:
    d = data["details"]

    _header("Purchase")
    _line("Property Value:", _eur(d["property_value"]))
    _line("Purchase Tax:", _eur(d["purchase_tax"]))
    _line("Notary:", _eur(d["notary_fees"]))
    _line("Land Registry:", _eur(d["registry_fees"]))
    _line("Gestoría:", _eur(d["agency_fees"]))
    _line("Real-Estate Agency:", _eur(d["brokerage_fees"]))
    if float(d["agency_fees_vat"]):
        _line("Fees VAT:", _eur(d["agency_fees_vat"]))
    _line("Total Purchase:", _eur(data["total_purchase_cost"]))

    _header("Renovation")
    _line("Renovation:", _eur(d["renovation_base_cost"]))
    _line("Furniture:", _eur(d["furniture_base_cost"]))
    _line("Renovation VAT:", _eur(d["renovation_vat"]))
    _line("  of which furniture:", _eur(d["furniture_vat"]))
    _line("Contingency:", _eur(d["contingency_amount"]))
    _line("General Expenses:", _eur(d["general_expenses"]))
    _line("Technical Fees:", _eur(d["technical_fees_base"]))
    _line("Technical Fees VAT:", _eur(d["technical_fees_vat"]))
    _line("ICIO:", _eur(d["icio_tax"]))
    _line("Supply Hookups:", _eur(d["supply_setup_cost"]))
    _line("Total Renovation:", _eur(data["total_renovation_cost"]))

    _header("Sale")
    _line("Plusvalía:", _eur(d["capital_gains_tax"]))
    _line("Energy Certificate:", _eur(d["cee_cost"]))
    _line("Sale Notary:", _eur(d["notary_sale_cost"]))
    _line("Total Sale Expenses:", _eur(data["total_sale_expenses"]))


def print_rental(data: dict) -> None:
    scenarios = data["rental_analysis"]
    _header("Rental Scenarios")
    print(f"  {'':<24}{'Whole unit':>18}{'By rooms':>18}")
    rows = [
        ("Monthly Rent", "monthly_rent", _eur),
        ("Gross Annual Rent", "gross_annual_rent", _eur),
        ("Annual Expenses", "annual_expenses", _eur),
        ("Net Annual Rent", "net_annual_rent", _eur),
        ("Gross Yield", "gross_rental_yield", _pct),
        ("Net Yield", "net_rental_yield", _pct),
    ]
    for label, key, fmt in rows:
        print(
            f"  {label:<24}{fmt(scenarios['traditional'][key]):>18}"
            f"{fmt(scenarios['by_rooms'][key]):>18}"
        )


def load_deal(path: str | None) -> dict:
    if path is None:
        return {}
    try:
        return json.loads(Path(path).read_text())
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: could not read deal file {path}: {e}", file=sys.stderr)
        sys.exit(1)


# ── Main ─────────────────────────────────────────────────────────────────────

async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Analyze a buy / renovate / sell-or-rent deal via the Flip Analyzer API"
    )
    parser.add_argument("deal", nargs="?", help="JSON file with deal fields (default: example deal)")
    parser.add_argument("--detailed", action="store_true", help="Print the itemized report")
    parser.add_argument(
        "--loan-basis",
        choices=["project_cost", "property_value"],
        default=None,
        help="Amount the financing percentage applies to (default: server setting)",
    )
    parser.add_argument(
        "--api",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )

    args = parser.parse_args()

    payload = load_deal(args.deal)
    if args.loan_basis:
        payload["loan_basis"] = args.loan_basis

    url = f"{args.api}/api/v1/analyze"

    async with httpx.AsyncClient(timeout=30) as client:
        try:
            resp = await client.post(url, json=payload)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn flipcalc.api.app:app --reload", file=sys.stderr)
            sys.exit(1)
        except httpx.TimeoutException:
            print("Error: Request timed out", file=sys.stderr)
            sys.exit(1)

        if resp.status_code != 200:
            print(f"Error: API returned {resp.status_code}", file=sys.stderr)
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            print(f"  {detail}", file=sys.stderr)
            sys.exit(1)

        data = resp.json()

    print_summary(data)
    print_financing(data)
    print_investors(data)
    if args.detailed:
        print_itemized(data)
        print_rental(data)
    print()


if __name__ == "__main__":
    asyncio.run(main())
