"""Deal editor — every input on one form, re-analyzed on each change.

Features:
  - Investor count selector with even participation split
  - Participation total with a warning when it is not 100%
  - Summary / itemized report toggle
  - Market price lookup for the property's address
"""

from dataclasses import replace
from decimal import Decimal, InvalidOperation

import dash
from dash import html, dcc, callback, Input, Output, State, ALL, no_update
import plotly.graph_objects as go
import httpx

from flipcalc.config import settings
from flipcalc.engine.analyzer import analyze
from flipcalc.engine.editing import (
    apply_update,
    participation_is_valid,
    rebalance,
    reset_deal,
    total_participation,
)
from flipcalc.engine.report import investment_growth, summary_highlights
from flipcalc.models.deal import (
    DealInput,
    Investor,
    PurchaseTaxType,
    RenovationVatType,
    RentalModel,
    TaxSubjectType,
)
from flipcalc.models.updates import (
    InvestorUpdate,
    PurchaseUpdate,
    RenovationUpdate,
    RentalUpdate,
    SaleUpdate,
)

dash.register_page(__name__, path="/", name="Analyze")

MAX_INVESTORS = 6

# (DealInput field, label, step)
PURCHASE_FIELDS = [
    ("property_value", "Property Value (€)", 1000),
    ("notary_fees", "Notary (€)", 50),
    ("registry_fees", "Land Registry (€)", 50),
    ("agency_fees", "Gestoría (€)", 50),
    ("brokerage_fees", "Real-Estate Agency (€)", 100),
]

RENOVATION_FIELDS = [
    ("area_sqm", "Area (m²)", 1),
    ("renovation_cost_per_sqm", "Renovation (€/m²)", 10),
    ("furniture_cost_per_sqm", "Furniture (€/m²)", 5),
    ("contingency_rate", "Contingency (%)", 0.5),
    ("general_expenses", "General Expenses (€)", 100),
    ("technical_fees", "Technical Fees, net (€)", 100),
    ("icio_rate", "ICIO (%)", 0.1),
]

SALE_FIELDS = [
    ("sale_price", "Sale Price (€)", 1000),
    ("capital_gains_tax_rate", "Plusvalía (% of sale)", 0.1),
    ("cee_cost", "Energy Certificate (€)", 10),
    ("notary_sale_cost", "Sale Notary (€)", 50),
]

RENTAL_FIELDS = [
    ("monthly_rent", "Monthly Rent (€)", 10),
    ("number_of_rooms", "Rooms", 1),
    ("rent_per_room", "Rent per Room (€)", 10),
    ("ibi_fee", "IBI, annual (€)", 10),
    ("insurance_fee", "Insurance, annual (€)", 10),
]

PURCHASE_TAX_OPTIONS = [
    {"label": "ITP 10%", "value": PurchaseTaxType.ITP_10.value},
    {"label": "ITP 6%", "value": PurchaseTaxType.ITP_6.value},
    {"label": "IVA 21% (new build)", "value": PurchaseTaxType.IVA_21.value},
]

RENOVATION_VAT_OPTIONS = [
    {"label": "10%", "value": RenovationVatType.REDUCED.value},
    {"label": "21%", "value": RenovationVatType.STANDARD.value},
    {"label": "No VAT", "value": RenovationVatType.NONE.value},
]

RENTAL_MODEL_OPTIONS = [
    {"label": "Whole unit", "value": RentalModel.TRADITIONAL.value},
    {"label": "By rooms", "value": RentalModel.ROOMS.value},
]

TAX_TYPE_OPTIONS = [
    {"label": "Individual (IRPF)", "value": TaxSubjectType.INDIVIDUAL.value},
    {"label": "Company (IS 25%)", "value": TaxSubjectType.COMPANY.value},
]

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

ROW_STYLE = {"display": "flex", "gap": "1rem", "flexWrap": "wrap", "marginBottom": "1rem"}

SECTION_STYLE = {
    "backgroundColor": "#f5f5f5",
    "padding": "1rem",
    "borderRadius": "8px",
    "marginBottom": "1.5rem",
}

GOOD_COLOR = "#2ecc71"
BAD_COLOR = "#e94560"

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

_DEFAULT_DEAL = reset_deal()


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "140px"})


def _number_inputs(field_specs):
    return [
        _field(label, dcc.Input(
            id=f"deal-{name}",
            type="number",
            value=float(getattr(_DEFAULT_DEAL, name)),
            step=step,
            debounce=True,
            style=FIELD_STYLE,
        ))
        for name, label, step in field_specs
    ]


def _dropdown(component_id, options, value):
    return dcc.Dropdown(id=component_id, options=options, value=value, clearable=False)


layout = html.Div([
    html.H2("Deal Analysis"),

    dcc.Store(id="investors-store", storage_type="memory"),

    # Market lookup
    html.Div([
        html.H4("Market Prices", style={"marginTop": "0"}),
        html.Div([
            dcc.Input(
                id="market-address",
                type="text",
                placeholder="Calle Mayor 1, Madrid",
                style={"flex": "1", "padding": "0.75rem", "fontSize": "1rem"},
            ),
            html.Button("Search", id="market-btn", n_clicks=0, style=BTN_STYLE),
        ], style={"display": "flex", "gap": "0.5rem"}),
        dcc.Loading(html.Div(id="market-container", style={"marginTop": "1rem"})),
    ], style=SECTION_STYLE),

    # Purchase
    html.Div([
        html.H4("Purchase", style={"marginTop": "0"}),
        html.Div(_number_inputs(PURCHASE_FIELDS) + [
            _field("Purchase Tax", _dropdown(
                "deal-purchase_tax_type", PURCHASE_TAX_OPTIONS, _DEFAULT_DEAL.purchase_tax_type.value,
            )),
        ], style=ROW_STYLE),
        dcc.Checklist(
            id="deal-supplies",
            options=[
                {"label": " Electricity hookup", "value": "electricity"},
                {"label": " Water hookup", "value": "water"},
            ],
            value=[],
            inline=True,
            inputStyle={"marginLeft": "1rem"},
        ),
    ], style=SECTION_STYLE),

    # Renovation
    html.Div([
        html.H4("Renovation", style={"marginTop": "0"}),
        html.Div(_number_inputs(RENOVATION_FIELDS) + [
            _field("Renovation VAT", _dropdown(
                "deal-renovation_vat_type", RENOVATION_VAT_OPTIONS, _DEFAULT_DEAL.renovation_vat_type.value,
            )),
        ], style=ROW_STYLE),
    ], style=SECTION_STYLE),

    # Sale
    html.Div([
        html.H4("Sale", style={"marginTop": "0"}),
        html.Div(_number_inputs(SALE_FIELDS), style=ROW_STYLE),
    ], style=SECTION_STYLE),

    # Rental
    html.Div([
        html.H4("Rental", style={"marginTop": "0"}),
        html.Div(_number_inputs(RENTAL_FIELDS) + [
            _field("Rental Model", _dropdown(
                "deal-rental_type", RENTAL_MODEL_OPTIONS, _DEFAULT_DEAL.rental_type.value,
            )),
        ], style=ROW_STYLE),
        dcc.Checklist(
            id="deal-rental-extras",
            options=[
                {"label": " Management fee (10% + VAT)", "value": "management"},
                {"label": " Cleaning (30 €/month + VAT)", "value": "cleaning"},
            ],
            value=[],
            inline=True,
            inputStyle={"marginLeft": "1rem"},
        ),
    ], style=SECTION_STYLE),

    # Investors
    html.Div([
        html.H4("Investors", style={"marginTop": "0"}),
        html.Div([
            _field("Number of Investors", _dropdown(
                "investor-count",
                [{"label": str(n), "value": n} for n in range(1, MAX_INVESTORS + 1)],
                len(_DEFAULT_DEAL.investors),
            )),
        ], style={**ROW_STYLE, "maxWidth": "240px"}),
        html.Div(id="investor-rows"),
        html.Div(id="participation-total", style={"marginTop": "0.5rem"}),
    ], style=SECTION_STYLE),

    html.Div([
        dcc.RadioItems(
            id="report-view",
            options=[
                {"label": " Summary", "value": "summary"},
                {"label": " Itemized", "value": "itemized"},
            ],
            value="summary",
            inline=True,
            inputStyle={"marginLeft": "1rem"},
        ),
        html.Button("Update", id="update-btn", n_clicks=0, style=BTN_STYLE),
    ], style={"display": "flex", "justifyContent": "space-between", "alignItems": "center",
              "marginBottom": "1.5rem"}),

    dcc.Loading(html.Div(id="results-container")),
])


# ---------------------------------------------------------------------------
# Form conversion
# ---------------------------------------------------------------------------


def _dec(value) -> Decimal:
    """Form value → Decimal. Blank or unparseable input counts as 0."""
    if value is None or value == "":
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")


def _investor_to_store(inv: Investor) -> dict:
    return {
        "id": inv.id,
        "participation": str(inv.participation),
        "tax_type": TaxSubjectType(inv.tax_type).value,
        "financing_percentage": str(inv.financing_percentage),
        "loan_interest_rate": str(inv.loan_interest_rate),
        "associated_costs_rate": str(inv.associated_costs_rate),
    }


def _investor_from_store(data: dict) -> Investor:
    return Investor(
        id=data["id"],
        participation=Decimal(data["participation"]),
        tax_type=TaxSubjectType(data["tax_type"]),
        financing_percentage=Decimal(data["financing_percentage"]),
        loan_interest_rate=Decimal(data["loan_interest_rate"]),
        associated_costs_rate=Decimal(data["associated_costs_rate"]),
    )


def _edited_investors(stored, rows) -> tuple[Investor, ...]:
    """Stored investors with the values currently typed in their rows applied.

    `rows` holds one list per investor column, in row order. Rows that have
    not been rendered yet leave the stored values untouched.
    """
    investors = tuple(_investor_from_store(d) for d in stored) if stored else _DEFAULT_DEAL.investors

    participations, tax_types, financing, rates, associated = rows
    if len(participations) != len(investors):
        return investors

    deal = replace(_DEFAULT_DEAL, investors=investors)
    for inv, part, tax, fin, rate, assoc in zip(investors, participations, tax_types, financing, rates, associated):
        deal = apply_update(deal, InvestorUpdate(
            investor_id=inv.id,
            participation=_dec(part),
            tax_type=TaxSubjectType(tax) if tax else None,
            financing_percentage=_dec(fin),
            loan_interest_rate=_dec(rate),
            associated_costs_rate=_dec(assoc),
        ))
    return deal.investors


def _deal_from_form(values: dict, supplies, extras, investors) -> DealInput:
    purchase = PurchaseUpdate(
        **{name: _dec(values[name]) for name, _, _ in PURCHASE_FIELDS},
        purchase_tax_type=PurchaseTaxType(values["purchase_tax_type"]),
        setup_electricity="electricity" in (supplies or []),
        setup_water="water" in (supplies or []),
    )
    renovation = RenovationUpdate(
        **{name: _dec(values[name]) for name, _, _ in RENOVATION_FIELDS},
        renovation_vat_type=RenovationVatType(values["renovation_vat_type"]),
    )
    sale = SaleUpdate(**{name: _dec(values[name]) for name, _, _ in SALE_FIELDS})

    rental_values = {name: _dec(values[name]) for name, _, _ in RENTAL_FIELDS}
    rental_values["number_of_rooms"] = int(rental_values["number_of_rooms"])
    rental = RentalUpdate(
        **rental_values,
        rental_type=RentalModel(values["rental_type"]),
        include_management_fee="management" in (extras or []),
        include_cleaning_fee="cleaning" in (extras or []),
    )

    deal = replace(reset_deal(), investors=investors)
    for update in (purchase, renovation, sale, rental):
        deal = apply_update(deal, update)
    return deal


def _investor_row(position, inv: Investor):
    def _inv_input(kind, value, step):
        return dcc.Input(
            id={"type": kind, "index": inv.id},
            type="number",
            value=float(value),
            step=step,
            debounce=True,
            style=FIELD_STYLE,
        )

    return html.Div([
        html.Div(f"Investor {position}", style={"fontWeight": "bold", "minWidth": "90px", "alignSelf": "center"}),
        _field("Participation (%)", _inv_input("inv-participation", inv.participation, 0.01)),
        _field("Tax", dcc.Dropdown(
            id={"type": "inv-tax-type", "index": inv.id},
            options=TAX_TYPE_OPTIONS,
            value=TaxSubjectType(inv.tax_type).value,
            clearable=False,
        )),
        _field("Financing (%)", _inv_input("inv-financing", inv.financing_percentage, 1)),
        _field("Loan Rate (%)", _inv_input("inv-rate", inv.loan_interest_rate, 0.1)),
        _field("Loan Costs (%)", _inv_input("inv-associated", inv.associated_costs_rate, 0.1)),
    ], style=ROW_STYLE)


_INVESTOR_ROW_STATES = (
    State({"type": "inv-participation", "index": ALL}, "value"),
    State({"type": "inv-tax-type", "index": ALL}, "value"),
    State({"type": "inv-financing", "index": ALL}, "value"),
    State({"type": "inv-rate", "index": ALL}, "value"),
    State({"type": "inv-associated", "index": ALL}, "value"),
)

_INVESTOR_ROW_INPUTS = tuple(Input(s.component_id, s.component_property) for s in _INVESTOR_ROW_STATES)

_DEAL_FIELD_NAMES = [
    name for name, _, _ in PURCHASE_FIELDS + RENOVATION_FIELDS + SALE_FIELDS + RENTAL_FIELDS
] + ["purchase_tax_type", "renovation_vat_type", "rental_type"]


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


@callback(
    output=dict(
        stored=Output("investors-store", "data"),
        rows=Output("investor-rows", "children"),
    ),
    inputs=dict(count=Input("investor-count", "value")),
    state=dict(stored=State("investors-store", "data"), rows=_INVESTOR_ROW_STATES),
)
def resize_investors(count, stored, rows):
    investors = _edited_investors(stored, rows)
    resized = rebalance(investors, int(count or 1))
    return dict(
        stored=[_investor_to_store(inv) for inv in resized],
        rows=[_investor_row(i + 1, inv) for i, inv in enumerate(resized)],
    )


@callback(
    output=dict(
        results=Output("results-container", "children"),
        participation=Output("participation-total", "children"),
    ),
    inputs=dict(
        values={name: Input(f"deal-{name}", "value") for name in _DEAL_FIELD_NAMES},
        supplies=Input("deal-supplies", "value"),
        extras=Input("deal-rental-extras", "value"),
        rows=_INVESTOR_ROW_INPUTS,
        view=Input("report-view", "value"),
        update_clicks=Input("update-btn", "n_clicks"),
    ),
    state=dict(stored=State("investors-store", "data")),
)
def run_analysis(values, supplies, extras, rows, view, update_clicks, stored):
    if not stored:
        return dict(results=no_update, participation=no_update)

    try:
        investors = _edited_investors(stored, rows)
        deal = _deal_from_form(values, supplies, extras, investors)
        result = analyze(deal, settings.conventions)
    except (ValueError, ArithmeticError) as e:
        return dict(
            results=html.Div(f"Error: {e}", style={"color": "red", "padding": "1rem"}),
            participation=no_update,
        )

    if view == "itemized":
        report = _build_itemized(result)
    else:
        report = _build_summary(deal, result)
    return dict(results=report, participation=_participation_status(investors))


@callback(
    Output("market-container", "children"),
    Input("market-btn", "n_clicks"),
    State("market-address", "value"),
    prevent_initial_call=True,
)
def lookup_market(n_clicks, address):
    if not address:
        return no_update
    try:
        resp = httpx.get(
            f"{settings.api_base_url}/api/v1/market/lookup",
            params={"address": address},
            timeout=settings.market_timeout_seconds + 5,
        )
        resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPStatusError as e:
        return html.Div(f"Error: {_error_detail(e)}", style={"color": "red"})
    except httpx.HTTPError as e:
        return html.Div(f"Error: {e}", style={"color": "red"})

    return _build_market(data)


def _error_detail(error: httpx.HTTPStatusError) -> str:
    try:
        return error.response.json()["detail"]
    except (ValueError, KeyError, TypeError):
        return str(error)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def _eur(value) -> str:
    return f"{float(value):,.2f} €"


def _pct(value) -> str:
    return f"{float(value):.2f}%"


def _metric_card(label, value, color=None):
    return html.Div([
        html.Div(value, style={"fontSize": "1.5rem", "fontWeight": "bold", "color": color or "inherit"}),
        html.Div(label, style={"fontSize": "0.85rem", "color": "#666"}),
    ], style={
        "backgroundColor": "white",
        "border": "1px solid #ddd",
        "borderRadius": "8px",
        "padding": "1rem 1.5rem",
        "minWidth": "150px",
        "textAlign": "center",
    })


def _table(rows, header=None):
    children = []
    if header:
        children.append(html.Thead(html.Tr([html.Th(h, style={"textAlign": "left"}) for h in header])))
    children.append(html.Tbody([
        html.Tr([html.Td(cell) for cell in row], style={"borderBottom": "1px solid #eee"})
        for row in rows
    ]))
    return html.Table(children, style={"width": "100%", "borderCollapse": "collapse", "fontSize": "0.9rem"})


def _participation_status(investors):
    total = total_participation(investors)
    if participation_is_valid(investors):
        return html.Span(f"Total participation: {_pct(total)}", style={"color": "#666"})
    return html.Span(
        f"Total participation is {_pct(total)}. It must add up to 100%.",
        style={"color": BAD_COLOR, "fontWeight": "bold"},
    )


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


def _growth_figure(growth):
    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=["Investment"],
        x=[float(growth.cost)],
        orientation="h",
        name=f"Project cost {_eur(growth.cost)}",
        marker_color="#1a1a2e",
        text=[_pct(growth.cost_pct)],
    ))
    fig.add_trace(go.Bar(
        y=["Investment"],
        x=[float(max(Decimal("0"), growth.profit))],
        orientation="h",
        name=f"Profit {_eur(growth.profit)}",
        marker_color=GOOD_COLOR,
        text=[_pct(growth.profit_pct)],
    ))
    fig.update_layout(
        title=f"Sale price {_eur(growth.sale_price)}",
        barmode="stack",
        height=220,
        xaxis_title="€",
        margin=dict(l=40, r=20, t=50, b=40),
    )
    return fig


def _investor_table(result):
    return _table(
        [
            [
                f"Investor {i + 1}",
                _pct(b.participation),
                TaxSubjectType(b.tax_type).value,
                _eur(b.cost_share),
                _eur(b.loan_amount),
                _eur(b.capital_provided),
                _eur(b.gross_profit),
                _eur(b.tax_amount),
                _eur(b.net_profit),
            ]
            for i, b in enumerate(result.investor_breakdown)
        ],
        header=["", "Share", "Tax", "Cost", "Loan", "Capital", "Gross Profit", "Tax", "Net Profit"],
    )


def _build_summary(deal, result):
    highlights = summary_highlights(result)
    growth = investment_growth(result.total_project_cost, deal.sale_price, result.sale_profit_before_tax)

    cards = html.Div([
        _metric_card("Total Project Cost", _eur(result.total_project_cost)),
        _metric_card(
            "Sale Profitability",
            _pct(result.sale_profitability),
            GOOD_COLOR if highlights.sale_profitability_good else BAD_COLOR,
        ),
        _metric_card("Profit Before Tax", _eur(result.sale_profit_before_tax)),
        _metric_card("Net Profit After Tax", _eur(result.net_profit_after_tax)),
        _metric_card("Return on Capital", _pct(result.return_on_capital)),
        _metric_card("Gross Rental Yield", _pct(result.gross_rental_yield)),
        _metric_card(
            "Net Rental Yield",
            _pct(result.net_rental_yield),
            GOOD_COLOR if highlights.rental_yield_good else BAD_COLOR,
        ),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "2rem", "flexWrap": "wrap"})

    financing = html.Div([
        html.P(f"Loan: {_eur(result.loan_amount)} · Loan costs: {_eur(result.loan_associated_costs)} · "
               f"Capital provided: {_eur(result.total_capital_provided)}"),
    ], style=SECTION_STYLE)

    return html.Div([
        cards,
        dcc.Graph(figure=_growth_figure(growth)),
        html.H3("Financing", style={"marginTop": "2rem"}),
        financing,
        html.H3("Investors"),
        _investor_table(result),
    ])


def _rental_rows(analysis):
    return [
        ["Monthly rent", _eur(analysis.monthly_rent)],
        ["Management fee (annual)", _eur(analysis.management_fee)],
        ["Cleaning (annual)", _eur(analysis.cleaning_fee)],
        ["Gross annual rent", _eur(analysis.gross_annual_rent)],
        ["Annual expenses", _eur(analysis.annual_expenses)],
        ["Net annual rent", _eur(analysis.net_annual_rent)],
        ["Gross yield", _pct(analysis.gross_rental_yield)],
        ["Net yield", _pct(analysis.net_rental_yield)],
    ]


def _build_itemized(result):
    d = result.details

    purchase_rows = [
        ["Property value", _eur(d.property_value)],
        ["Purchase tax", _eur(d.purchase_tax)],
        ["Notary", _eur(d.notary_fees)],
        ["Land registry", _eur(d.registry_fees)],
        ["Gestoría", _eur(d.agency_fees)],
        ["Real-estate agency", _eur(d.brokerage_fees)],
    ]
    if d.agency_fees_vat:
        purchase_rows.append(["Fees VAT", _eur(d.agency_fees_vat)])
    purchase_rows.append(["Total purchase", _eur(result.total_purchase_cost)])

    renovation_rows = [
        ["Renovation", _eur(d.renovation_base_cost)],
        ["Furniture", _eur(d.furniture_base_cost)],
        ["Renovation VAT", _eur(d.renovation_vat)],
        ["  of which furniture", _eur(d.furniture_vat)],
        ["Contingency", _eur(d.contingency_amount)],
        ["General expenses", _eur(d.general_expenses)],
        ["Technical fees", _eur(d.technical_fees_base)],
        ["Technical fees VAT", _eur(d.technical_fees_vat)],
        ["ICIO", _eur(d.icio_tax)],
        ["Supply hookups", _eur(d.supply_setup_cost)],
        ["Total renovation", _eur(result.total_renovation_cost)],
    ]

    sale_rows = [
        ["Plusvalía", _eur(d.capital_gains_tax)],
        ["Energy certificate", _eur(d.cee_cost)],
        ["Sale notary", _eur(d.notary_sale_cost)],
        ["Total sale expenses", _eur(result.total_sale_expenses)],
        ["Profit before tax", _eur(result.sale_profit_before_tax)],
        ["Net profit after tax", _eur(result.net_profit_after_tax)],
        ["Sale profitability", _pct(result.sale_profitability)],
    ]

    financing_rows = [
        ["Total project cost", _eur(result.total_project_cost)],
        ["Loan", _eur(result.loan_amount)],
        ["Loan costs", _eur(result.loan_associated_costs)],
        ["Capital provided", _eur(result.total_capital_provided)],
        ["Return on capital", _pct(result.return_on_capital)],
    ]

    scenarios = result.rental_analysis
    return html.Div([
        html.Div([
            html.Div([html.H3("Purchase"), _table(purchase_rows)], style={"flex": "1"}),
            html.Div([html.H3("Renovation"), _table(renovation_rows)], style={"flex": "1"}),
        ], style={"display": "flex", "gap": "2rem"}),
        html.Div([
            html.Div([html.H3("Sale"), _table(sale_rows)], style={"flex": "1"}),
            html.Div([html.H3("Financing"), _table(financing_rows)], style={"flex": "1"}),
        ], style={"display": "flex", "gap": "2rem"}),
        html.Div([
            html.Div([html.H3("Rental: whole unit"), _table(_rental_rows(scenarios.traditional))],
                     style={"flex": "1"}),
            html.Div([html.H3("Rental: by rooms"), _table(_rental_rows(scenarios.by_rooms))],
                     style={"flex": "1"}),
        ], style={"display": "flex", "gap": "2rem"}),
        html.H3("Investors"),
        _investor_table(result),
    ])


def _build_market(data):
    listings = data.get("similar_listings") or []
    rows = [
        [
            html.A(item["description"] or "Listing", href=item["url"], target="_blank") if item.get("url")
            else item["description"],
            _eur(item["price"]),
            f"{float(item['surface']):,.0f} m²",
        ]
        for item in listings
    ]

    children = [
        _metric_card("Average €/m²", _eur(data["average_price_per_sqm"])),
    ]
    if data.get("map_url"):
        children.append(html.A("View on map", href=data["map_url"], target="_blank",
                               style={"display": "block", "margin": "1rem 0"}))
    if rows:
        children.append(_table(rows, header=["Listing", "Price", "Surface"]))
    return html.Div(children)
