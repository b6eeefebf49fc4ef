from __future__ import annotations

from decimal import Decimal

from bt_extractor.parse import parse_statement


def _info(*lines: str):
    return parse_statement("\n".join(lines)).account_info


def test_owner_client_and_iban():
    info = _info(
        "ION POPESCU Client: 998877",
        "Extras de cont",
        "Cod IBAN: RO49AAAA1B31007593840000",
    )
    assert info.account_owner == "ION POPESCU"
    assert info.client_number == "998877"
    assert info.iban == "RO49AAAA1B31007593840000"


def test_first_match_wins_for_account_fields():
    info = _info(
        "ION POPESCU Client: 998877",
        "MARIA POPESCU Client: 111111",
        "Cod IBAN: RO49AAAA1B31007593840000",
        "Cod IBAN: RO09BTRL0000000000000001",
    )
    assert info.account_owner == "ION POPESCU"
    assert info.iban == "RO49AAAA1B31007593840000"


def test_value_is_read_from_the_adjacent_line_only():
    assert _info("Valuta", "EUR").currency == "EUR"
    # linea vacia en medio: no hay valor
    assert _info("Valuta", "", "EUR").currency is None
    # la etiqueta al final del texto no rompe nada
    assert _info("Valuta").currency is None


def test_header_footer_lines_never_feed_fields():
    info = _info(
        "BANCA TRANSILVANIA Client: 123",
        "BANCA TRANSILVANIA Cod IBAN: RO49AAAA1B31007593840000",
        "Valuta",
        "RON www.bancatransilvania.ro",
        "SOLD FINAL CONT",
        "2 / 4",
    )
    assert info.account_owner is None
    assert info.client_number is None
    assert info.iban is None
    assert info.currency is None
    assert info.final_balance is None


def test_final_balance_and_total_turnover():
    info = _info(
        "RULAJ TOTAL CONT",
        "  1,250.75      3,000.00",
        "SOLD FINAL CONT",
        "  12,345.67",
    )
    assert info.turnover.total.debit == Decimal("1250.75")
    assert info.turnover.total.credit == Decimal("3000.00")
    assert info.final_balance == Decimal("12345.67")


def test_total_turnover_needs_both_amounts():
    info = _info("RULAJ TOTAL CONT", "  1,250.75")
    assert info.turnover.total.debit is None
    assert info.turnover.total.credit is None


def test_daily_turnover_one_entry_per_marker():
    info = _info(
        "02/04/2025RULAJ ZI",
        "  45.50      2,500.00",
        "03/04/2025 RULAJ ZI",
        "sin montos",
    )
    daily = info.turnover.daily
    assert [d.date for d in daily] == ["2025-04-02", "2025-04-03"]
    assert daily[0].debit == Decimal("45.50")
    assert daily[0].credit == Decimal("2500.00")
    assert daily[1].debit is None and daily[1].credit is None


def test_blocked_amounts_only_inside_section():
    info = _info(
        "- 1.00 RON aferenta tranzactiei ANTES",
        "SUME BLOCATE",
        "- 120.00 RON aferenta tranzactiei POS EMAG",
        "otra linea",
        "- 1,015.99 RON aferenta tranzactiei   NETFLIX.COM   AMSTERDAM",
        "TOTAL DISPONIBIL",
        "- 9.00 RON aferenta tranzactiei DESPUES",
    )
    blocked = info.blocked_amounts
    assert [(b.amount, b.description) for b in blocked] == [
        (Decimal("120.00"), "POS EMAG"),
        (Decimal("1015.99"), "NETFLIX.COM AMSTERDAM"),
    ]


def test_missing_patterns_leave_defaults():
    info = _info("nada que ver", "otra cosa")
    assert info.account_owner is None
    assert info.iban is None
    assert info.currency is None
    assert info.final_balance is None
    assert info.turnover.total.debit is None
    assert info.turnover.daily == []
    assert info.blocked_amounts == []


def test_sample_account_info(sample_text):
    info = parse_statement(sample_text).account_info

    assert info.account_owner == "ION POPESCU"
    assert info.client_number == "998877"
    assert info.iban == "RO49AAAA1B31007593840000"
    assert info.currency == "RON"
    assert info.final_balance == Decimal("3450.00")
    assert info.turnover.total.debit == Decimal("50.00")
    assert info.turnover.total.credit == Decimal("2500.00")
    assert len(info.turnover.daily) == 2
    assert [b.description for b in info.blocked_amounts] == ["POS EMAG 03/04/2025", "NETFLIX.COM"]


def test_json_uses_camel_case_and_numbers(sample_text):
    payload = parse_statement(sample_text).model_dump(by_alias=True, mode="json")

    assert set(payload) == {"accountInfo", "transactions"}
    info = payload["accountInfo"]
    assert info["accountOwner"] == "ION POPESCU"
    assert info["clientNumber"] == "998877"
    assert info["finalBalance"] == 3450.0
    assert info["turnover"]["total"] == {"debit": 50.0, "credit": 2500.0}
    assert info["blockedAmounts"][0] == {"amount": 120.0, "description": "POS EMAG 03/04/2025"}
    assert payload["transactions"][1]["accountOwner"] == "ANGAJATOR SRL"
