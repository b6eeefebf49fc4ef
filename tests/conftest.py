from __future__ import annotations

import pytest


# Texto tal como sale de la extraccion: las lineas de monto conservan la
# indentacion (2 espacios = columna debito, 6 o mas = columna credito).
SAMPLE_LINES = [
    "BANCA TRANSILVANIA S.A.",
    "EXTRAS CONT Nr. 4 din 30/04/2025",
    "ION POPESCU Client: 998877",
    "Cod IBAN: RO49AAAA1B31007593840000",
    "Valuta",
    "RON",
    "01/04/2025 - 30/04/2025",
    "CONT",
    "SOLD ANTERIOR",
    "  1,000.00",
    "02/04/2025",
    "Plata la POS non-BT cu card VISA",
    "POS 01/04/2025 MEGA IMAGE",
    "  45.50",
    "REF:POS123",
    "Incasare OP - canal electronic",
    "      2,500.00",
    "; ANGAJATOR SRL ;",
    "Salariu   aprilie",
    "REF:OP987",
    "02/04/2025RULAJ ZI",
    "  45.50      2,500.00",
    "SOLD FINAL ZI",
    "  3,454.50",
    "www.bancatransilvania.ro",
    "1 / 2",
    "",
    "03/04/2025",
    "Comision pachet",
    "Plata la POS",
    "  4.50",
    "03/04/2025RULAJ ZI",
    "  4.50      0.00",
    "SOLD FINAL ZI",
    "  3,450.00",
    "SUME BLOCATE",
    "- 120.00 RON aferenta tranzactiei POS EMAG 03/04/2025",
    "- 15.99 RON aferenta tranzactiei   NETFLIX.COM",
    "TOTAL DISPONIBIL",
    "RULAJ TOTAL CONT",
    "  50.00      2,500.00",
    "SOLD FINAL CONT",
    "  3,450.00",
    "2 / 2",
]

SAMPLE_TEXT = "\n".join(SAMPLE_LINES)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


# Filas del PDF generado: (texto, debito, credito). Los montos van
# alineados a la derecha en dos columnas, como en el extracto real.
DESC_X = 50
DEBIT_X = 360
CREDIT_X = 460

PDF_PAGES = [
    [
        ("BANCA TRANSILVANIA S.A.", None, None),
        ("ION POPESCU Client: 998877", None, None),
        ("Cod IBAN: RO49AAAA1B31007593840000", None, None),
        ("Valuta", None, None),
        ("RON", None, None),
        ("CONT", None, None),
        ("SOLD ANTERIOR", None, None),
        ("02/04/2025", None, None),
        ("Plata la POS non-BT cu card VISA", "45.50", None),
        ("REF:POS123", None, None),
        ("Incasare OP - canal electronic", None, "2,500.00"),
        ("02/04/2025 RULAJ ZI", "45.50", "2,500.00"),
        ("SOLD FINAL ZI", None, None),
        ("1 / 2", None, None),
    ],
    [
        ("03/04/2025", None, None),
        ("Plata la POS", "4.50", None),
        ("03/04/2025 RULAJ ZI", "4.50", "0.00"),
        ("RULAJ TOTAL CONT", "50.00", "2,500.00"),
        ("SOLD FINAL CONT", None, "3,450.00"),
        ("Extras generat electronic de BANCA TRANSILVANIA, valabil fara semnatura si stampila.", None, None),
        ("2 / 2", None, None),
    ],
]


def build_statement_pdf(path) -> None:
    from reportlab.lib.pagesizes import A4
    from reportlab.pdfgen import canvas

    c = canvas.Canvas(str(path), pagesize=A4)
    c.setTitle("Extras de cont")
    for rows in PDF_PAGES:
        c.setFont("Helvetica", 10)
        y = A4[1] - 60
        for text, debit, credit in rows:
            c.drawString(DESC_X, y, text)
            if debit:
                c.drawRightString(DEBIT_X, y, debit)
            if credit:
                c.drawRightString(CREDIT_X, y, credit)
            y -= 16
        c.showPage()
    c.save()


@pytest.fixture
def sample_pdf(tmp_path):
    path = tmp_path / "Aprilie 2025.pdf"
    build_statement_pdf(path)
    return path
