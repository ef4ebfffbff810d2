from __future__ import annotations

from fpdf import FPDF

from sycamore_extractor.banks.sycamore import extract_pdf
from sycamore_extractor.detect import read_pdf_text
from sycamore_extractor.models import TransactionType


PDF_LINES = [
    "JOHN ADEBAYO OKAFOR",
    "Account Number 0123456789",
    "Statement Period 2025-04-01 to 2025-04-30",
    "Opening Balance NGN 50,000.00",
    "April 3",
    "09:15:02",
    "NGN 0.00NGN 5,000.00Wallet Airtime",
    "08012345678",
    "TXT-REF1",
    "NGN 45,000.00",
]


def _create_pdf(path, lines):
    pdf = FPDF()
    pdf.add_page()
    pdf.set_font("Helvetica", size=11)
    for line in lines:
        pdf.cell(0, 8, line, new_x="LMARGIN", new_y="NEXT")
    pdf.output(str(path))


def test_read_pdf_text_keeps_lines(tmp_path):
    pdf_path = tmp_path / "statement.pdf"
    _create_pdf(pdf_path, PDF_LINES)

    lines = [line.strip() for line in read_pdf_text(pdf_path).splitlines()]
    assert "April 3" in lines
    assert "09:15:02" in lines
    assert "Account Number 0123456789" in lines


def test_extract_pdf_end_to_end(tmp_path):
    pdf_path = tmp_path / "statement.pdf"
    _create_pdf(pdf_path, PDF_LINES)

    result = extract_pdf(pdf_path)

    assert result.account_info.account_number == "0123456789"
    assert result.account_info.opening_balance == "NGN 50,000.00"
    assert result.message == f"Successfully extracted 1 transactions from {pdf_path}"

    tx = result.transactions[0]
    assert (tx.date, tx.time) == ("2025-04-03", "09:15:02")
    assert tx.transaction_type is TransactionType.DEBIT
    assert tx.debit == "NGN 5,000.00"
    assert tx.to_from == "08012345678"
    assert tx.description == "TXT-REF1"
    assert tx.balance == "NGN 45,000.00"
