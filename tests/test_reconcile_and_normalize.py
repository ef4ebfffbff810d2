from __future__ import annotations

import logging

from sycamore_extractor.models import Transaction, TransactionType
from sycamore_extractor.normalize import clean_category, resolve_unknown_types, sort_chronologically
from sycamore_extractor.parse import build_transaction, split_fields
from sycamore_extractor.reconcile import classify_pair, reconcile


def _tx(**kw):
    kw.setdefault("date", "2025-04-03")
    kw.setdefault("time", "09:00:00")
    return Transaction(**kw)


def test_reconcile_unknown_credit_from_delta():
    tx, last = reconcile(_tx(), 1250.0, 1000.0)
    assert tx.credit == "NGN 250.00"
    assert tx.debit == "NGN 0.00"
    assert tx.transaction_type is TransactionType.CREDIT
    assert last == 1250.0


def test_reconcile_overrides_same_sign_amount():
    tx = _tx(debit="NGN 90.00", transaction_type=TransactionType.DEBIT)
    tx, _ = reconcile(tx, 900.0, 1000.0)
    assert tx.debit == "NGN 100.00"


def test_reconcile_keeps_opposite_direct_type(caplog):
    tx = _tx(debit="NGN 50.00", transaction_type=TransactionType.DEBIT)
    with caplog.at_level(logging.WARNING):
        out, last = reconcile(tx, 1050.0, 1000.0)
    assert out == tx
    assert last == 1050.0
    assert "Signo inconsistente" in caplog.text


def test_reconcile_without_previous_or_current_balance():
    tx = _tx()
    assert reconcile(tx, 500.0, None) == (tx, 500.0)
    assert reconcile(tx, None, 500.0) == (tx, 500.0)
    # sin variación no hay evidencia
    assert reconcile(tx, 500.0, 500.0) == (tx, 500.0)


def test_classify_pair():
    assert classify_pair("100.00", "0.00") == (TransactionType.CREDIT, "NGN 100.00", "NGN 0.00")
    assert classify_pair("0.00", "2,500.00") == (TransactionType.DEBIT, "NGN 0.00", "NGN 2,500.00")
    assert classify_pair("300.00", "20.00")[0] is TransactionType.CREDIT
    assert classify_pair("20.00", "300.00")[0] is TransactionType.DEBIT
    assert classify_pair("0.00", "0.00")[0] is TransactionType.UNKNOWN


def test_clean_category():
    assert clean_category("XYZ NGN 100.00NGN 0.00Wallet Transfer In") == "Wallet Transfer In"
    assert clean_category("  Wallet  ") == "Wallet"
    assert clean_category("POS Purchase") == "POS Purchase"


def test_build_transaction_slots_are_not_reassigned():
    fields = split_fields(
        " NGN 0.00NGN 10.00Wallet Bills  Wallet Other  ACME Limited  X/Y  TXT-1  TXT-2  NGN 5.00  NGN 6.00\n"
    )
    tx = build_transaction("2025-04-03", "09:00:00", fields)
    assert tx.category == "NGN 0.00NGN 10.00Wallet Bills"
    assert tx.to_from == "ACME Limited"
    assert tx.description == "TXT-1"
    assert tx.balance == "NGN 5.00"
    assert tx.transaction_type is TransactionType.DEBIT
    assert tx.debit == "NGN 10.00"


def test_build_transaction_missing_fields():
    tx = build_transaction("2025-04-03", "09:00:00", split_fields("   "))
    assert (tx.category, tx.to_from, tx.description, tx.balance) == ("", "", "", "")
    assert tx.transaction_type is TransactionType.UNKNOWN


def test_resolve_unknown_types():
    txs = [
        _tx(category="NGN 0.00 NGN 50.00 Wallet Fees"),
        _tx(category="NGN 200.00 NGN 50.00 Refund"),
        _tx(category="NGN 0.00 NGN 0.00 Wallet Nothing"),
        _tx(category="Wallet NGN 1.00 NGN 2.00", credit="NGN 9.00", transaction_type=TransactionType.CREDIT),
    ]
    out = resolve_unknown_types(txs)

    assert out[0].transaction_type is TransactionType.DEBIT
    assert out[0].debit == "NGN 50.00"
    assert out[0].category == "Wallet Fees"

    assert out[1].transaction_type is TransactionType.CREDIT
    assert out[1].credit == "NGN 200.00"

    assert out[2].transaction_type is TransactionType.UNKNOWN
    assert out[2].category == "Wallet Nothing"

    assert out[3] == txs[3]


def test_sort_is_stable_by_date_then_time():
    a = _tx(date="2025-04-02", time="10:00:00", description="a")
    b = _tx(date="2025-04-01", time="11:00:00", description="b")
    c = _tx(date="2025-04-01", time="09:00:00", description="c")
    d = _tx(date="2025-04-02", time="10:00:00", description="d")
    assert [t.description for t in sort_chronologically([a, b, c, d])] == ["c", "b", "a", "d"]

