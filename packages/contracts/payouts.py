"""
Payout and marketplace fee checks shared by the listing validator.

All helpers either return a value or fail the evaluation with an assertion,
so a transaction is accepted only when every check passes.
"""
from opshin.ledger.api_v2 import *
from datums import *


def lovelace_of(value: Value) -> int:
    """Lovelace held in a value, 0 when the entry is missing."""
    return value.get(b"", {b"": 0}).get(b"", 0)


def payout_outputs(outputs: List[TxOut], offset: int, count: int) -> List[TxOut]:
    """
    Return the `count` outputs starting at `offset`.

    Outputs after the slice are left to other scripts in the transaction.
    """
    assert offset >= 0, "Payout offset out of range"
    assert count >= 0, "Payout count out of range"
    assert offset + count <= len(outputs), "Not enough outputs after payout offset"
    return [outputs[offset + i] for i in range(count)]


def check_payouts(
    outputs: List[TxOut],
    payouts: List[Payout],
    required_tag: Union[SomeOutputDatum, NoOutputDatum],
) -> int:
    """
    Check that output i pays payout i and return the lovelace paid in total.

    Matching is positional. A `SomeOutputDatum` tag must be carried by every
    output, `NoOutputDatum` leaves output datums unchecked.
    """
    assert len(outputs) == len(payouts), "Payout output count mismatch"
    enforce_tag = isinstance(required_tag, SomeOutputDatum)
    payouts_sum = 0
    for i in range(len(payouts)):
        output = outputs[i]
        payout = payouts[i]
        assert output.address == payout.address, "Payout address mismatch"
        paid = lovelace_of(output.value)
        assert paid >= payout.amount_lovelace, "Payout amount too low"
        if enforce_tag:
            assert output.datum == required_tag, "Payout datum tag mismatch"
        payouts_sum += paid
    return payouts_sum


def marketplace_fee(payouts_sum: int) -> int:
    # roughly 2% of sale price; the divisions must stay in this order
    return payouts_sum * 50 // 49 // 50


def check_marketplace_payout(
    output: TxOut, fee_address: Address, fee: int, datum_tag: SomeOutputDatum
) -> None:
    assert output.address == fee_address, "Marketplace fee address mismatch"
    assert lovelace_of(output.value) >= fee, "Marketplace fee too low"
    assert output.datum == datum_tag, "Marketplace fee datum tag mismatch"
