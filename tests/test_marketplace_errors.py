"""Rejection classification."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

import marketplace
from marketplace_errors import _REASONS, ListingRejected, RejectReason, classify

_ASSERT_MESSAGE = re.compile(r'^\s*assert .*, "([^"]+)"\s*$')


def _onchain_messages():
    src = Path(marketplace.__file__).resolve().parent
    messages = set()
    for name in ("marketplace.py", "payouts.py"):
        for line in (src / name).read_text(encoding="utf-8").splitlines():
            m = _ASSERT_MESSAGE.match(line)
            if m:
                messages.add(m.group(1))
    return messages


def test_every_onchain_message_is_classified():
    messages = _onchain_messages()
    assert len(messages) >= 12
    assert messages <= set(_REASONS)


@pytest.mark.parametrize(
    "message, reason",
    [
        ("Payout amount too low", RejectReason.PAYOUT),
        ("Marketplace fee too low", RejectReason.FEE),
        ("Owner did not authorize", RejectReason.AUTHORIZATION),
        ("Not enough outputs after payout offset", RejectReason.STRUCTURAL),
        ("something unexpected", RejectReason.STRUCTURAL),
    ],
)
def test_classify(message, reason):
    assert classify(message) == reason


def test_listing_rejected_message():
    err = ListingRejected(RejectReason.FEE, "Marketplace fee too low")
    assert err.reason == RejectReason.FEE
    assert err.message == "Marketplace fee too low"
    assert str(err) == "FEE: Marketplace fee too low"
