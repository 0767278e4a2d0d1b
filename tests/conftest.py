"""Shared fixtures for the marketplace contract tests."""

from __future__ import annotations

import pytest

from datums import Payout
from ledger import SELLER, ROYALTY, out_ref, params, tag_for


@pytest.fixture
def market():
    return params()


@pytest.fixture
def spent_ref():
    return out_ref(1)


@pytest.fixture
def datum_tag(spent_ref):
    return tag_for(spent_ref)


@pytest.fixture
def one_payout():
    return [Payout(SELLER, 100)]


@pytest.fixture
def seller_and_royalty():
    return [Payout(SELLER, 95_000_000), Payout(ROYALTY, 5_000_000)]
