"""Off-chain evaluation of the listing validator.

Wallets and transaction builders call these before submitting a transaction.
The decision is the one the chain makes: ``validator`` from ``marketplace`` runs
unchanged over the decoded datum, redeemer and script context.
"""

from __future__ import annotations

import logging

from opshin.ledger.api_v2 import ScriptContext

from datums import ListingDatum, MarketplaceParams
from marketplace import validator
from marketplace_errors import ListingRejected, classify
from redeemers import ListingAction

logger = logging.getLogger(__name__)


def check(
    params: MarketplaceParams,
    datum: ListingDatum,
    redeemer: ListingAction,
    context: ScriptContext,
) -> None:
    """Run the validator, raising ``ListingRejected`` if the chain would reject."""
    try:
        validator(params, datum, redeemer, context)
    except AssertionError as e:
        message = str(e)
        reason = classify(message)
        logger.debug("listing %s rejected (%s): %s", type(redeemer).__name__, reason.name, message)
        raise ListingRejected(reason, message) from e


def validate(
    params: MarketplaceParams,
    datum: ListingDatum,
    redeemer: ListingAction,
    context: ScriptContext,
) -> bool:
    """True if the transaction is permitted, False otherwise."""
    try:
        check(params, datum, redeemer, context)
    except ListingRejected:
        return False
    return True
