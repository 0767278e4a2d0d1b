"""Rejection reasons for the marketplace listing validator."""

from __future__ import annotations

from enum import IntEnum


class RejectReason(IntEnum):
    STRUCTURAL = 0x01
    PAYOUT = 0x02
    FEE = 0x03
    AUTHORIZATION = 0x04


# Assertion messages raised by the on-chain code, by rejection reason.
_REASONS = {
    "Buy requires a spending purpose": RejectReason.STRUCTURAL,
    "Invalid redeemer action": RejectReason.STRUCTURAL,
    "Payout offset out of range": RejectReason.STRUCTURAL,
    "Payout count out of range": RejectReason.STRUCTURAL,
    "Not enough outputs after payout offset": RejectReason.STRUCTURAL,
    "Payout output count mismatch": RejectReason.STRUCTURAL,
    "Payout address mismatch": RejectReason.PAYOUT,
    "Payout amount too low": RejectReason.PAYOUT,
    "Payout datum tag mismatch": RejectReason.PAYOUT,
    "Payouts must be positive": RejectReason.PAYOUT,
    "Marketplace fee address mismatch": RejectReason.FEE,
    "Marketplace fee too low": RejectReason.FEE,
    "Marketplace fee datum tag mismatch": RejectReason.FEE,
    "Owner did not authorize": RejectReason.AUTHORIZATION,
}


def classify(message: str) -> RejectReason:
    """Map an on-chain assertion message to its reason, STRUCTURAL if unknown."""
    return _REASONS.get(message, RejectReason.STRUCTURAL)


class ListingRejected(Exception):
    def __init__(self, reason: RejectReason, message: str) -> None:
        super().__init__(f"{reason.name}: {message}")
        self.reason = reason
        self.message = message


class ConfigError(ValueError):
    pass
