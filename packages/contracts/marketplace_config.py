"""
Configuration of a deployed marketplace validator.

The authorizer keys and the fee address are fixed when the script is built;
changing them yields a different script and therefore a different listing
address.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Tuple, Union

import pycardano
from pycardano.exception import PyCardanoException
from opshin.ledger.api_v2 import (
    Address,
    NoStakingCredential,
    PubKeyCredential,
    ScriptCredential,
    SomeStakingCredential,
    StakingHash,
    StakingPtr,
)

from datums import MarketplaceParams
from marketplace_errors import ConfigError

logger = logging.getLogger(__name__)

PUB_KEY_HASH_LEN = 28

ENV_AUTHORIZERS = "SEATMINT_AUTHORIZERS"
ENV_FEE_ADDRESS = "SEATMINT_FEE_ADDRESS"


def _credential(part: Union[pycardano.VerificationKeyHash, pycardano.ScriptHash]):
    if isinstance(part, pycardano.VerificationKeyHash):
        return PubKeyCredential(part.payload)
    if isinstance(part, pycardano.ScriptHash):
        return ScriptCredential(part.payload)
    raise ConfigError(f"unsupported credential: {part!r}")


def to_plutus_address(bech32: str) -> Address:
    """Convert a bech32 address to its on-chain representation."""
    try:
        addr = pycardano.Address.from_primitive(bech32)
    except (PyCardanoException, ValueError, TypeError) as e:
        raise ConfigError(f"invalid address {bech32!r}: {e}") from e

    if addr.payment_part is None:
        raise ConfigError(f"address {bech32!r} has no payment part")
    payment = _credential(addr.payment_part)

    staking = addr.staking_part
    if staking is None:
        return Address(payment, NoStakingCredential())
    if isinstance(staking, pycardano.PointerAddress):
        pointer = StakingPtr(staking.slot, staking.tx_index, staking.cert_index)
        return Address(payment, SomeStakingCredential(pointer))
    return Address(payment, SomeStakingCredential(StakingHash(_credential(staking))))


@dataclass(frozen=True)
class MarketplaceConfig:
    """Authorizer key hashes (hex) and the bech32 fee address."""
    fee_address: str
    authorizers: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_env(cls) -> "MarketplaceConfig":
        """Load configuration from environment variables."""
        fee_address = os.environ.get(ENV_FEE_ADDRESS, "").strip()
        if not fee_address:
            raise ConfigError(f"{ENV_FEE_ADDRESS} is not set")
        raw = os.environ.get(ENV_AUTHORIZERS, "")
        authorizers = tuple(a.strip() for a in raw.split(",") if a.strip())
        return cls(fee_address=fee_address, authorizers=authorizers)

    @classmethod
    def from_file(cls, path: str) -> "MarketplaceConfig":
        with open(path, "r", encoding="utf-8") as f:
            try:
                raw = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"{path}: {e}") from e
        if not isinstance(raw, dict) or "fee_address" not in raw:
            raise ConfigError(f"{path}: expected an object with 'fee_address'")
        authorizers = raw.get("authorizers", [])
        if not isinstance(authorizers, list):
            raise ConfigError(f"{path}: 'authorizers' must be a list")
        logger.debug("loaded marketplace config from %s", path)
        return cls(fee_address=str(raw["fee_address"]), authorizers=tuple(str(a) for a in authorizers))

    def authorizer_hashes(self) -> list:
        hashes = []
        for a in self.authorizers:
            try:
                h = bytes.fromhex(a)
            except ValueError as e:
                raise ConfigError(f"authorizer {a!r} is not hex") from e
            if len(h) != PUB_KEY_HASH_LEN:
                raise ConfigError(f"authorizer {a!r} must be {PUB_KEY_HASH_LEN} bytes, got {len(h)}")
            hashes.append(h)
        return hashes

    def to_params(self) -> MarketplaceParams:
        return MarketplaceParams(self.authorizer_hashes(), to_plutus_address(self.fee_address))
