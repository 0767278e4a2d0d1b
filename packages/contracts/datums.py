from dataclasses import dataclass
from typing import Dict, List, Union
from opshin.ledger.api_v2 import *

# Payout: One obligation of a listing, paid to a fixed address
@dataclass
class Payout(PlutusData):
    CONSTR_ID = 0
    address: Address  # Where the seller (or royalty holder) is paid
    amount_lovelace: int  # Minimum lovelace the matching output must carry

# ListingDatum: Terms locked with the listed NFT
@dataclass
class ListingDatum(PlutusData):
    CONSTR_ID = 0
    payouts: List[Payout]  # Ordered, output i pays payout i
    owner: Credential  # May withdraw or update the listing

# MarketplaceParams: Applied to the validator at build time
@dataclass
class MarketplaceParams(PlutusData):
    CONSTR_ID = 0
    authorizers: List[PubKeyHash]  # Co-signers that waive the marketplace fee
    fee_address: Address  # Receives the marketplace fee
