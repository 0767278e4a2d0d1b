from dataclasses import dataclass
from typing import Dict, List, Union
from opshin.ledger.api_v2 import *

# Buy: Purchase the listed NFT
@dataclass
class Buy(PlutusData):
    CONSTR_ID = 0
    payout_outputs_offset: int  # Index of the first output paying this listing

# WithdrawOrUpdate: Cancel the listing or change its terms
@dataclass
class WithdrawOrUpdate(PlutusData):
    CONSTR_ID = 1

ListingAction = Union[Buy, WithdrawOrUpdate]
