"""
The marketplace listing contract.

A listing locks an NFT together with a ListingDatum. It can be
- bought, when every declared payout is paid (plus the marketplace fee unless an
  authorizer co-signs the transaction), or
- withdrawn or updated by its owner.

Compile: opshin build spending marketplace.py '<MarketplaceParams as json>'
"""
from opshin.ledger.api_v2 import *
from opshin.std.builtins import *
from datums import *
from redeemers import *
from payouts import *


def listing_datum_tag(out_ref: TxOutRef) -> SomeOutputDatum:
    """
    Inline datum that outputs paying this listing must carry.

    Two listings bought in one transaction get different tags, so one output
    can never be counted for both.
    """
    return SomeOutputDatum(blake2b_256(out_ref.to_cbor()))


def has_discount(authorizers: List[PubKeyHash], signatories: List[PubKeyHash]) -> bool:
    return any([authorizer in signatories for authorizer in authorizers])


def owner_consents(owner: Credential, tx_info: TxInfo) -> bool:
    """
    Key owners sign directly. Script owners authorize through a withdrawal from
    their stake credential, which runs the owning script (amount may be 0).
    """
    if isinstance(owner, PubKeyCredential):
        return owner.credential_hash in tx_info.signatories
    return StakingHash(owner) in tx_info.wdrl.keys()


def validator(
    params: MarketplaceParams,
    datum: ListingDatum,
    redeemer: ListingAction,
    context: ScriptContext,
) -> None:
    tx_info = context.tx_info

    if isinstance(redeemer, Buy):
        purpose = context.purpose
        assert isinstance(purpose, Spending), "Buy requires a spending purpose"
        datum_tag = listing_datum_tag(purpose.tx_out_ref)
        payouts = datum.payouts

        if has_discount(params.authorizers, tx_info.signatories):
            outputs = payout_outputs(
                tx_info.outputs, redeemer.payout_outputs_offset, len(payouts)
            )
            payouts_sum = check_payouts(outputs, payouts, datum_tag)
            assert payouts_sum > 0, "Payouts must be positive"
        else:
            outputs = payout_outputs(
                tx_info.outputs, redeemer.payout_outputs_offset, len(payouts) + 1
            )
            fee_output = outputs[0]
            rest_outputs = [outputs[i + 1] for i in range(len(payouts))]
            # payout datums are only tagged on the discount path
            payouts_sum = check_payouts(rest_outputs, payouts, NoOutputDatum())
            fee = marketplace_fee(payouts_sum)
            check_marketplace_payout(fee_output, params.fee_address, fee, datum_tag)

    elif isinstance(redeemer, WithdrawOrUpdate):
        assert owner_consents(datum.owner, tx_info), "Owner did not authorize"

    else:
        assert False, "Invalid redeemer action"
