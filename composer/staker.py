"""
Staker flow: approve the GatewayComposer for value token, then request stake
"""

import logging
from dataclasses import replace
from typing import List, Optional

from composer.models import StakePhase, StakeRequestResult, TransactionOptions
from composer.services.abi_bin_provider import AbiBinProvider
from composer.services.stake_helper import StakeHelper

logger = logging.getLogger(__name__)


class StakeOrchestrator:
    """Runs approve -> requestStake for a staker, strictly in that order

    By default requestStake is sent even when the approve receipt reports a
    failed status. Pass require_approval=True to stop after a failed approve.
    """

    def __init__(self, chain, value_token: str, branded_token: str, gateway_composer: str,
                 require_approval: bool = False, artifacts: Optional[AbiBinProvider] = None):
        self.chain = chain
        self.value_token = value_token
        self.branded_token = branded_token
        self.gateway_composer = gateway_composer
        self.require_approval = require_approval
        self.artifacts = artifacts

    async def request_stake(self, value_token_abi: List[dict], owner: str, stake_amount: int,
                            mint_amount: int, gateway_address: str, gas_price: int, gas_limit: int,
                            beneficiary: str, staker_nonce: int, tx_options=None) -> StakeRequestResult:
        """Approve stake_amount for the composer then call requestStake on it

        Args:
            value_token_abi: ABI of the value token contract.
            owner: Owner of the GatewayComposer; default sender of both transactions.
            stake_amount: Value token amount staked, in wei.
            mint_amount: Branded token amount to mint, in wei.
            gateway_address: Gateway contract address.
            gas_price: Gas price the staker pays for the stake and mint process.
            gas_limit: Gas limit the staker pays for.
            beneficiary: Address on the auxiliary chain receiving utility tokens.
            staker_nonce: Nonce of the staker address stored in the Gateway.
            tx_options: Optional transaction overrides applied to both transactions.

        Raises:
            SubmissionError: if either transaction cannot be sent or confirmed.
                A completed approve is not undone.
        """
        options = TransactionOptions.coerce(tx_options)
        # requestStake follows approve from the same sender
        request_options = options
        if options.nonce is not None:
            request_options = replace(options, nonce=options.nonce + 1)
        helper = StakeHelper(self.chain, self.gateway_composer, self.artifacts)

        logger.info(
            f"Requesting stake of {stake_amount} value token wei for {mint_amount} "
            f"branded token {self.branded_token} wei via {self.gateway_composer}"
        )

        phase = StakePhase.APPROVING
        logger.debug(f"Stake request phase: {phase.value}")
        try:
            approve_receipt = await helper.approve_for_value_token(
                self.value_token, value_token_abi, stake_amount, options.with_sender(owner)
            )
            phase = StakePhase.APPROVED_OR_FAILED
            logger.info(f"approveForValueToken status: {bool(approve_receipt.get('status'))}")

            if self.require_approval and not approve_receipt.get('status'):
                logger.warning("Approval failed, not sending requestStake")
                return StakeRequestResult(approve_receipt, None, StakePhase.SKIPPED)

            phase = StakePhase.REQUESTING_STAKE
            logger.debug(f"Stake request phase: {phase.value}")
            request_stake_receipt = await helper.request_stake(
                owner, stake_amount, mint_amount, gateway_address, gas_price,
                gas_limit, beneficiary, staker_nonce, request_options
            )
        except Exception as e:
            logger.error(f"Stake request {StakePhase.ABORTED.value} during {phase.value}: {e}")
            raise

        logger.info(f"requestStake status: {bool(request_stake_receipt.get('status'))}")
        return StakeRequestResult(approve_receipt, request_stake_receipt, StakePhase.DONE)
