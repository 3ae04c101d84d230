"""
Single-transaction helpers for the staking flow
"""

import logging
from typing import Any, Dict, List, Optional

from composer.models import TransactionOptions
from composer.services.abi_bin_provider import AbiBinProvider

GATEWAY_COMPOSER = 'GatewayComposer'

logger = logging.getLogger(__name__)


class StakeHelper:
    """Builds and sends approve and requestStake for one GatewayComposer"""

    def __init__(self, chain, gateway_composer: str,
                 artifacts: Optional[AbiBinProvider] = None):
        self.chain = chain
        self.gateway_composer = gateway_composer
        self.artifacts = artifacts or AbiBinProvider()

    async def approve_for_value_token(self, value_token: str, value_token_abi: List[dict],
                                      amount: int, tx_options: Optional[TransactionOptions] = None,
                                      chain=None) -> Dict[str, Any]:
        """Approve the GatewayComposer to transfer amount of value token"""
        chain = chain or self.chain
        call = self._approve_raw_tx(value_token, value_token_abi, amount, chain)
        return await chain.send(call, tx_options, on_transaction_hash=_log_tx_hash('approve'))

    def _approve_raw_tx(self, value_token, value_token_abi, amount, chain):
        return chain.method_call(value_token_abi, value_token, 'approve', [self.gateway_composer, amount])

    async def request_stake(self, owner: str, stake_amount: int, mint_amount: int,
                            gateway_address: str, gas_price: int, gas_limit: int,
                            beneficiary: str, staker_nonce: int,
                            tx_options: Optional[TransactionOptions] = None,
                            chain=None) -> Dict[str, Any]:
        """Call GatewayComposer.requestStake, sent by owner unless tx_options sets a sender"""
        chain = chain or self.chain
        options = TransactionOptions.coerce(tx_options).with_sender(owner)
        call = self._request_stake_raw_tx(
            stake_amount, mint_amount, gateway_address, gas_price,
            gas_limit, beneficiary, staker_nonce, chain
        )
        return await chain.send(call, options, on_transaction_hash=_log_tx_hash('requestStake'))

    def _request_stake_raw_tx(self, stake_amount, mint_amount, gateway_address, gas_price,
                              gas_limit, beneficiary, staker_nonce, chain):
        abi = self.artifacts.get_abi(GATEWAY_COMPOSER)
        args = [stake_amount, mint_amount, gateway_address, gas_price, gas_limit, beneficiary, staker_nonce]
        return chain.method_call(abi, self.gateway_composer, 'requestStake', args)


def _log_tx_hash(label: str):
    def log(tx_hash: str):
        logger.info(f"{label} transaction hash: {tx_hash}")
    return log
