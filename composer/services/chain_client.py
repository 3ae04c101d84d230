"""
Chain client wrapping web3 for building, signing and sending transactions
"""

import asyncio
import logging
import os
from typing import Any, Callable, Dict, List, Optional, Sequence

from web3 import Web3
from eth_account import Account
from dotenv import load_dotenv

from composer.errors import SubmissionError
from composer.models import TransactionOptions

logger = logging.getLogger(__name__)

DEFAULT_RECEIPT_TIMEOUT = 300


def _checksum_args(args: Sequence[Any]) -> List[Any]:
    # web3 rejects lower-case addresses in contract arguments
    return [
        Web3.to_checksum_address(arg) if isinstance(arg, str) and Web3.is_address(arg) else arg
        for arg in args
    ]


class ChainClient:
    """Sends contract transactions on one chain and waits for them to be mined

    When a private key is configured transactions are signed locally;
    otherwise they are handed to the node for an unlocked account.
    """

    def __init__(self, w3: Web3, private_key: Optional[str] = None,
                 receipt_timeout: int = DEFAULT_RECEIPT_TIMEOUT):
        self.w3 = w3
        self.account = Account.from_key(private_key) if private_key else None
        self.receipt_timeout = receipt_timeout

    @classmethod
    def from_env(cls) -> 'ChainClient':
        """Connect using ORIGIN_RPC_URL and the optional PRIVATE_KEY"""
        load_dotenv()
        rpc_url = os.getenv('ORIGIN_RPC_URL')
        if not rpc_url:
            raise ValueError("Missing required environment variables: ['ORIGIN_RPC_URL']")

        w3 = Web3(Web3.HTTPProvider(rpc_url))
        if not w3.is_connected():
            raise ConnectionError(f"Failed to connect to origin chain at {rpc_url}")

        timeout = int(os.getenv('RECEIPT_TIMEOUT', str(DEFAULT_RECEIPT_TIMEOUT)))
        return cls(w3, os.getenv('PRIVATE_KEY'), receipt_timeout=timeout)

    @property
    def default_sender(self) -> Optional[str]:
        if self.account is not None:
            return self.account.address
        return self.w3.eth.default_account or None

    def contract(self, abi: List[dict], address: Optional[str] = None, bytecode: Optional[str] = None):
        if address:
            return self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)
        return self.w3.eth.contract(abi=abi, bytecode=bytecode)

    def deploy_call(self, abi: List[dict], bytecode: str, args: Sequence[Any]):
        """Contract-creation call for bytecode with constructor args"""
        try:
            return self.contract(abi, bytecode=bytecode).constructor(*_checksum_args(args))
        except Exception as e:
            raise SubmissionError(f"Failed to build contract deployment: {e}") from e

    def method_call(self, abi: List[dict], address: str, method: str, args: Sequence[Any]):
        # web3 encodes the arguments here, so bad values fail before send()
        try:
            contract = self.contract(abi, address)
            return getattr(contract.functions, method)(*_checksum_args(args))
        except Exception as e:
            raise SubmissionError(f"Failed to build {method} call: {e}") from e

    async def send(self, call, tx_options: Optional[TransactionOptions] = None,
                   on_transaction_hash: Optional[Callable[[str], None]] = None) -> Dict[str, Any]:
        """Submit call and wait for its receipt

        on_transaction_hash is invoked once with the hex hash before mining.
        A mined receipt is returned whatever its status; only failures to
        build, send or confirm raise SubmissionError.
        """
        try:
            options = TransactionOptions.coerce(tx_options).with_sender(self.default_sender)
            params = options.to_tx_params()
            if params.get('from'):
                params['from'] = Web3.to_checksum_address(params['from'])
            tx_hash = await asyncio.to_thread(self._submit, call, params)
        except Exception as e:
            logger.error(f"Transaction submission failed: {e}")
            raise SubmissionError(f"Transaction submission failed: {e}") from e

        tx_hash_hex = Web3.to_hex(tx_hash)
        logger.debug(f"Transaction sent: {tx_hash_hex}")
        if on_transaction_hash is not None:
            on_transaction_hash(tx_hash_hex)

        try:
            receipt = await asyncio.to_thread(
                self.w3.eth.wait_for_transaction_receipt, tx_hash, timeout=self.receipt_timeout
            )
        except Exception as e:
            logger.error(f"No receipt for {tx_hash_hex}: {e}")
            raise SubmissionError(f"Failed waiting for receipt of {tx_hash_hex}: {e}", tx_hash=tx_hash_hex) from e

        return receipt

    def _submit(self, call, params: Dict[str, Any]):
        if self.account is None:
            return call.transact(params)

        sender = params.setdefault('from', self.account.address)
        if sender.lower() != self.account.address.lower():
            raise ValueError(f"Signer {self.account.address} cannot send from {sender}")

        if 'nonce' not in params:
            params['nonce'] = self.w3.eth.get_transaction_count(self.account.address, 'pending')
        params['chainId'] = self.w3.eth.chain_id

        tx = call.build_transaction(params)
        signed_tx = self.account.sign_transaction(tx)
        return self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
