"""
Result models for deployments and stake requests
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from web3 import Web3


class StakePhase(Enum):
    """Progress of a single approve -> requestStake run"""
    APPROVING = "approving"
    APPROVED_OR_FAILED = "approved_or_failed"
    REQUESTING_STAKE = "requesting_stake"
    DONE = "done"
    SKIPPED = "skipped"  # approval guard stopped before requestStake
    ABORTED = "aborted"


def receipt_status(receipt: Optional[Mapping[str, Any]]) -> Optional[bool]:
    """Status flag of a receipt, None when there is no receipt"""
    if receipt is None:
        return None
    return bool(receipt.get('status'))


def receipt_tx_hash(receipt: Mapping[str, Any]) -> Optional[str]:
    tx_hash = receipt.get('transactionHash')
    if tx_hash is None or isinstance(tx_hash, str):
        return tx_hash
    return Web3.to_hex(tx_hash)


@dataclass(frozen=True)
class DeploymentResult:
    """Mined contract-creation receipt and the new contract address"""
    receipt: Mapping[str, Any]
    address: Optional[str]  # None when the deployment reverted

    @property
    def status(self) -> bool:
        return receipt_status(self.receipt)

    @property
    def transaction_hash(self) -> Optional[str]:
        return receipt_tx_hash(self.receipt)


@dataclass(frozen=True)
class StakeRequestResult:
    """Receipts of the approve and requestStake transactions"""
    approve_receipt: Mapping[str, Any]
    request_stake_receipt: Optional[Mapping[str, Any]]
    phase: StakePhase = StakePhase.DONE

    @property
    def approve_status(self) -> bool:
        return receipt_status(self.approve_receipt)

    @property
    def request_stake_status(self) -> Optional[bool]:
        return receipt_status(self.request_stake_receipt)
