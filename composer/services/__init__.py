"""
Chain and artifact services
"""

from .abi_bin_provider import AbiBinProvider
from .chain_client import ChainClient
from .stake_helper import StakeHelper

__all__ = ['AbiBinProvider', 'ChainClient', 'StakeHelper']
