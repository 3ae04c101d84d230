"""
Environment configuration for the composer scripts
"""

import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

from composer.models import SetupConfig, TransactionOptions


def require_env(names: List[str]):
    """Raise ValueError listing any unset variables"""
    missing = [name for name in names if not os.getenv(name)]
    if missing:
        raise ValueError(f"Missing required environment variables: {missing}")


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value else None


def load_setup_config() -> SetupConfig:
    """SetupConfig from the environment; validation happens in setup()"""
    load_dotenv()
    return SetupConfig(
        deployer=os.getenv('DEPLOYER_ADDRESS'),
        owner=os.getenv('OWNER_ADDRESS'),
        value_token=os.getenv('VALUE_TOKEN_ADDRESS'),
        branded_token=os.getenv('BRANDED_TOKEN_ADDRESS'),
    )


def load_tx_options() -> TransactionOptions:
    """GAS_LIMIT / GAS_PRICE overrides, unset when absent"""
    load_dotenv()
    return TransactionOptions(gas=_optional_int('GAS_LIMIT'), gas_price=_optional_int('GAS_PRICE'))


@dataclass(frozen=True)
class StakeConfig:
    """Parameters for one approve + requestStake run"""
    owner: str
    value_token: str
    branded_token: str
    gateway_composer: str
    gateway: str
    beneficiary: str
    stake_amount: int
    mint_amount: int
    gas_price: int
    gas_limit: int
    staker_nonce: int
    require_approval: bool = False


def load_stake_config() -> StakeConfig:
    load_dotenv()
    require_env([
        'OWNER_ADDRESS', 'VALUE_TOKEN_ADDRESS', 'BRANDED_TOKEN_ADDRESS',
        'GATEWAY_COMPOSER_ADDRESS', 'GATEWAY_ADDRESS', 'BENEFICIARY_ADDRESS',
        'STAKE_AMOUNT_WEI', 'MINT_AMOUNT_WEI',
    ])

    return StakeConfig(
        owner=os.getenv('OWNER_ADDRESS'),
        value_token=os.getenv('VALUE_TOKEN_ADDRESS'),
        branded_token=os.getenv('BRANDED_TOKEN_ADDRESS'),
        gateway_composer=os.getenv('GATEWAY_COMPOSER_ADDRESS'),
        gateway=os.getenv('GATEWAY_ADDRESS'),
        beneficiary=os.getenv('BENEFICIARY_ADDRESS'),
        stake_amount=int(os.getenv('STAKE_AMOUNT_WEI')),
        mint_amount=int(os.getenv('MINT_AMOUNT_WEI')),
        gas_price=int(os.getenv('STAKE_GAS_PRICE', '0')),
        gas_limit=int(os.getenv('STAKE_GAS_LIMIT', '0')),
        staker_nonce=int(os.getenv('STAKER_NONCE', '0')),
        require_approval=os.getenv('REQUIRE_APPROVAL', 'false').lower() == 'true',
    )
