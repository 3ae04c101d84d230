"""
Transaction option and setup config models
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

# Web3 parameter name -> TransactionOptions field
TX_PARAM_FIELDS = {
    'from': 'from_address',
    'gas': 'gas',
    'gasPrice': 'gas_price',
    'value': 'value',
    'nonce': 'nonce',
}


@dataclass(frozen=True)
class TransactionOptions:
    """Optional overrides for a single transaction"""
    from_address: Optional[str] = None
    gas: Optional[int] = None
    gas_price: Optional[int] = None
    value: Optional[int] = None
    nonce: Optional[int] = None

    @classmethod
    def coerce(cls, options: Union['TransactionOptions', Mapping[str, Any], None]) -> 'TransactionOptions':
        """Accept a TransactionOptions, a web3-style dict or None"""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options

        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in options.items():
            name = TX_PARAM_FIELDS.get(key, key)
            if name not in known:
                raise ValueError(f"Unsupported transaction option: {key}")
            if name in ('gas', 'gas_price', 'value', 'nonce') and value is not None:
                value = int(value)
            values[name] = value
        return cls(**values)

    def merged_over(self, defaults: 'TransactionOptions') -> 'TransactionOptions':
        """Return these options with unset fields taken from defaults"""
        overrides = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
        return replace(defaults, **overrides)

    def with_sender(self, address: Optional[str]) -> 'TransactionOptions':
        """Use address as sender unless one is already set"""
        if self.from_address or not address:
            return self
        return replace(self, from_address=address)

    def to_tx_params(self) -> Dict[str, Any]:
        """Render as web3 transaction parameters, dropping unset fields"""
        params = {}
        for param, name in TX_PARAM_FIELDS.items():
            value = getattr(self, name)
            if value is not None:
                params[param] = value
        return params


DEFAULT_DEPLOY_OPTIONS = TransactionOptions(gas=7_500_000)


@dataclass(frozen=True)
class SetupConfig:
    """Addresses needed to deploy a GatewayComposer"""
    deployer: Optional[str] = None
    owner: Optional[str] = None
    value_token: Optional[str] = None
    branded_token: Optional[str] = None

    # Accepted keys per field, original names first
    KEYS = {
        'deployer': ('deployer', 'deployerAddress'),
        'owner': ('owner', 'ownerAddress'),
        'value_token': ('valueToken', 'valueTokenAddress', 'value_token'),
        'branded_token': ('brandedToken', 'brandedTokenAddress', 'branded_token'),
    }

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> 'SetupConfig':
        values = {}
        for name, keys in cls.KEYS.items():
            for key in keys:
                if config.get(key):
                    values[name] = config[key]
                    break
        return cls(**values)
