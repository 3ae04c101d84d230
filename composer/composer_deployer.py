"""
GatewayComposer setup and deployment
"""

import logging
from typing import Any, Mapping, Optional, Union

from composer.errors import ConfigError
from composer.models import DEFAULT_DEPLOY_OPTIONS, DeploymentResult, SetupConfig, TransactionOptions
from composer.services.abi_bin_provider import AbiBinProvider

CONTRACT_NAME = 'GatewayComposer'

logger = logging.getLogger(__name__)


class ComposerDeployer:
    """Validates setup config and deploys a GatewayComposer"""

    def __init__(self, chain, address: Optional[str] = None,
                 artifacts: Optional[AbiBinProvider] = None):
        """
        Args:
            chain: ChainClient for the origin chain.
            address: Address of an already deployed GatewayComposer, if any.
            artifacts: ABI/BIN provider; defaults to the bundled contracts.
        """
        self.chain = chain
        self.address = address
        self.artifacts = artifacts or AbiBinProvider()

    async def setup(self, config: Union[SetupConfig, Mapping[str, Any]],
                    tx_options=None, chain=None) -> DeploymentResult:
        """Validate config then deploy from config.deployer"""
        self.validate_config(config)
        if not isinstance(config, SetupConfig):
            config = SetupConfig.from_mapping(config)

        options = TransactionOptions.coerce(tx_options)
        if config.deployer:
            options = TransactionOptions(from_address=config.deployer).merged_over(options)

        return await self.deploy(config.owner, config.value_token, config.branded_token, options, chain)

    @staticmethod
    def validate_config(config: Union[SetupConfig, Mapping[str, Any], None]) -> bool:
        """Check owner, valueToken and brandedToken are present, in that order

        Raises:
            ConfigError: naming the first missing field.
        """
        if config is None:
            raise ConfigError('Mandatory parameter "config" missing.')

        if not isinstance(config, SetupConfig):
            config = SetupConfig.from_mapping(config)

        if not config.owner:
            raise ConfigError('Mandatory configuration "owner" missing. Set config.owner address', 'owner')

        if not config.value_token:
            raise ConfigError(
                'Mandatory configuration "valueToken" missing. Set config.valueToken address', 'valueToken'
            )

        if not config.branded_token:
            raise ConfigError(
                'Mandatory configuration "brandedToken" missing. Set config.brandedToken address', 'brandedToken'
            )

        return True

    async def deploy(self, owner: str, value_token: str, branded_token: str,
                     tx_options=None, chain=None) -> DeploymentResult:
        """Deploy GatewayComposer(owner, value_token, branded_token)

        Gas defaults to 7,500,000 unless tx_options sets it. Submission
        errors propagate unchanged.
        """
        chain = chain or self.chain
        options = TransactionOptions.coerce(tx_options).merged_over(DEFAULT_DEPLOY_OPTIONS)

        call = self._deploy_raw_tx(owner, value_token, branded_token, chain)
        receipt = await chain.send(call, options, on_transaction_hash=self._log_tx_hash)

        if not receipt.get('status'):
            logger.warning(f"{CONTRACT_NAME} deployment mined with failed status, no contract created")
            return DeploymentResult(receipt=receipt, address=None)

        self.address = receipt['contractAddress']
        logger.info(f"{CONTRACT_NAME} Contract Address: {self.address}")
        return DeploymentResult(receipt=receipt, address=self.address)

    def _deploy_raw_tx(self, owner, value_token, branded_token, chain):
        abi = self.artifacts.get_abi(CONTRACT_NAME)
        bytecode = self.artifacts.get_bin(CONTRACT_NAME)
        args = [owner, value_token, branded_token]
        return chain.deploy_call(abi, bytecode, args)

    @staticmethod
    def _log_tx_hash(tx_hash: str):
        logger.info(f"{CONTRACT_NAME} deployment transaction hash: {tx_hash}")
