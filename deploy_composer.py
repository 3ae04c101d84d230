#!/usr/bin/env python3
"""
GatewayComposer Deployer
Deploys a GatewayComposer for a staker on the origin chain.

Usage:
- Set up your .env file with ORIGIN_RPC_URL, DEPLOYER_ADDRESS, OWNER_ADDRESS,
  VALUE_TOKEN_ADDRESS, BRANDED_TOKEN_ADDRESS (and PRIVATE_KEY to sign locally)
- Put the compiled GatewayComposer.bin under composer/contracts/bin or CONTRACTS_DIR
- Run: python deploy_composer.py
"""

import asyncio

from dotenv import load_dotenv

from composer import ChainClient, ComposerDeployer, ComposerError
from composer.config import load_setup_config, load_tx_options
from composer.logging_config import setup_logging


async def main():
    load_dotenv()
    logger = setup_logging()

    try:
        chain = ChainClient.from_env()
        config = load_setup_config()
        ComposerDeployer.validate_config(config)

        print("🚀 GATEWAY COMPOSER DEPLOYER")
        print("=" * 50)
        print(f"✅ Connected to origin chain (Chain ID: {chain.w3.eth.chain_id})")
        print(f"   Deployer:      {config.deployer or chain.default_sender}")
        print(f"   Owner:         {config.owner}")
        print(f"   Value token:   {config.value_token}")
        print(f"   Branded token: {config.branded_token}")
        print("=" * 50)

        confirm = input("\n⚠️  This will deploy a GatewayComposer to the network! Continue? (y/N): ")
        if confirm.lower() != 'y':
            print("❌ Deployment cancelled")
            return

        deployer = ComposerDeployer(chain)
        result = await deployer.setup(config, load_tx_options())

        if result.status:
            print("\n🎉 DEPLOYMENT SUCCESSFUL!")
            print(f"   GatewayComposer: {result.address}")
            print(f"   Transaction Hash: {result.transaction_hash}")
        else:
            print("\n❌ DEPLOYMENT FAILED ON-CHAIN.")
            print(f"   Transaction Hash: {result.transaction_hash}")

    except ValueError as e:
        print(f"\n❌ CONFIGURATION ERROR: {e}")
        print("   Please ensure you have a .env file with all required variables.")
    except ComposerError as e:
        logger.error(f"Deployment failed: {e}")
        print(f"\n❌ DEPLOYMENT FAILED: {e}")


if __name__ == "__main__":
    asyncio.run(main())
