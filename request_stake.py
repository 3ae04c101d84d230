#!/usr/bin/env python3
"""
Staker request
Approves the GatewayComposer for value token and calls requestStake.

Usage:
- Set ORIGIN_RPC_URL, OWNER_ADDRESS, VALUE_TOKEN_ADDRESS, BRANDED_TOKEN_ADDRESS,
  GATEWAY_COMPOSER_ADDRESS, GATEWAY_ADDRESS, BENEFICIARY_ADDRESS,
  STAKE_AMOUNT_WEI, MINT_AMOUNT_WEI in .env
- Optional: STAKE_GAS_PRICE, STAKE_GAS_LIMIT, STAKER_NONCE, REQUIRE_APPROVAL, PRIVATE_KEY
- Run: python request_stake.py
"""

import asyncio

from dotenv import load_dotenv

from composer import AbiBinProvider, ChainClient, ComposerError, StakeOrchestrator
from composer.config import load_stake_config, load_tx_options
from composer.logging_config import setup_logging


async def main():
    load_dotenv()
    logger = setup_logging()

    try:
        chain = ChainClient.from_env()
        stake = load_stake_config()

        print("🥩 GATEWAY COMPOSER STAKE REQUEST")
        print("=" * 50)
        print(f"   Owner:            {stake.owner}")
        print(f"   GatewayComposer:  {stake.gateway_composer}")
        print(f"   Gateway:          {stake.gateway}")
        print(f"   Stake VT (wei):   {stake.stake_amount}")
        print(f"   Mint BT (wei):    {stake.mint_amount}")
        print(f"   Beneficiary:      {stake.beneficiary}")
        print(f"   Staker nonce:     {stake.staker_nonce}")
        print("=" * 50)

        confirm = input("\n⚠️  This will send approve and requestStake transactions! Continue? (y/N): ")
        if confirm.lower() != 'y':
            print("❌ Stake request cancelled")
            return

        artifacts = AbiBinProvider()
        staker = StakeOrchestrator(
            chain, stake.value_token, stake.branded_token, stake.gateway_composer,
            require_approval=stake.require_approval, artifacts=artifacts
        )
        result = await staker.request_stake(
            artifacts.get_abi('EIP20Token'),
            stake.owner,
            stake.stake_amount,
            stake.mint_amount,
            stake.gateway,
            stake.gas_price,
            stake.gas_limit,
            stake.beneficiary,
            stake.staker_nonce,
            load_tx_options(),
        )

        print(f"\n✅ approve status: {result.approve_status}")
        print(f"✅ requestStake status: {result.request_stake_status} ({result.phase.value})")

    except ValueError as e:
        print(f"\n❌ CONFIGURATION ERROR: {e}")
        print("   Please ensure you have a .env file with all required variables.")
    except ComposerError as e:
        logger.error(f"Stake request failed: {e}")
        print(f"\n❌ STAKE REQUEST FAILED: {e}")


if __name__ == "__main__":
    asyncio.run(main())
