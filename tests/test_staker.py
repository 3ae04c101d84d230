"""
Tests for StakeOrchestrator and StakeHelper
"""
import logging

import pytest

from composer import StakeHelper, StakeOrchestrator, StakePhase, SubmissionError
from conftest import (
    BENEFICIARY,
    BRANDED_TOKEN,
    GATEWAY,
    GATEWAY_COMPOSER,
    OWNER,
    VALUE_TOKEN,
    FakeChainClient,
)

STAKE_AMOUNT = 10 ** 18
MINT_AMOUNT = 5 * 10 ** 18
GAS_PRICE = 1_000_000_000
GAS_LIMIT = 200_000
STAKER_NONCE = 1


async def run_request_stake(chain, artifacts, tx_options=None, require_approval=False):
    staker = StakeOrchestrator(
        chain, VALUE_TOKEN, BRANDED_TOKEN, GATEWAY_COMPOSER,
        require_approval=require_approval, artifacts=artifacts
    )
    return await staker.request_stake(
        artifacts.get_abi('EIP20Token'), OWNER, STAKE_AMOUNT, MINT_AMOUNT, GATEWAY,
        GAS_PRICE, GAS_LIMIT, BENEFICIARY, STAKER_NONCE, tx_options
    )


@pytest.mark.asyncio
async def test_approve_then_request_stake(artifacts):
    chain = FakeChainClient()

    result = await run_request_stake(chain, artifacts)

    assert chain.sent_names() == ['approve', 'requestStake']
    approve, request_stake = chain.built
    assert approve['address'] == VALUE_TOKEN
    assert approve['args'] == [GATEWAY_COMPOSER, STAKE_AMOUNT]
    assert approve['abi'] == artifacts.get_abi('EIP20Token')
    assert request_stake['address'] == GATEWAY_COMPOSER
    assert request_stake['args'] == [
        STAKE_AMOUNT, MINT_AMOUNT, GATEWAY, GAS_PRICE, GAS_LIMIT, BENEFICIARY, STAKER_NONCE
    ]
    assert result.phase == StakePhase.DONE
    assert result.approve_status is True
    assert result.request_stake_status is True


@pytest.mark.asyncio
async def test_request_stake_sent_after_failed_approve(artifacts):
    """A failed approve receipt does not stop requestStake"""
    chain = FakeChainClient(receipts={'approve': {'status': False}, 'requestStake': {'status': True}})

    result = await run_request_stake(chain, artifacts)

    assert chain.sent_names() == ['approve', 'requestStake']
    assert result.approve_status is False
    assert result.request_stake_status is True
    assert result.approve_receipt['status'] is False
    assert result.request_stake_receipt['status'] is True


@pytest.mark.asyncio
async def test_require_approval_skips_request_stake(artifacts):
    chain = FakeChainClient(receipts={'approve': {'status': 0}})

    result = await run_request_stake(chain, artifacts, require_approval=True)

    assert chain.sent_names() == ['approve']
    assert result.phase == StakePhase.SKIPPED
    assert result.request_stake_receipt is None
    assert result.request_stake_status is None


@pytest.mark.asyncio
async def test_require_approval_continues_after_successful_approve(artifacts):
    chain = FakeChainClient()

    result = await run_request_stake(chain, artifacts, require_approval=True)

    assert chain.sent_names() == ['approve', 'requestStake']
    assert result.phase == StakePhase.DONE


@pytest.mark.asyncio
async def test_approve_error_aborts_sequence(artifacts):
    error = SubmissionError("connection refused")
    chain = FakeChainClient(errors={'approve': error})

    with pytest.raises(SubmissionError) as exc_info:
        await run_request_stake(chain, artifacts)

    assert exc_info.value is error
    assert chain.sent_names() == ['approve']


@pytest.mark.asyncio
async def test_request_stake_error_propagates_after_approve(artifacts, caplog):
    chain = FakeChainClient(errors={'requestStake': SubmissionError("rejected")})

    with caplog.at_level(logging.ERROR, logger='composer'):
        with pytest.raises(SubmissionError, match="rejected"):
            await run_request_stake(chain, artifacts)

    # approve already went through and is not revoked
    assert chain.sent_names() == ['approve', 'requestStake']
    assert any('requesting_stake' in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_owner_is_default_sender(artifacts):
    chain = FakeChainClient()

    await run_request_stake(chain, artifacts)

    assert [options.from_address for _, options in chain.sent] == [OWNER, OWNER]


@pytest.mark.asyncio
async def test_tx_options_apply_to_both_transactions(artifacts):
    chain = FakeChainClient()

    await run_request_stake(chain, artifacts, {'from': BENEFICIARY, 'gas': 300_000})

    for _, options in chain.sent:
        assert options.from_address == BENEFICIARY
        assert options.gas == 300_000


@pytest.mark.asyncio
async def test_receipt_statuses_are_logged(artifacts, caplog):
    chain = FakeChainClient(receipts={'approve': {'status': 0}})

    with caplog.at_level(logging.INFO, logger='composer'):
        await run_request_stake(chain, artifacts)

    messages = [record.getMessage() for record in caplog.records]
    assert 'approveForValueToken status: False' in messages
    assert 'requestStake status: True' in messages
    assert any(BRANDED_TOKEN in message and GATEWAY_COMPOSER in message for message in messages)


@pytest.mark.asyncio
async def test_stake_helper_single_approve(artifacts):
    chain = FakeChainClient()
    helper = StakeHelper(chain, GATEWAY_COMPOSER, artifacts)

    receipt = await helper.approve_for_value_token(
        VALUE_TOKEN, artifacts.get_abi('EIP20Token'), STAKE_AMOUNT, {'from': OWNER}
    )

    assert receipt['status'] == 1
    assert chain.sent_names() == ['approve']
    assert chain.sent[0][1].from_address == OWNER


@pytest.mark.asyncio
async def test_stake_helper_request_stake_uses_chain_override(artifacts):
    chain = FakeChainClient()
    other_chain = FakeChainClient()
    helper = StakeHelper(chain, GATEWAY_COMPOSER, artifacts)

    await helper.request_stake(
        OWNER, STAKE_AMOUNT, MINT_AMOUNT, GATEWAY, GAS_PRICE, GAS_LIMIT,
        BENEFICIARY, STAKER_NONCE, chain=other_chain
    )

    assert chain.sent == []
    assert other_chain.sent_names() == ['requestStake']
    assert other_chain.sent[0][1].from_address == OWNER


@pytest.mark.asyncio
async def test_explicit_nonce_advances_for_request_stake(artifacts):
    chain = FakeChainClient()

    await run_request_stake(chain, artifacts, {'nonce': 5})

    assert [options.nonce for _, options in chain.sent] == [5, 6]


@pytest.mark.asyncio
async def test_nonce_left_to_client_when_not_given(artifacts):
    chain = FakeChainClient()

    await run_request_stake(chain, artifacts, {'gas': 300_000})

    assert [options.nonce for _, options in chain.sent] == [None, None]
