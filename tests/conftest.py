"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for imports in tests
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from composer import AbiBinProvider, TransactionOptions

OWNER = '0x' + '11' * 20
VALUE_TOKEN = '0x' + '22' * 20
BRANDED_TOKEN = '0x' + '33' * 20
DEPLOYER = '0x' + '44' * 20
GATEWAY_COMPOSER = '0x' + '55' * 20
GATEWAY = '0x' + '66' * 20
BENEFICIARY = '0x' + '77' * 20
COMPOSER_ADDRESS = '0xABC0000000000000000000000000000000000ABC'

GATEWAY_COMPOSER_BIN = '608060405234801561001057600080fd5b50'


class FakeChainClient:
    """Records calls and answers send() with canned receipts

    receipts / errors are keyed by method name, or 'deploy' for contract creation.
    """

    def __init__(self, receipts=None, errors=None):
        self.receipts = dict(receipts or {})
        self.errors = dict(errors or {})
        self.built = []
        self.sent = []
        self.hashes = []

    def deploy_call(self, abi, bytecode, args):
        call = {'name': 'deploy', 'abi': abi, 'bytecode': bytecode, 'args': list(args)}
        self.built.append(call)
        return call

    def method_call(self, abi, address, method, args):
        call = {'name': method, 'abi': abi, 'address': address, 'args': list(args)}
        self.built.append(call)
        return call

    async def send(self, call, tx_options=None, on_transaction_hash=None):
        options = TransactionOptions.coerce(tx_options)
        self.sent.append((call, options))
        if call['name'] in self.errors:
            raise self.errors[call['name']]

        tx_hash = '0x' + f'{len(self.sent):064x}'
        self.hashes.append(tx_hash)
        if on_transaction_hash is not None:
            on_transaction_hash(tx_hash)

        receipt = {'status': 1, 'transactionHash': tx_hash, 'contractAddress': None}
        receipt.update(self.receipts.get(call['name'], {}))
        return receipt

    def sent_names(self):
        return [call['name'] for call, _ in self.sent]


@pytest.fixture
def artifacts() -> AbiBinProvider:
    """Bundled ABIs plus an in-memory GatewayComposer bytecode"""
    provider = AbiBinProvider()
    provider.add_bin('GatewayComposer', GATEWAY_COMPOSER_BIN)
    return provider


@pytest.fixture
def fake_chain() -> FakeChainClient:
    return FakeChainClient(receipts={'deploy': {'contractAddress': COMPOSER_ADDRESS}})


@pytest.fixture
def setup_config() -> dict:
    return {
        'deployer': DEPLOYER,
        'owner': OWNER,
        'valueToken': VALUE_TOKEN,
        'brandedToken': BRANDED_TOKEN,
    }
