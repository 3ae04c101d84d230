"""
ABI and bytecode lookup by contract name
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from composer.errors import ArtifactError

CONTRACTS_DIR = Path(__file__).resolve().parent.parent / 'contracts'

logger = logging.getLogger(__name__)


class AbiBinProvider:
    """Loads contract ABIs (<name>.abi) and bytecode (<name>.bin) from disk"""

    def __init__(self, abi_dir: Optional[str] = None, bin_dir: Optional[str] = None):
        # CONTRACTS_DIR in the environment replaces the bundled artifacts
        base = Path(os.getenv('CONTRACTS_DIR') or CONTRACTS_DIR)
        self.abi_dir = Path(abi_dir) if abi_dir else base / 'abi'
        self.bin_dir = Path(bin_dir) if bin_dir else base / 'bin'
        self._abis: Dict[str, List[dict]] = {}
        self._bins: Dict[str, str] = {}

    def add_abi(self, contract_name: str, abi):
        """Register an ABI in memory; accepts a list or a JSON string"""
        if isinstance(abi, str):
            abi = json.loads(abi)
        self._abis[contract_name] = abi

    def add_bin(self, contract_name: str, bytecode: str):
        self._bins[contract_name] = self._normalize_bin(bytecode)

    def get_abi(self, contract_name: str) -> List[dict]:
        if contract_name in self._abis:
            return self._abis[contract_name]

        path = self.abi_dir / f'{contract_name}.abi'
        if not path.is_file():
            raise ArtifactError(f"No ABI found for {contract_name} at {path}")

        with open(path, encoding='utf-8') as f:
            try:
                abi = json.load(f)
            except json.JSONDecodeError as e:
                raise ArtifactError(f"Invalid ABI file {path}: {e}") from e

        logger.debug(f"Loaded ABI for {contract_name} from {path}")
        self._abis[contract_name] = abi
        return abi

    def get_bin(self, contract_name: str) -> str:
        if contract_name in self._bins:
            return self._bins[contract_name]

        path = self.bin_dir / f'{contract_name}.bin'
        if not path.is_file():
            raise ArtifactError(f"No bytecode found for {contract_name} at {path}")

        bytecode = self._normalize_bin(path.read_text(encoding='utf-8'))
        if bytecode == '0x':
            raise ArtifactError(f"Bytecode file {path} is empty")

        logger.debug(f"Loaded bytecode for {contract_name} from {path}")
        self._bins[contract_name] = bytecode
        return bytecode

    @staticmethod
    def _normalize_bin(bytecode: str) -> str:
        bytecode = bytecode.strip()
        return bytecode if bytecode.startswith('0x') else '0x' + bytecode
