"""
Data models for composer deployments and stake requests
"""

from .transaction import DEFAULT_DEPLOY_OPTIONS, SetupConfig, TransactionOptions
from .results import DeploymentResult, StakePhase, StakeRequestResult

__all__ = [
    'DEFAULT_DEPLOY_OPTIONS',
    'SetupConfig',
    'TransactionOptions',
    'DeploymentResult',
    'StakePhase',
    'StakeRequestResult',
]
