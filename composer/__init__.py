"""
GatewayComposer deployment and staking helpers
"""

from .errors import ArtifactError, ComposerError, ConfigError, SubmissionError
from .models import (
    DEFAULT_DEPLOY_OPTIONS,
    DeploymentResult,
    SetupConfig,
    StakePhase,
    StakeRequestResult,
    TransactionOptions,
)
from .services import AbiBinProvider, ChainClient, StakeHelper
from .composer_deployer import ComposerDeployer
from .staker import StakeOrchestrator

__all__ = [
    'ArtifactError',
    'ComposerError',
    'ConfigError',
    'SubmissionError',
    'DEFAULT_DEPLOY_OPTIONS',
    'DeploymentResult',
    'SetupConfig',
    'StakePhase',
    'StakeRequestResult',
    'TransactionOptions',
    'AbiBinProvider',
    'ChainClient',
    'StakeHelper',
    'ComposerDeployer',
    'StakeOrchestrator',
]
