"""Public contracts for the README generator."""
from mosaic.readme.contracts.gist import DeployRecord, Gist, GistFile
from mosaic.readme.contracts.report import (
    ROLES,
    BalanceInfo,
    ComponentHashes,
    DeployInfo,
    TemplateData,
)

__all__ = [
    "ROLES",
    "BalanceInfo", "ComponentHashes", "DeployInfo", "TemplateData",
    "DeployRecord", "Gist", "GistFile",
]
