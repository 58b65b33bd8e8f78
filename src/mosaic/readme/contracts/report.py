# mosaic/readme/contracts/report.py
"""
Report contracts.

The report is the single record rendered into the README template. It is
built once per run from the component fingerprints, the latest deploy
info and the role addresses, then handed to the renderer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ROLES = ("deployer", "minter", "owner", "user")


@dataclass(frozen=True)
class ComponentHashes:
    """Short content fingerprints of the hashed components."""

    frontend: str
    mosaic_tile: str


@dataclass(frozen=True)
class DeployInfo:
    """Latest contract deployment.

    Both fields are empty when the gist holds no usable deploy record.
    """

    timestamp: str = ""
    mosaic_tile_address: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.timestamp or self.mosaic_tile_address)


@dataclass(frozen=True)
class BalanceInfo:
    address: str = ""
    # never populated; rendered as an empty column
    balance: str = ""


@dataclass(frozen=True)
class TemplateData:
    """Root record handed to the README template.

    Attributes:
        last_updated: RFC3339 UTC timestamp of this run.
        hashes: Component fingerprints.
        deploy: Latest deploy info (may be zero-valued).
        balances: Role name to address/balance, keyed by :data:`ROLES`.
    """

    last_updated: str
    hashes: ComponentHashes
    deploy: DeployInfo
    balances: dict[str, BalanceInfo] = field(default_factory=dict)

    def to_context(self) -> dict[str, Any]:
        """Expose the record under the names used in README templates.

        Templates address fields as ``{{ Hashes.Frontend }}`` or
        ``{{ Balances["owner"].Address }}``.
        """
        return {
            "LastUpdated": self.last_updated,
            "Hashes": {
                "Frontend": self.hashes.frontend,
                "MosaicTile": self.hashes.mosaic_tile,
            },
            "Deploy": {
                "Timestamp": self.deploy.timestamp,
                "MosaicTileAddress": self.deploy.mosaic_tile_address,
            },
            "Balances": {
                role: {"Address": info.address, "Balance": info.balance}
                for role, info in sorted(self.balances.items())
            },
        }
