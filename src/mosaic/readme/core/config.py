# mosaic/readme/core/config.py
"""
Configuration for the README generator.

Everything is read from the environment (or a local ``.env``) once at
startup and passed explicitly to the steps that need it. Values are used
verbatim; missing variables fall back to the defaults below.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_format: str = Field(default="text", description="'text' or 'json'")

    # Gist holding the deploy records
    gist_id: str = ""
    github_token: str = Field(default="", repr=False)
    github_api_url: str = "https://api.github.com"
    http_timeout: float = 5.0

    # Role addresses shown in the balances table
    deployer_address: str = ""
    minter_address: str = ""
    owner_address: str = ""
    user_address: str = ""

    # Inputs and output, relative to the working directory
    frontend_dir: Path = Path("frontend")
    contract_dir: Path = Path("contracts/mosaic_tile_nft")
    template_path: Path = Path("README.template.md")
    output_path: Path = Path("README.md")

    def role_addresses(self) -> dict[str, str]:
        return {
            "deployer": self.deployer_address,
            "minter": self.minter_address,
            "owner": self.owner_address,
            "user": self.user_address,
        }
