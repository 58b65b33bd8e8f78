# mosaic/readme/core/deploy.py
"""
Latest deploy lookup.

The deploy pipeline keeps a single, always-fresh record in the gist under
a fixed file name, so "latest" means "the file with that exact name".
Its content is a JSON document of its own; a document that fails to
parse is skipped rather than failing the run.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from pydantic import ValidationError

from mosaic.readme.contracts.gist import DeployRecord, GistFile
from mosaic.readme.contracts.report import DeployInfo
from mosaic.readme.core.gist import GistClient

logger = logging.getLogger(__name__)

DEPLOY_FILENAME = "mosaic_tile_nft_deploy.json"


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    UNPARSEABLE = "unparseable"


@dataclass(frozen=True)
class DeployLookup:
    """Outcome of searching a gist file map for the deploy record.

    ``info`` is zero-valued unless ``status`` is ``FOUND``.
    """

    status: LookupStatus
    info: DeployInfo = field(default_factory=DeployInfo)


def parse_deploy_record(content: str) -> DeployInfo:
    """Parse the embedded deploy document.

    Raises:
        pydantic.ValidationError: If the content is not a valid document.
    """
    record = DeployRecord.model_validate_json(content)
    return DeployInfo(
        timestamp=record.timestamp,
        mosaic_tile_address=record.mosaic_tile_address,
    )


def find_deploy_info(
    files: Mapping[str, GistFile], filename: str = DEPLOY_FILENAME
) -> DeployLookup:
    status = LookupStatus.NOT_FOUND
    for name, file in files.items():
        if name != filename:
            continue
        try:
            info = parse_deploy_record(file.content)
        except ValidationError as exc:
            logger.warning("Skipping unparseable deploy file %s: %s", name, exc)
            status = LookupStatus.UNPARSEABLE
            continue
        return DeployLookup(status=LookupStatus.FOUND, info=info)

    if status is LookupStatus.NOT_FOUND:
        logger.info("No %s in gist, deploy info left empty", filename)
    return DeployLookup(status=status)


def get_latest_deploy_info(
    client: GistClient, gist_id: str, filename: str = DEPLOY_FILENAME
) -> DeployInfo:
    """Fetch the gist and return its deploy info (zero value when absent).

    Transport and top-level decode errors propagate; a missing or
    unparseable deploy file does not.
    """
    files = client.get_files(gist_id)
    return find_deploy_info(files, filename).info
