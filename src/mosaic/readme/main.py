# mosaic/readme/main.py
"""
Regenerate README.md from its template.

Steps run strictly in order: fingerprint the frontend and contract trees,
fetch the latest deploy info from the gist, render the template into the
output file. The first failing step aborts the run; the output file is
only touched once everything before it succeeded.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import httpx
from jinja2 import TemplateError

from mosaic.readme.contracts.report import ComponentHashes
from mosaic.readme.core.config import Settings
from mosaic.readme.core.deploy import get_latest_deploy_info
from mosaic.readme.core.gist import GistClient, GistResponseError
from mosaic.readme.core.hashing import calculate_directory_hash
from mosaic.readme.core.logging import configure_logging
from mosaic.readme.core.render import build_template_data, load_template, render_report

logger = logging.getLogger(__name__)


class UpdateError(RuntimeError):
    """A step of the README update failed."""

    def __init__(self, step: str, cause: BaseException) -> None:
        super().__init__(f"Error {step}: {cause}")
        self.step = step
        self.cause = cause


def run(settings: Settings) -> Path:
    """Regenerate the README described by ``settings``.

    Returns:
        The path of the written file.

    Raises:
        UpdateError: On the first failing step.
    """
    logger.info("Calculating component hashes...")
    try:
        frontend_hash = calculate_directory_hash(settings.frontend_dir)
    except OSError as exc:
        raise UpdateError("calculating frontend hash", exc) from exc

    try:
        mosaic_tile_hash = calculate_directory_hash(settings.contract_dir)
    except OSError as exc:
        raise UpdateError("calculating mosaic tile hash", exc) from exc

    hashes = ComponentHashes(frontend=frontend_hash, mosaic_tile=mosaic_tile_hash)
    logger.info(
        "Component hashes frontend=%s mosaic_tile=%s", frontend_hash, mosaic_tile_hash
    )

    logger.info("Getting latest deploy info...")
    client = GistClient(
        token=settings.github_token,
        base_url=settings.github_api_url,
        timeout=settings.http_timeout,
    )
    try:
        deploy = get_latest_deploy_info(client, settings.gist_id)
    except (httpx.HTTPError, GistResponseError) as exc:
        raise UpdateError("getting deploy info", exc) from exc

    data = build_template_data(hashes, deploy, settings)

    logger.info("Reading template %s...", settings.template_path)
    try:
        template = load_template(settings.template_path)
    except (TemplateError, OSError, UnicodeError) as exc:
        raise UpdateError("parsing template", exc) from exc

    logger.info("Writing %s...", settings.output_path)
    try:
        output = settings.output_path.open("w", encoding="utf-8", newline="")
    except OSError as exc:
        raise UpdateError("creating output file", exc) from exc

    with output:
        try:
            render_report(template, data, output)
        except (TemplateError, OSError, UnicodeError) as exc:
            raise UpdateError("executing template", exc) from exc

    return settings.output_path


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mosaic-readme", description=__doc__)
    parser.add_argument("--template", type=Path, help="README template path")
    parser.add_argument("--output", type=Path, help="Rendered README path")
    parser.add_argument("--frontend-dir", type=Path, help="Frontend tree to fingerprint")
    parser.add_argument("--contract-dir", type=Path, help="Contract tree to fingerprint")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    parser.add_argument(
        "--log-format", choices=["text", "json"], help="Log output format"
    )
    return parser


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides: dict[str, Any] = {
        "template_path": args.template,
        "output_path": args.output,
        "frontend_dir": args.frontend_dir,
        "contract_dir": args.contract_dir,
        "log_level": args.log_level,
        "log_format": args.log_format,
    }
    update = {k: v for k, v in overrides.items() if v is not None}
    return settings.model_copy(update=update) if update else settings


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = _apply_overrides(settings or Settings(), args)
    configure_logging(settings.log_level, settings.log_format)

    try:
        written = run(settings)
    except UpdateError as exc:
        logger.debug("Update failed", exc_info=exc.cause)
        print(exc)
        return 1

    print(f"{written} updated successfully")
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
