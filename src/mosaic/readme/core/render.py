# mosaic/readme/core/render.py
"""
README rendering.

Templates are Jinja2 files read from disk. Names resolve against
:meth:`TemplateData.to_context`, e.g.::

    Last updated: {{ LastUpdated }}
    | Frontend | `{{ Hashes.Frontend }}` |
    {% for role, data in Balances.items() %}| {{ role }} | `{{ data.Address }}` | {{ data.Balance }} |
    {% endfor %}

Undefined names are errors rather than silently rendering empty.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import TextIO

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from mosaic.readme.contracts.report import (
    ROLES,
    BalanceInfo,
    ComponentHashes,
    DeployInfo,
    TemplateData,
)
from mosaic.readme.core.config import Settings

logger = logging.getLogger(__name__)

RFC3339_UTC = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as RFC3339 in UTC with second precision."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(RFC3339_UTC)


def build_template_data(
    hashes: ComponentHashes,
    deploy: DeployInfo,
    settings: Settings,
    *,
    now: datetime | None = None,
) -> TemplateData:
    addresses = settings.role_addresses()
    return TemplateData(
        last_updated=format_timestamp(now or datetime.now(timezone.utc)),
        hashes=hashes,
        deploy=deploy,
        balances={role: BalanceInfo(address=addresses[role]) for role in ROLES},
    )


def detect_newline(path: Path) -> str:
    """Return the line ending used by the file at ``path`` (LF if unknown)."""
    if not path.is_file():
        return "\n"
    with path.open("rb") as fh:
        head = fh.read(64 * 1024)
    return "\r\n" if b"\r\n" in head else "\n"


def _create_jinja_env(search_path: Path, newline: str = "\n") -> Environment:
    return Environment(
        loader=FileSystemLoader(str(search_path)),
        newline_sequence=newline,
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def load_template(path: Path | str) -> Template:
    """Load and compile the template at ``path``.

    Raises:
        jinja2.TemplateNotFound: If the file does not exist.
        jinja2.TemplateSyntaxError: If the template does not compile.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    path = Path(path)
    env = _create_jinja_env(path.parent, detect_newline(path))
    template = env.get_template(path.name)
    logger.debug("Loaded template %s", path)
    return template


def render_report(template: Template, data: TemplateData, stream: TextIO) -> None:
    """Stream the rendered template into ``stream``.

    Line endings follow the template, so ``stream`` should not translate
    newlines (open files with ``newline=""``).

    Raises:
        jinja2.TemplateError: If rendering fails (e.g. an undefined name).
    """
    template.stream(data.to_context()).dump(stream)
