# mosaic/readme/core/gist.py
"""
Thin client for the GitHub gist API.

Contract::

    GET {base_url}/gists/{gist_id}
    Authorization: token <token>
    -> {"files": {"<name>": {"content": "<string>"}}}
"""
from __future__ import annotations

import json
import logging

import httpx
from pydantic import ValidationError

from mosaic.readme.contracts.gist import Gist, GistFile

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


class GistResponseError(ValueError):
    """Raised when a gist response body cannot be decoded."""


class GistClient:
    """Fetch gist file listings.

    There is no retry; transport errors surface as :class:`httpx.HTTPError`.
    The response status is not enforced: error bodies carry no ``files``
    and decode to an empty file map.
    """

    def __init__(
        self,
        *,
        token: str = "",
        base_url: str = DEFAULT_API_URL,
        timeout: float = 5.0,
    ) -> None:
        self._token = token
        self._base = base_url.rstrip("/")
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"token {self._token}"}

    def get_files(self, gist_id: str) -> dict[str, GistFile]:
        url = f"{self._base}/gists/{gist_id}"
        with httpx.Client(timeout=self._timeout) as client:
            try:
                resp = client.get(url, headers=self._headers())
            except httpx.HTTPError as exc:
                logger.warning("Gist request failed url=%s: %s", url, exc)
                raise

        if resp.is_error:
            logger.warning(
                "Gist request returned status=%s for %s", resp.status_code, url
            )

        gist = parse_gist(resp.content)
        logger.debug("Gist %s files: %s", gist_id, sorted(gist.files))
        return gist.files


def parse_gist(body: bytes | str) -> Gist:
    """Decode a gist API response body.

    A ``null`` body decodes as an empty gist.

    Raises:
        GistResponseError: If the body is not JSON or not gist-shaped.
    """
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise GistResponseError(f"invalid JSON in gist response: {exc}") from exc

    if payload is None:
        return Gist()

    try:
        return Gist.model_validate(payload)
    except ValidationError as exc:
        raise GistResponseError(f"unexpected gist response shape: {exc}") from exc
