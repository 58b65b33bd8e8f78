# tests/conftest.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from mosaic.readme.core.config import Settings

DEPLOY_CONTENT = json.dumps(
    {
        "timestamp": "2024-01-01T00:00:00Z",
        "job": {"data": {"mosaic_tile_address": "0xabc"}},
    }
)


def gist_payload(files: dict[str, str]) -> dict[str, Any]:
    return {
        "id": "gist123",
        "files": {
            name: {"filename": name, "type": "application/json", "content": content}
            for name, content in files.items()
        },
    }


@pytest.fixture
def mock_httpx(monkeypatch) -> Callable[[Callable[[httpx.Request], httpx.Response]], list]:
    """Route every ``httpx.Client`` through a handler; returns seen requests."""

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> list:
        seen: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        transport = httpx.MockTransport(recording)
        real_client = httpx.Client
        monkeypatch.setattr(
            httpx,
            "Client",
            lambda **kw: real_client(transport=transport, **kw),
        )
        return seen

    return install


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A minimal project tree with both components and a template."""
    frontend = tmp_path / "frontend"
    (frontend / "src").mkdir(parents=True)
    (frontend / "package.json").write_text('{"name": "mosaic"}\n', encoding="utf-8")
    (frontend / "src" / "App.tsx").write_text("export default 1;\n", encoding="utf-8")

    contract = tmp_path / "contracts" / "mosaic_tile_nft"
    (contract / "src").mkdir(parents=True)
    (contract / "Cargo.toml").write_text('[package]\nname = "mosaic"\n', encoding="utf-8")
    (contract / "src" / "lib.rs").write_text("pub mod contract;\n", encoding="utf-8")

    (tmp_path / "README.template.md").write_text(
        "Updated {{ LastUpdated }}\n"
        "frontend={{ Hashes.Frontend }} tile={{ Hashes.MosaicTile }}\n"
        "deployed={{ Deploy.Timestamp }} at={{ Deploy.MosaicTileAddress }}\n"
        "{% for role, data in Balances.items() %}"
        "{{ role }}:{{ data.Address }}:{{ data.Balance }}\n"
        "{% endfor %}",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def settings(project: Path) -> Settings:
    return Settings(
        _env_file=None,
        gist_id="gist123",
        github_token="secret",
        deployer_address="stars1deployer",
        minter_address="stars1minter",
        owner_address="stars1owner",
        user_address="stars1user",
        frontend_dir=project / "frontend",
        contract_dir=project / "contracts" / "mosaic_tile_nft",
        template_path=project / "README.template.md",
        output_path=project / "README.md",
    )
