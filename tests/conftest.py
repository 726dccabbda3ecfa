"""
Shared fixtures.
"""

from pathlib import Path

import pytest

from mealscheduler.config import AppConfig, CongregationConfig, ServerConfig


INDEX_HTML = """<!DOCTYPE html>
<html>
  <body>
    <div id="root"></div>
    <script type="module" src="/src/main.tsx"></script>
  </body>
</html>
"""


@pytest.fixture
def dist_dir(tmp_path: Path) -> Path:
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<html><body>built shell</body></html>", encoding="utf-8")
    (dist / "assets" / "index.js").write_text("console.log('bundle');", encoding="utf-8")
    (dist / "favicon.ico").write_bytes(b"\x00\x00\x01\x00")
    return dist


@pytest.fixture
def client_dir(tmp_path: Path) -> Path:
    client = tmp_path / "client"
    client.mkdir()
    (client / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    return client


@pytest.fixture
def congregations():
    return [
        CongregationConfig(id=1, name="Maple Grove", access_code="maple123"),
        CongregationConfig(id=2, name="Riverside", access_code="river456"),
    ]


@pytest.fixture
def production_config(dist_dir, congregations) -> AppConfig:
    return AppConfig(
        timezone="Europe/Berlin",
        server=ServerConfig(mode="production", dist_dir=dist_dir),
        congregations=congregations,
    )


@pytest.fixture
def development_config(client_dir) -> AppConfig:
    return AppConfig(server=ServerConfig(mode="development", client_dir=client_dir))
