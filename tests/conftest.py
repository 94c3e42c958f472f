from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"
FIXTURE_FILES = sorted(FIXTURES_DIR.glob("*.sdp"))


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def read_fixture():
    """Lê um arquivo SDP de tests/fixtures pelo nome"""

    def _read(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")

    return _read


@pytest.fixture(params=FIXTURE_FILES, ids=lambda p: p.name)
def fixture_text(request) -> str:
    """Conteúdo de cada fixture SDP (parametrizado)"""
    return request.param.read_text(encoding="utf-8")
