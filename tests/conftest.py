"""Shared fixtures: the sample palette and an isolated settings environment."""

import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / 'fixtures'
SAMPLE_PALETTE = FIXTURES_DIR / 'palette.json'

SETTING_KEYS = ('PALETTE_SIZE', 'PALETTE_SEED', 'PALETTE_SHADE_STEPS')


@pytest.fixture
def sample_palette_path() -> Path:
    return SAMPLE_PALETTE


@pytest.fixture
def sample_palette_data() -> list[dict]:
    return json.loads(SAMPLE_PALETTE.read_text(encoding='utf-8'))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run from an empty repo root so no real .env or PALETTE_* value leaks in.

    setenv-then-delenv makes monkeypatch remove anything load_env() writes
    for these keys once the test finishes.
    """
    for key in SETTING_KEYS:
        monkeypatch.setenv(key, '')
        monkeypatch.delenv(key)
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path
