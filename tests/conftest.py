"""Shared fixtures for s3upload tests."""

from __future__ import annotations

import pytest

_UPLOAD_ENV = (
    "S3_UPLOAD_BUCKET",
    "S3_UPLOAD_PATH",
    "S3_UPLOAD_KEY",
    "S3_UPLOAD_REGION",
    "S3_UPLOAD_DEBUG",
    "AWS_REGION",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # setenv first so anything load_dotenv writes is rolled back too
    for name in _UPLOAD_ENV:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def data_dir(tmp_path):
    """A small tree: a.txt, sub/b.txt, sub/deeper/c.txt and an empty dir."""
    root = tmp_path / "data"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.txt").write_text("b")
    (root / "sub" / "deeper" / "c.txt").write_text("c")
    return root
