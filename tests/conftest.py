"""Shared pytest fixtures for all tests."""

import io
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient
from openpyxl import Workbook

from tabprobe.api import create_app
from tabprobe.core.config import Settings

SAMPLE_CSV = (
    b"id,name,score,active,joined\n"
    b"1,Alice,90.5,true,2024-01-01\n"
    b"2,Bob,abc,false,2024-02-01\n"
    b"3,Carol,70,TRUE,2024-03-01\n"
)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings isolated from the environment and .env files."""
    return Settings(_env_file=None, upload_dir=tmp_path / "uploads")


@pytest.fixture
def sample_csv() -> bytes:
    """Small CSV with number, string, boolean and date columns."""
    return SAMPLE_CSV


@pytest.fixture
def make_xlsx() -> Callable[..., bytes]:
    """Build an xlsx workbook in memory.

    Usage:
        make_xlsx([["a", "b"], [1, 2]])
        make_xlsx([["a"], [1]], extra_sheets={"Other": [["x"], ["y"]]})
    """

    def _make(
        rows: Sequence[Sequence[Any]],
        extra_sheets: dict[str, Sequence[Sequence[Any]]] | None = None,
    ) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = "Data"
        for row in rows:
            sheet.append(list(row))
        for title, sheet_rows in (extra_sheets or {}).items():
            extra = workbook.create_sheet(title)
            for row in sheet_rows:
                extra.append(list(row))

        buffer = io.BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()

    return _make


@pytest.fixture
def test_client(settings: Settings) -> Iterator[TestClient]:
    """Client for an app created with isolated settings."""
    app = create_app(settings)
    with TestClient(app) as client:
        yield client
