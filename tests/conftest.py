"""Shared pytest fixtures."""

import os

import pytest

from backend import resources


ASSET_PATH = os.path.join(resources.DATA_DIR, "article-character-tables.txt")


@pytest.fixture(autouse=True)
def fresh_text_cache():
    """Each test starts and ends with an empty resource cache."""
    resources.clear_cache()
    yield
    resources.clear_cache()


@pytest.fixture
def asset_text():
    with open(ASSET_PATH, "r", encoding="utf-8", newline="") as f:
        return f.read()
