"""
Pytest fixtures for inflector tests.
"""
from __future__ import annotations

import pytest

import word_inflector
from word_inflector.inflector import Inflector


@pytest.fixture
def inflector():
    """A fresh inflector loaded with the default English rules."""
    return Inflector().reset_inflections()


@pytest.fixture
def empty_inflector():
    """An inflector with no rules registered."""
    return Inflector()


@pytest.fixture(autouse=True)
def reset_default_inflector():
    """Reset the shared module-level inflector before each test."""
    word_inflector.reset_inflections()
    yield


@pytest.fixture
def rules_file(tmp_path):
    """Write a rule-set YAML file and return its path."""
    def _write(content: str, name: str = "rules.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
