"""Fixtures for natural_order tests"""

import json
from pathlib import Path

import pytest

__all__ = [
    "decimal_separator_strings",
    "file_names",
    "version_strings",
]


def read_json(name):
    path = (Path(__file__).parent / name).with_suffix(".json")
    with path.open(encoding="utf-8") as file:
        return json.load(file)


@pytest.fixture(scope="module")
def version_strings():
    return read_json("version_strings")


@pytest.fixture(scope="module")
def decimal_separator_strings():
    return read_json("decimal_separator_strings")


@pytest.fixture(scope="module")
def file_names():
    return read_json("file_names")
