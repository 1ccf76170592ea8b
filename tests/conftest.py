"""Shared fixtures for EchoPath tests."""

import os
import random

import pytest

from echopath.classroom import GameEngine, build_curriculum


@pytest.fixture(autouse=True)
def clean_echopath_env(monkeypatch):
    """Keep ECHOPATH_* variables (including ones a .env load adds) out of other tests."""
    for key in list(os.environ):
        if key.startswith("ECHOPATH_"):
            monkeypatch.delenv(key)
    yield
    for key in list(os.environ):
        if key.startswith("ECHOPATH_"):
            del os.environ[key]


@pytest.fixture
def dog_curriculum():
    return build_curriculum("Dog")


@pytest.fixture
def engine():
    return GameEngine("Dog", rng=random.Random(7))
