"""Shared fixtures for the editor tests."""

import pytest

from helpers import RecordingRenderer, make_editor


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def editor():
    return make_editor(["hello", "world"])
