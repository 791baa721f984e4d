"""Shared fixtures for pipeline tests."""

import os
import sys

import pytest

# Ensure tests/pipeline/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_pipeline_collaborators import (  # noqa: E402
    FakeExtractorFactory,
    FakeFetcher,
    FakeGenerator,
)


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def fake_extractor_factory():
    return FakeExtractorFactory()


@pytest.fixture
def make_extractor_factory():
    """Return a callable building a FakeExtractorFactory that unpacks *files*."""
    def _make(files):
        return FakeExtractorFactory(files)
    return _make


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def recipe_dir(tmp_path):
    """A local starter recipe directory."""
    recipe = tmp_path / "whisk"
    (recipe / "templates").mkdir(parents=True)
    (recipe / "template.yml").write_text("name: Whisk\n")
    (recipe / "templates" / "page.twig").write_text("<main></main>")
    return recipe
