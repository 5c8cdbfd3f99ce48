"""Shared test fixtures for wordblocks."""

import pytest

from wordblocks import Repository
from wordblocks.api import create_app
from wordblocks.config import Settings


@pytest.fixture
def repo():
    """Repository loaded with the reference dataset."""
    return Repository()


@pytest.fixture
def empty_repo():
    """Repository with no records."""
    return Repository(seed=False)


@pytest.fixture
def small_repo(empty_repo):
    """The dishonesty example: three morphemes and one word."""
    r = empty_repo
    r.create_morpheme("dis-", "prefix", 'Means "not"', ["disagree"])
    r.create_morpheme("honest", "root", "Truthful", ["honesty"])
    r.create_morpheme("-y", "suffix", "Quality of", ["honesty"])
    r.create_word(
        "dishonesty",
        "the quality of being deceitful",
        {"prefix": "dis-", "root": "honest", "suffix": "-y"},
    )
    return r


@pytest.fixture
def app(repo):
    app = create_app(repo, Settings())
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
