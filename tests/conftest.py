"""Shared fixtures for the search engine tests."""

from types import SimpleNamespace

import pytest

import config
from vsm_search import TextCollection, Tokenizer


def make_config(**overrides):
    """Copy the settings module into a namespace and apply overrides."""
    settings = {key: getattr(config, key) for key in dir(config) if key.isupper()}
    settings.update(overrides)
    return SimpleNamespace(**settings)


FRUIT_PARAGRAPHS = ["apple apple banana", "banana cherry cherry"]

RIVER_PARAGRAPHS = [
    "The quick brown foxes jumped over the lazy dogs near the river bank.",
    "Brown bears fish in the river; bears love salmon and salmon love rivers.",
    "It is a cat.",
    "Quick thinking saved the river bank from floods, storms and thunder.",
    "Every autumn the salmon swim upstream.",
]


@pytest.fixture
def cfg():
    return make_config(VERBOSE=False)


@pytest.fixture
def tokenizer(cfg):
    return Tokenizer(cfg)


@pytest.fixture
def fruit_collection(cfg, tokenizer):
    return TextCollection([tokenizer.tokenize(p) for p in FRUIT_PARAGRAPHS], cfg, tokenizer=tokenizer)


@pytest.fixture
def river_collection(cfg, tokenizer):
    return TextCollection([tokenizer.tokenize(p) for p in RIVER_PARAGRAPHS], cfg, tokenizer=tokenizer)
