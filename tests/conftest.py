"""Pytest configuration shared by unit and integration tests"""

import sys
from pathlib import Path

import pytest

# Add project root to path for minisearch imports without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from minisearch.tfidf.engine import SearchEngine


@pytest.fixture
def engine():
    """Empty search engine with default settings"""
    return SearchEngine()


@pytest.fixture
def pets_engine():
    """
    Three-document corpus:
    - 0: "Cats and Dogs" / "Cats are great pets."
    - 1: "Dog Training" / "Training a dog takes patience."
    - 2: "Astronomy" / "Stars and planets are far away."
    """
    engine = SearchEngine()
    engine.add_document("Cats and Dogs", "Cats are great pets.")
    engine.add_document("Dog Training", "Training a dog takes patience.", "https://example.com/dogs")
    engine.add_document("Astronomy", "Stars and planets are far away.")
    return engine
