"""Pytest configuration - consistent CWD and shared fixtures."""
from __future__ import annotations

import os
import random
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]


def pytest_sessionstart(session):
    os.chdir(ROOT)


# Fixtures used by multiple test files

@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture
def rng():
    """Seeded random source so failures reproduce."""
    return random.Random(1234)


@pytest.fixture
def fixed_noise():
    """Noise source returning preset weights regardless of coordinate."""
    def make(weights):
        values = np.asarray(weights, dtype=np.float64)

        def noise(coords):
            assert len(coords) == len(values)
            return values.copy()
        return noise
    return make


@pytest.fixture(scope="session")
def qt_app():
    """Application for QObject/QWidget tests, rendered offscreen."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
