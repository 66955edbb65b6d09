from pathlib import Path

import pytest

from railnet_pipeline import read_edges, read_stations

SAMPLEDATA = Path(__file__).parent.parent / "sampledata"


@pytest.fixture
def stations_path():
    return SAMPLEDATA / "stations.json"


@pytest.fixture
def edges_path():
    return SAMPLEDATA / "edges.json"


@pytest.fixture
def stations(stations_path):
    return read_stations(stations_path)


@pytest.fixture
def edges(edges_path):
    return read_edges(edges_path)
