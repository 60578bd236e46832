import json

import pytest

from landmark_pf import Landmark, RandomSource
from landmark_pf.autograder import Map_filename


@pytest.fixture
def rng():
    return RandomSource(2016)


@pytest.fixture
def landmarks():
    return [Landmark(1, 5.0, 0.0), Landmark(2, 0.0, 3.0), Landmark(3, 20.0, 20.0), Landmark(4, -3.0, -4.0)]


@pytest.fixture
def map_file(tmp_path, landmarks):
    fname = tmp_path / 'map.json'
    fname.write_text(json.dumps({
        'width': 25,
        'height': 25,
        'landmarks': [{'id': lm.id, 'x': lm.x, 'y': lm.y} for lm in landmarks],
    }))
    return str(fname)


@pytest.fixture
def arena_map_file():
    return Map_filename
