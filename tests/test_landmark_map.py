import pytest

from landmark_pf import Landmark, LandmarkMap


def test_load_json(map_file, landmarks):
    landmark_map = LandmarkMap(map_file)
    assert landmark_map.landmarks == tuple(landmarks)
    assert len(landmark_map) == 4
    assert (landmark_map.width, landmark_map.height) == (25, 25)


def test_load_text(tmp_path):
    fname = tmp_path / 'map_data.txt'
    fname.write_text("92.064\t-34.777\t1\n61.109\t-47.132\t2\n\n17.42 -4.5993 3\n")
    landmark_map = LandmarkMap(str(fname))
    assert list(landmark_map) == [Landmark(1, 92.064, -34.777), Landmark(2, 61.109, -47.132),
                                  Landmark(3, 17.42, -4.5993)]
    assert landmark_map.width == 92.064


def test_arena_map(arena_map_file):
    landmark_map = LandmarkMap(arena_map_file)
    assert len(landmark_map) == 25
    assert landmark_map.landmarks[0] == Landmark(1, 2.0, 2.0)


@pytest.mark.parametrize('content', [
    '1.0 2.0\n',
    'a b c\n',
    '{"landmarks": [{"x": 1}]}',
    '{"width": 3',
])
def test_bad_file(tmp_path, content):
    fname = tmp_path / 'bad_map'
    fname.write_text(content)
    with pytest.raises(ValueError, match='Cannot parse file'):
        LandmarkMap(str(fname))
