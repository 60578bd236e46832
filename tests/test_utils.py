import math

import pytest

from landmark_pf import Observation, Particle, RandomSource
from landmark_pf.utils import (add_observation_noise, best_particle, compute_mean_pose, diff_heading,
                               rotate_point, write_particles)


def test_rotate_point():
    x, y = rotate_point(1.0, 0.0, math.pi / 2)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)


@pytest.mark.parametrize('h1, h2, expected', [
    (0.5, 0.2, 0.3),
    (math.pi - 0.1, -math.pi + 0.1, -0.2),
    (-math.pi + 0.1, math.pi - 0.1, 0.2),
    (math.pi, -math.pi, 0.0),
])
def test_diff_heading(h1, h2, expected):
    assert diff_heading(h1, h2) == pytest.approx(expected)


def test_mean_pose_of_identical_particles():
    particles = [Particle(2.0, 3.0, 0.5) for _ in range(10)]
    m_x, m_y, m_h, confident = compute_mean_pose(particles)
    assert (m_x, m_y) == pytest.approx((2.0, 3.0))
    assert m_h == pytest.approx(0.5)
    assert confident


def test_mean_pose_wraps_heading():
    particles = [Particle(0.0, 0.0, math.pi - 0.1), Particle(0.0, 0.0, -math.pi + 0.1)]
    m_h = compute_mean_pose(particles)[2]
    assert abs(diff_heading(m_h, math.pi)) < 1e-9


def test_mean_pose_weighted():
    particles = [Particle(0.0, 0.0, 0.0), Particle(4.0, 0.0, 0.0)]
    m_x, m_y, _, confident = compute_mean_pose(particles, [3.0, 1.0])
    assert (m_x, m_y) == pytest.approx((1.0, 0.0))
    assert not confident
    assert compute_mean_pose(particles, [0.0, 0.0]) == (-1, -1, 0, False)


def test_best_particle():
    particles = [Particle(0.0, 0.0, 0.0, 0.5), Particle(1.0, 0.0, 0.0, 2.0), Particle(2.0, 0.0, 0.0, 2.0)]
    assert best_particle(particles) is particles[1]
    assert best_particle([]) is None


def test_observation_noise_keeps_id():
    obs = add_observation_noise(Observation(4, 1.0, 2.0), [0.0, 0.0], RandomSource(1))
    assert obs == Observation(4, 1.0, 2.0)


def test_write_particles_appends(tmp_path):
    fname = str(tmp_path / 'particles.txt')
    particles = [Particle(1.0, 2.0, 0.5), Particle(-3.25, 4.0, -1.0)]
    write_particles(fname, particles)
    write_particles(fname, particles[:1])
    with open(fname) as datafile:
        assert datafile.read() == "1 2 0.5\n-3.25 4 -1\n1 2 0.5\n"
