import math

from .errors import *
from .particle import Observation, Particle, ParticleSet
from .sampling import RandomSource
from .setting import *
from .utils import *

# id given to an observation with no landmark to match
UNASSOCIATED = -1


def _check_sigmas(sigmas, count, name):
    if len(sigmas) != count:
        raise ConfigError('%s needs %d standard deviations, got %d' % (name, count, len(sigmas)))
    for s in sigmas:
        if s < 0:
            raise ConfigError('%s standard deviation must be non-negative, got %r' % (name, s))


# ------------------------------------------------------------------------
def create_particles(count, x, y, theta, std, rng):
    """ Sample count particles around (x, y, theta), all with weight 1 """
    std_x, std_y, std_theta = std
    return [Particle(rng.normal(x, std_x), rng.normal(y, std_y), rng.normal(theta, std_theta), 1.0, i)
            for i in range(count)]


# ------------------------------------------------------------------------
def motion_update(particles, delta_t, std_pos, velocity, yaw_rate, rng):
    """ Particle filter motion update

        Arguments:
        particles -- input particle set represents belief p(x_{t-1} | u_{t-1})
                before motion update
        delta_t -- time between step t-1 and t [s]
        std_pos -- process noise [std x [m], std y [m], std theta [rad]]
        velocity -- velocity from t-1 to t [m/s]
        yaw_rate -- yaw rate from t-1 to t [rad/s]
        rng -- RandomSource for the process noise

        No return, particles are moved in place and their weights reset to 1
    """
    std_x, std_y, std_theta = std_pos
    for i in range(len(particles)):
        particle = particles[i]
        particle.move(velocity, yaw_rate, delta_t)
        particle.x = add_gaussian_noise(particle.x, std_x, rng)
        particle.y = add_gaussian_noise(particle.y, std_y, rng)
        particle.theta = add_gaussian_noise(particle.theta, std_theta, rng)
        particles.set_weight(i, 1.0)


# ------------------------------------------------------------------------
def landmarks_in_range(particle, landmarks, sensor_range):
    """ Map landmarks no further than sensor_range from the particle, in map order """
    return [lm for lm in landmarks if dist(particle.x, particle.y, lm.x, lm.y) <= sensor_range]


def transform_observations(particle, observations):
    """ Convert vehicle frame observations to map frame as seen from the particle

        Rotate by the particle heading, then translate by its position.
        Returns a new list with the same length, order and ids.
    """
    transformed = []
    for obs in observations:
        gx, gy = rotate_point(obs.x, obs.y, particle.theta)
        transformed.append(Observation(obs.id, particle.x + gx, particle.y + gy))
    return transformed


def associate_observations(candidates, observations, strict=False):
    """ Nearest neighbour data association

        Each observation is replaced by its closest candidate landmark: the id
        becomes the candidate's index and x, y the candidate's position. On a
        distance tie the earlier candidate wins.

        Arguments:
        candidates -- landmarks predicted to be visible, see landmarks_in_range()
        observations -- map frame observations
        strict -- raise EmptyCandidateSetError instead of marking observations
                UNASSOCIATED when there is nothing to match against

        Return: list of matched landmark positions, one per observation
    """
    if not candidates and observations:
        if strict:
            raise EmptyCandidateSetError('%d observations but no landmark in range' % len(observations))
        return [obs._replace(id=UNASSOCIATED) for obs in observations]

    associated = []
    for obs in observations:
        closest = None
        closest_distance = math.inf
        for j, lm in enumerate(candidates):
            d = dist(obs.x, obs.y, lm.x, lm.y)
            if d < closest_distance:
                closest = j
                closest_distance = d
        associated.append(Observation(closest, candidates[closest].x, candidates[closest].y))
    return associated


def observation_weight(observations, predicted, std_landmark):
    """ Product of the bivariate Gaussian densities of each observation
        around its associated landmark position

        Arguments:
        observations -- map frame observations (x, y)
        predicted -- associated landmark positions, the means (mux, muy)
        std_landmark -- [sigma x, sigma y]

        Return: unnormalized weight, 1.0 for no observations and 0.0 if any
                observation went unassociated
    """
    sigma_x, sigma_y = std_landmark
    norm = 1.0 / (2 * math.pi * sigma_x * sigma_y)
    weight = 1.0
    for obs, mu in zip(observations, predicted):
        if mu.id == UNASSOCIATED:
            return 0.0
        ex = ((obs.x - mu.x) ** 2) / (2 * sigma_x ** 2)
        ey = ((obs.y - mu.y) ** 2) / (2 * sigma_y ** 2)
        weight *= norm * math.exp(-(ex + ey))
    return weight


# ------------------------------------------------------------------------
def measurement_update(particles, sensor_range, std_landmark, observations, landmarks, strict=False):
    """ Particle filter measurement update

        Arguments:
        particles -- input particle set represents belief \\tilde{p}(x_{t} | u_{t})
                before measurement update
        sensor_range -- range of the landmark sensor [m]
        std_landmark -- measurement noise [std x [m], std y [m]]
        observations -- vehicle frame observation list, Observation(id, x, y)
        landmarks -- map landmarks, Landmark(id, x, y)
        strict -- see associate_observations()

        No return, every particle gets its new weight
    """
    weights = []
    for i in range(len(particles)):
        particle = particles[i]
        # 1. landmarks the particle could see
        candidates = landmarks_in_range(particle, landmarks, sensor_range)
        # 2. observations in map frame from this particle's point of view
        transformed = transform_observations(particle, observations)
        # 3. nearest landmark for every observation
        predicted = associate_observations(candidates, transformed, strict)
        # 4. likelihood of the observations given the matches
        weights.append(observation_weight(transformed, predicted, std_landmark))

    # all particles weighted, commit
    for i, w in enumerate(weights):
        particles.set_weight(i, w)


# ------------------------------------------------------------------------
def resample(particles, rng):
    """ Multinomial resampling with replacement, proportional to weight

        Return: list of new particles, ids 0..N-1 in draw order

        Raises DegenerateWeightsError when every weight is zero
    """
    indices = rng.discrete(particles.weights, len(particles))
    return [particles[index].copy(id=i) for i, index in enumerate(indices)]


class ParticleFilter:
    """ SIR particle filter for 2D localization against a landmark map.

        pf = ParticleFilter(rng=RandomSource(42))
        pf.init(x, y, theta, GPS_SIGMA)
        for each step:
            pf.predict(delta_t, std_pos, velocity, yaw_rate)
            pf.update_weights(sensor_range, LANDMARK_SIGMA, observations, landmarks)
            pf.resample()
    """

    def __init__(self, num_particles=PARTICLE_COUNT, rng=None, strict_association=False):
        if num_particles <= 0:
            raise ConfigError('Particle count must be positive, got %r' % num_particles)
        self.num_particles = num_particles
        self.rng = rng if rng is not None else RandomSource()
        self.strict_association = strict_association
        self._particles = None

    @property
    def is_initialized(self):
        return self._particles is not None

    @property
    def particles(self):
        self._check_initialized()
        return self._particles

    @property
    def weights(self):
        self._check_initialized()
        return self._particles.weights

    def _check_initialized(self):
        if self._particles is None:
            raise NotInitializedError('Particle filter used before init()')

    def init(self, x, y, theta, std):
        """ Spread the particles around the first pose estimate (e.g. GPS)

            Arguments:
            x, y, theta -- initial pose [m, m, rad]
            std -- [std x [m], std y [m], std theta [rad]]
        """
        _check_sigmas(std, 3, 'init')
        self._particles = ParticleSet(create_particles(self.num_particles, x, y, theta, std, self.rng))

    def predict(self, delta_t, std_pos, velocity, yaw_rate):
        self._check_initialized()
        if delta_t < 0:
            raise ConfigError('delta_t must be non-negative, got %r' % delta_t)
        _check_sigmas(std_pos, 3, 'predict')
        motion_update(self._particles, delta_t, std_pos, velocity, yaw_rate, self.rng)

    def update_weights(self, sensor_range, std_landmark, observations, map_landmarks):
        self._check_initialized()
        if sensor_range < 0:
            raise ConfigError('sensor_range must be non-negative, got %r' % sensor_range)
        _check_sigmas(std_landmark, 2, 'update_weights')
        if 0 in std_landmark:
            raise ConfigError('Landmark standard deviation must be positive, got %r' % (std_landmark,))
        measurement_update(self._particles, sensor_range, std_landmark, list(observations),
                           list(map_landmarks), self.strict_association)

    def resample(self):
        self._check_initialized()
        self._particles.replace(resample(self._particles, self.rng))
