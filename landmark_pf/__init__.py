from .errors import ConfigError, DegenerateWeightsError, EmptyCandidateSetError, FilterError, NotInitializedError
from .landmark_map import Landmark, LandmarkMap
from .particle import Observation, Particle, ParticleSet, Robot
from .particle_filter import UNASSOCIATED, ParticleFilter
from .sampling import RandomSource

__version__ = '0.3.0'
