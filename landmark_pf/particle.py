import math
from collections import namedtuple

from .utils import *
from .setting import *


# landmark observation, in vehicle frame as sensed or map frame after transform
Observation = namedtuple('Observation', ['id', 'x', 'y'])


""" Particle class (base class for robot)
    A class for particle, each particle contains x, y, heading and weight information
"""
class Particle(object):

    # data members
    # id = "index inside the current generation"
    # x = "X coordinate in world frame"
    # y = "Y coordinate in world frame"
    # theta = "Heading angle in world frame in radians. theta = 0 when robot's head points to positive X"
    # weight = "Unnormalized importance weight"

    def __init__(self, x, y, theta, weight=1.0, id=0):
        self.id = id
        self.x = x
        self.y = y
        self.theta = theta
        self.weight = weight

    def __repr__(self):
        return "(id = %d, x = %f, y = %f, theta = %f rad, weight = %g)" % \
            (self.id, self.x, self.y, self.theta, self.weight)

    @property
    def xyt(self):
        return self.x, self.y, self.theta

    def copy(self, id=None):
        return Particle(self.x, self.y, self.theta, self.weight, self.id if id is None else id)

    def move(self, velocity, yaw_rate, delta_t):
        """ Drive with constant velocity and yaw rate for delta_t seconds

            Arguments:
            velocity -- forward speed in m/s
            yaw_rate -- turn rate in rad/s, turn left is positive
            delta_t -- elapsed time in s

            No return
        """
        if math.fabs(yaw_rate) > YAW_RATE_EPSILON:
            new_theta = self.theta + yaw_rate * delta_t
            self.x += (velocity / yaw_rate) * (math.sin(new_theta) - math.sin(self.theta))
            self.y += (velocity / yaw_rate) * (math.cos(self.theta) - math.cos(new_theta))
            self.theta = new_theta
        else:
            self.x += velocity * delta_t * math.cos(self.theta)
            self.y += velocity * delta_t * math.sin(self.theta)


class ParticleSet(object):
    """ Fixed size, index addressed container of particles.

        Weights live on the particles only, so weights[i] is always
        particles[i].weight however the weight was set.
    """

    def __init__(self, particles):
        self._particles = list(particles)

    def __len__(self):
        return len(self._particles)

    def __getitem__(self, index):
        return self._particles[index]

    def __iter__(self):
        return iter(self._particles)

    @property
    def weights(self):
        return [p.weight for p in self._particles]

    def set_weight(self, index, weight):
        self._particles[index].weight = weight

    def replace(self, particles):
        """ Swap in a whole new generation, must keep the set size """
        particles = list(particles)
        if len(particles) != len(self._particles):
            raise ValueError('Particle set size is fixed at %d' % len(self._particles))
        self._particles = particles


""" Robot class
    Ground truth agent for simulation, same pose information as particles
    plus a range limited landmark sensor
"""
class Robot(Particle):

    def __init__(self, x, y, theta):
        super(Robot, self).__init__(x, y, theta)

    def __repr__(self):
        return "(x = %f, y = %f, theta = %f rad)" % (self.x, self.y, self.theta)

    def read_landmarks(self, landmark_map, sensor_range):
        """ Helper function to simulate landmark measurements by robot's sensor
            Only landmarks within sensor_range will be in the list

            Arguments:
            landmark_map -- map with landmark information
            sensor_range -- max sensing distance

            Return: robot detected observation list, each observation has format:
                    Observation(id, x, y)
                    id -- landmark id on the map
                    x -- landmark's relative X coordinate in robot's frame
                    y -- landmark's relative Y coordinate in robot's frame
        """
        observations = []
        for lm in landmark_map:
            if dist(self.x, self.y, lm.x, lm.y) <= sensor_range:
                # rotate landmark into robot frame
                lx, ly = rotate_point(lm.x - self.x, lm.y - self.y, -self.theta)
                observations.append(Observation(lm.id, lx, ly))
        return observations
