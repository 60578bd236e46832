import argparse
import json
import math
from pathlib import Path

from .errors import DegenerateWeightsError
from .landmark_map import LandmarkMap
from .particle import Robot
from .particle_filter import ParticleFilter
from .sampling import RandomSource
from .setting import *
from .utils import *

# map file, shipped with the package
Map_filename = str(Path(__file__).parent / "map_test.json")

"""
Auto-grader rubric
Total score = 100, two stage:
1.  Build tracking:
    If the filter can build tracking and output correct robot pose
    within error tolerance anytime in 100 steps, give 50 points
2.  Maintain tracking:
    let the filter run 100 steps, give score
    score = correct pose percentage / 100 * 50
          = #correct pose / #total pose * 50
"""


class ParticleFilterRunner:
    """ Drives one simulated robot and the filter that tracks it """

    def __init__(self, landmark_map, robbie, rng, num_particles=PARTICLE_COUNT, output=None):
        self.landmark_map = landmark_map
        self.robbie = robbie
        self.rng = rng
        self.output = output
        self.mean_pose = None
        self.pf = ParticleFilter(num_particles, rng)
        self.pf.init(*self.gps_fix(), GPS_SIGMA)

    def gps_fix(self):
        return (add_gaussian_noise(self.robbie.x, GPS_SIGMA[0], self.rng),
                add_gaussian_noise(self.robbie.y, GPS_SIGMA[1], self.rng),
                add_gaussian_noise(self.robbie.theta, GPS_SIGMA[2], self.rng))

    def update(self, velocity, yaw_rate):

        # ---------- Move Robot ----------
        self.robbie.move(velocity, yaw_rate, DELTA_T)
        odom_v, odom_yaw_rate = add_control_noise(velocity, yaw_rate, VELOCITY_SIGMA, YAW_RATE_SIGMA, self.rng)

        # ---------- Motion model update ----------
        self.pf.predict(DELTA_T, GPS_SIGMA, odom_v, odom_yaw_rate)

        # ---------- Find landmarks in range ----------
        observations = [add_observation_noise(obs, LANDMARK_SIGMA, self.rng)
                        for obs in self.robbie.read_landmarks(self.landmark_map, SENSOR_RANGE)]

        # ---------- Sensor (landmarks) model update ----------
        self.pf.update_weights(SENSOR_RANGE, LANDMARK_SIGMA, observations, self.landmark_map.landmarks)

        # ---------- Current best estimate ----------
        est_pose = best_particle(self.pf.particles).xyt
        self.mean_pose = compute_mean_pose(self.pf.particles, self.pf.weights)

        # ---------- Resample ----------
        try:
            self.pf.resample()
        except DegenerateWeightsError:
            #Something went wrong! need to start over from the gps fix.
            print("All particle weights are zero, re-initializing from GPS")
            self.pf.init(*self.gps_fix(), GPS_SIGMA)

        if self.output:
            write_particles(self.output, self.pf.particles)

        return est_pose


def pose_error(est_pose, robbie):
    return dist(est_pose[0], est_pose[1], robbie.x, robbie.y), \
        math.fabs(diff_heading(est_pose[2], robbie.theta))


def grade(robot_init_pose, velocity, yaw_rate, map_filename=Map_filename, seed=None,
          num_particles=PARTICLE_COUNT, output=None,
          steps_build_tracking=STEPS_BUILD_TRACKING, steps_stable_tracking=STEPS_STABLE_TRACKING):
    landmark_map = LandmarkMap(map_filename)
    robbie = Robot(*robot_init_pose)
    runner = ParticleFilterRunner(landmark_map, robbie, RandomSource(seed), num_particles, output)

    score = 0

    # 1. steps to build tracking
    steps_built_track = 9999
    for i in range(0, steps_build_tracking):

        est_pose = runner.update(velocity, yaw_rate)
        err_trans, err_rot = pose_error(est_pose, robbie)

        if err_trans < ERR_TRANS and err_rot < ERR_ROT and i+1 < steps_built_track:
            steps_built_track = i+1

    if steps_built_track < steps_build_tracking / 2:
        score = 50
    elif steps_built_track < steps_build_tracking:
        score = 50 * (steps_build_tracking - steps_built_track) / (steps_build_tracking / 2)
    else:
        score = 0

    print("\nPhase 1")
    print("Number of steps to build track :", steps_built_track, "/", steps_build_tracking)
    acc_err_trans, acc_err_rot = 0.0, 0.0
    max_err_trans, max_err_rot = 0.0, 0.0
    step_track = 0

    # 2. test tracking

    for i in range(0, steps_stable_tracking):

        est_pose = runner.update(velocity, yaw_rate)
        err_trans, err_rot = pose_error(est_pose, robbie)

        acc_err_trans += err_trans
        max_err_trans = max(max_err_trans, err_trans)
        acc_err_rot += err_rot
        max_err_rot = max(max_err_rot, err_rot)

        if err_trans < ERR_TRANS and err_rot < ERR_ROT:
            step_track += 1

    score += 50 * step_track / steps_stable_tracking

    print("\nPhase 2")
    print("Number of steps error in threshold :", step_track, "/", steps_stable_tracking)
    print("Average translational error :{:.3f}".format(acc_err_trans / steps_stable_tracking))
    print("Average rotational error :{:.4f} rad".format(acc_err_rot / steps_stable_tracking))
    print("Max translational error :{:.3f}".format(max_err_trans))
    print("Max rotational error :{:.4f} rad".format(max_err_rot))
    m_x, m_y, m_h, m_confident = runner.mean_pose
    print("Final mean pose : ({:.3f}, {:.3f}, {:.4f} rad), confident: {}".format(m_x, m_y, m_h, m_confident))

    print("\nexample score =", score)
    return score


def main(argv=None):
    parser = argparse.ArgumentParser(description='Grade the landmark particle filter on simulated runs')
    parser.add_argument('testfile', help='json file of named test cases, each the keyword arguments of grade()')
    parser.add_argument('--map', default=Map_filename, help='landmark map, json or "x y id" text')
    parser.add_argument('--seed', default=None, type=int)
    parser.add_argument('--num_particles', default=PARTICLE_COUNT, type=int)
    parser.add_argument('--output', default=None, help='append particle poses "x y theta" to this file every step')
    args = parser.parse_args(argv)

    try:
        with open(args.testfile) as testfile:
            tests = json.loads(testfile.read())
    except (OSError, ValueError):
        print("Error opening test file, please check filename and json format")
        raise

    score = 0.
    for key, value in tests.items():
        print("########################################")
        print("#########grading {}##############".format(key))
        print("########################################")
        value.setdefault('map_filename', args.map)
        value.setdefault('seed', args.seed)
        value.setdefault('num_particles', args.num_particles)
        value.setdefault('output', args.output)
        score += grade(**value)

    final = score / len(tests) if tests else 0.
    print("\n\n\nFinal score is: {}".format(final))
    return final


if __name__ == "__main__":
    main()
