import math

PARTICLE_COUNT = 75     # Total number of particles in your filter

# below this yaw rate the motion model drives straight
YAW_RATE_EPSILON = 1e-5

# GPS Gaussian noise model, used to seed the filter [x, y, theta]
GPS_SIGMA = [0.3, 0.3, 0.01]

# landmark measurement Gaussian noise model [x, y]
LANDMARK_SIGMA = [0.3, 0.3]

SENSOR_RANGE = 6.0      # Max landmark sensing distance in meters

DELTA_T = 0.1           # Time between steps in seconds

# odometry Gaussian noise model
VELOCITY_SIGMA = 0.05
YAW_RATE_SIGMA = 0.01

# grading
STEPS_BUILD_TRACKING = 100
STEPS_STABLE_TRACKING = 100
ERR_TRANS = 1.0                 # translational error allowed
ERR_ROT = math.radians(3)       # orientation error allowed
