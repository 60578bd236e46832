import math

# euclidean distance in map frame
def dist(x1, y1, x2, y2):
    return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)

# utils for 2d rotation, angle in radians
def rotate_point(x, y, theta):
    c = math.cos(theta)
    s = math.sin(theta)
    xr = x * c + y * -s
    yr = x * s + y * c
    return xr, yr


# heading angle difference heading1-heading2
# return value always in range (-pi, pi] in rad
def diff_heading(heading1, heading2):
    dh = heading1 - heading2
    while dh > math.pi:
        dh -= 2 * math.pi
    while dh <= -math.pi:
        dh += 2 * math.pi
    return dh

def compute_mean_pose(particles, weights=None, confident_dist=1):
    """
    Compute the (weighted) mean pose of the particle cloud.
    This is not part of the particle filter algorithm but rather an
    addition to show the "best belief" for current position.
    Heading is averaged on the unit circle.
    """
    if weights is None:
        weights = [1.0] * len(particles)
    m_x, m_y, m_w = 0, 0, 0
    # for rotation average
    m_hx, m_hy = 0, 0
    for p, w in zip(particles, weights):
        m_w += w
        m_x += w * p.x
        m_y += w * p.y
        m_hx += w * math.sin(p.theta)
        m_hy += w * math.cos(p.theta)

    if m_w == 0:
        return -1, -1, 0, False

    m_x /= m_w
    m_y /= m_w

    # average rotation
    m_h = math.atan2(m_hx, m_hy)

    # Now compute how good that mean is -- check how many particles
    # actually are in the immediate vicinity
    m_count = 0
    for p in particles:
        if dist(p.x, p.y, m_x, m_y) < confident_dist:
            m_count += 1

    return m_x, m_y, m_h, m_count > len(particles) * 0.95

def best_particle(particles):
    """ Particle with the highest weight, first one wins ties """
    best = None
    for p in particles:
        if best is None or p.weight > best.weight:
            best = p
    return best


def add_gaussian_noise(data, sigma, rng):
    return data + rng.normal(0.0, sigma)

def add_control_noise(velocity, yaw_rate, velocity_sigma, yaw_rate_sigma, rng):
    return add_gaussian_noise(velocity, velocity_sigma, rng), \
        add_gaussian_noise(yaw_rate, yaw_rate_sigma, rng)

def add_observation_noise(observation, sigma, rng):
    return observation._replace(x=add_gaussian_noise(observation.x, sigma[0], rng),
                                y=add_gaussian_noise(observation.y, sigma[1], rng))


def write_particles(filename, particles):
    """ Append one "x y theta" line per particle """
    with open(filename, 'a') as datafile:
        for p in particles:
            datafile.write("%g %g %g\n" % (p.x, p.y, p.theta))
