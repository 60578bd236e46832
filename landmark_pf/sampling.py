import math

import numpy as np

from .errors import DegenerateWeightsError


class RandomSource(object):
    """ Single random stream shared by initialization, prediction and resampling.

        Build one per filter (pass a seed for repeatable runs) and hand it
        around instead of creating a new generator on every call.
    """

    def __init__(self, seed=None):
        self.seed = seed
        self.gen = np.random.default_rng(seed)

    def __repr__(self):
        return "RandomSource(seed=%r)" % (self.seed,)

    def normal(self, mean, sigma):
        """ One draw from Normal(mean, sigma); sigma == 0 returns mean exactly """
        return float(self.gen.normal(mean, sigma))

    def discrete(self, weights, size):
        """ Draw `size` indices with replacement, P(i) proportional to weights[i]

            Arguments:
            weights -- non-negative weights, need not sum to one
            size -- number of draws

            Return: numpy array of indices into weights

            Raises DegenerateWeightsError if the weights total zero or are not finite
        """
        weights = np.asarray(weights, dtype=float)
        total = weights.sum()
        if not total > 0 or not math.isfinite(total):
            raise DegenerateWeightsError('Cannot draw from weights totalling %r' % float(total))
        return self.gen.choice(len(weights), size=size, replace=True, p=weights / total)
