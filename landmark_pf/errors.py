class FilterError(Exception):
    pass


class ConfigError(FilterError, ValueError):
    """ Bad particle count, negative standard deviation or negative time step """


class NotInitializedError(FilterError, RuntimeError):
    """ Filter used before init() """


class DegenerateWeightsError(FilterError, RuntimeError):
    """ Every particle weight is zero, nothing to resample from """


class EmptyCandidateSetError(FilterError, ValueError):
    """ Observations to associate but no landmark in sensor range """
