class PlanformError(ValueError):
    """Base class for planform parameter and generation errors."""


class TooManyArgumentsError(PlanformError):
    pass


class InvalidInputError(PlanformError):
    pass


class UnsupportedTopologyError(PlanformError):
    pass
