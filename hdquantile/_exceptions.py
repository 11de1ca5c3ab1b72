"""Exception and warning classes raised by hdquantile."""


class InvalidArgumentError(TypeError):
    """A required argument is missing (``None``)."""


class DomainError(ValueError):
    """An argument lies outside the domain the estimator is defined on.

    Raised for probabilities outside ``[0, 1]``, empty samples, negative
    weights and non-positive total weight.
    """


class NumericWarning(RuntimeWarning):
    """A computed quantity had to be clamped to stay well defined."""
