"""Error raised by the numeric core when a caller breaks an input constraint."""


class DomainError(ValueError):
    """Raised when a caller passes inputs outside a computation's domain
    (empty dataset, zero step size, unknown function key)."""
