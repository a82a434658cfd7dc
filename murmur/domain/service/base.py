"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the comment widget's rules (threading, freshness, rate
    limits, login codes) over repository and provider interfaces, never
    over concrete infrastructure.
    """

    pass
