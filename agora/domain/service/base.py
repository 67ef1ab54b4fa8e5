"""Base class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold repositories, never the query cache, and are created per
    request.
    """

    pass
