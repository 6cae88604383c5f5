"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services own the comment rules (threading, depth, moderation state)
    and talk to storage only through repository interfaces.
    """
