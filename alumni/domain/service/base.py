"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services own the rules that span accounts, posts and comments, and talk
    to storage only through repository interfaces.
    """

    pass
