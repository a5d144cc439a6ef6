"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services own the rules that need a repository to check, such as a parent
    comment belonging to the same post or a username being free.
    """
