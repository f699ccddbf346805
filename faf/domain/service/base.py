"""Base class of the account domain services."""


class Service:
    """Marker base of the domain services.

    Services are built per request by the DI container and hold only their
    collaborators and settings, never request state.
    """
