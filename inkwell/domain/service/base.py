"""Base service class for domain services."""


class Service:
    """Base class for Inkwell domain services.

    A service owns one slice of blog behaviour and talks to the hosted
    backend only through repositories and ports.
    """

    pass
