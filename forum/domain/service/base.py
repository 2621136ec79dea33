"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the forum rules that span several entities or
    need repositories to evaluate.
    """

    pass
