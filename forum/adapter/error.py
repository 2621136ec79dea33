"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class DeliveryError(AdapterError):
    """A notification could not be delivered."""

    pass
