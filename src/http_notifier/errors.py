"""Exceptions raised by the notifier."""


class NotifierError(Exception):
    """Base class for notifier errors."""


class ConfigurationError(NotifierError, ValueError):
    """Invalid or missing notification parameters, found before any request."""


class DeliveryFailure(NotifierError):
    """The request could not be delivered to the target."""


class TransportError(DeliveryFailure):
    """Raised by a transport on a network or I/O failure."""
