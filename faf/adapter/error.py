"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class SteamApiError(ProviderError):
    """Steam could not be queried or returned an invalid login."""

    pass


class MailDeliveryError(ProviderError):
    """Mail could not be handed to the SMTP server."""

    pass
