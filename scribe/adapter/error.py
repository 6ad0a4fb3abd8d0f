"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class MediaUploadError(ProviderError):
    """The media host rejected an upload or could not be reached."""

    pass
