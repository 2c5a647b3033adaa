"""Media transfer exception hierarchy.

Only the message text of these errors ever reaches a tool caller; the
classes exist so the client and tests can tell failures apart.
"""


class MediaError(Exception):
    """Base class for all media transfer errors."""
    pass

class MissingParameterError(MediaError):
    """A required identifying field was omitted by the caller."""
    pass

class MediaFileNotFoundError(MediaError):
    """Local path does not exist after resolution."""
    pass

class MediaIOError(MediaError):
    """Local read failed for a reason other than not-found."""
    pass

class RemoteNotFoundError(MediaError):
    """Remote key or message does not resolve (HTTP 404)."""
    pass

class RemoteRejectedError(MediaError):
    """Remote service refused the request (oversize, bad format, bad destination...)."""
    pass
