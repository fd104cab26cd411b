"""Exception types for feedview."""


class FeedviewError(Exception):
    """Base class for feedview errors."""


class LoadFailure(FeedviewError):
    """The article feed could not be fetched or decoded.

    Terminal for a session: the viewer shows the message and never renders a
    list in its place.
    """
