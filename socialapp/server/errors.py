"""Errors raised by the social graph.

All of them derive from ValueError: they reject a request, they never
signal a broken process, and a rejected request leaves the graph untouched.
"""


class SocialError(ValueError):
    """Base class for rejected social graph operations."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class DuplicateIdentifier(SocialError):
    """A person code is already registered."""


class UnknownIdentifier(SocialError):
    """A person code or group name is not registered."""


class PostNotFound(SocialError):
    """A post id does not exist under the given author."""


class InvalidPagination(SocialError):
    """Page number below 1 or page size not positive."""


class SelfFriendship(SocialError):
    """A person cannot be their own friend."""
