""" The data the gate works with: requests, responses, identity markers """

from __future__ import annotations

from collections import abc
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Union


# Response body: a string, or a sequence of chunks
Body = Union[str, bytes, abc.Sequence[Union[str, bytes]]]


class Response(NamedTuple):
    """ A response: (status, headers, body)

    The gate only ever looks at `status`. It never modifies a response: it either returns it as is,
    or returns a brand new one.
    """
    status: int
    headers: abc.Mapping[str, str]
    body: Body


@dataclass(frozen=True)
class RequestContext:
    """ An incoming request, as seen by the gate

    Attributes:
        identity: The identity marker: any value that tells that the caller has signed in. E.g. a user id.
            None or empty means that the caller is anonymous.
        environ: Anything else the downstream handler needs. The gate does not look into it.
    """
    identity: Any = None
    environ: abc.Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return has_identity(self.identity)


def has_identity(marker: Any) -> bool:
    """ Does the identity marker tell that the caller is authenticated?

    Absent, empty and blank values all mean "anonymous":
    there is no difference between "no session" and "a session with an empty user".
    """
    if marker is None or marker is False:
        return False
    if isinstance(marker, (str, bytes)):
        return bool(marker.strip())
    if isinstance(marker, abc.Sized):
        return len(marker) > 0
    return True
