""" Substitute responses: what anonymous callers see instead of an error page """

from .response import Response


def render_substitute(status: int, *, substitute_status: int, content_type: str, body_template: str) -> Response:
    """ Render a substitute response for a hidden response with the given `status`

    Only the numeric status code makes it into the body. Headers of the original response are not copied.

    Args:
        status: Status code of the response that is being hidden
        substitute_status: Status code to respond with
        content_type: Content-Type header value
        body_template: Body template. May use `{status}`.
    """
    return Response(
        status=substitute_status,
        headers={'Content-Type': content_type},
        body=body_template.format(status=int(status)),
    )
