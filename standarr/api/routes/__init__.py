"""API route modules."""

from urllib.parse import quote

from standarr.api.models import Link


def link(*segments: str | None) -> Link:
    """Build a relative link from path segments.

    Segments are URL-escaped; a missing value becomes an empty segment.
    """
    return Link(href="/" + "/".join(quote(segment or "", safe="") for segment in segments))
