import re

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def parse_duration(code: str | None) -> int | None:
    """Convert an ISO-8601 ``PT#H#M#S`` token to whole seconds.

    Returns None when the token is missing or not of that shape.
    """
    if not code:
        return None
    match = _DURATION_RE.fullmatch(code.strip())
    if not match:
        return None
    hours, minutes, seconds = (int(group or 0) for group in match.groups())
    return hours * 3600 + minutes * 60 + seconds
