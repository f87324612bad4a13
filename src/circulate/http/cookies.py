"""Cookie header parsing, used by ``Request.from_asgi``."""


def parse_cookies(header: str) -> dict[str, str]:
    """Parse a ``Cookie`` header value into a name-value dict.

    Returns an empty dict for empty or missing headers. The first
    occurrence of a repeated name wins, as browsers send the most
    specific cookie first.
    """
    if not header:
        return {}
    cookies: dict[str, str] = {}
    for pair in header.split(";"):
        name, sep, value = pair.strip().partition("=")
        name = name.strip()
        if not sep or not name:
            continue
        cookies.setdefault(name, value.strip())
    return cookies
