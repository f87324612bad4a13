"""URL safety validation for redirect targets.

Route tables may only send users to relative paths on the same origin,
so a misconfigured redirect target can never become an open redirect.

Usage::

    from circulate.security.urls import is_safe_url

    if not is_safe_url(table.default_authenticated_redirect):
        raise ConfigurationError(...)
"""


def is_safe_url(url: str) -> bool:
    """Check whether *url* is a same-origin relative path.

    - Must be a non-empty string starting with ``/``
    - Must **not** start with ``//`` (protocol-relative URL)
    - Must **not** contain ``://`` or a backslash

    Examples::

        >>> is_safe_url("/upload")
        True
        >>> is_safe_url("//evil.com")
        False
        >>> is_safe_url("https://evil.com/login")
        False
    """
    if not isinstance(url, str) or not url:
        return False
    if not url.startswith("/") or url.startswith("//"):
        return False
    if "\\" in url:
        return False
    return "://" not in url
