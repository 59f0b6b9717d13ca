"""URL and header helpers for constructing Home Assistant REST requests."""

from yarl import URL

from hatemp.const import API_ROOT
from hatemp.exceptions import BaseUrlRequiredError, InvalidTokenError, SchemeRequiredInBaseUrlError


def build_rest_url(base_url: str) -> URL:
    """Construct the REST API root URL for Home Assistant.

    Trailing slashes are stripped and the `api` segment is appended, so any path prefix in the
    base URL (e.g. a reverse proxy mount point) is kept.

    Args:
        base_url (str): Base URL of the Home Assistant instance, e.g. "http://127.0.0.1:8123/".

    Returns:
        URL: The REST API root, e.g. "http://127.0.0.1:8123/api".

    Raises:
        BaseUrlRequiredError: If base_url is empty or has no host.
        SchemeRequiredInBaseUrlError: If base_url does not include a scheme.
    """

    base_url = base_url.strip().rstrip("/")
    if not base_url:
        raise BaseUrlRequiredError("base_url must be set")

    try:
        yurl = URL(base_url)
    except ValueError as err:
        raise BaseUrlRequiredError(f"base_url {base_url!r} is not a valid URL: {err}") from err

    if not yurl.scheme or yurl.scheme not in ("http", "https"):
        raise SchemeRequiredInBaseUrlError(f"base_url {base_url!r} must include a scheme (http:// or https://)")

    if not yurl.host:
        raise BaseUrlRequiredError(f"base_url {base_url!r} must include a valid hostname")

    return yurl / API_ROOT


def build_auth_headers(token: str) -> dict[str, str]:
    """Build the bearer Authorization header sent with every request.

    Args:
        token (str): Home Assistant access token.

    Returns:
        dict[str, str]: The default headers.

    Raises:
        InvalidTokenError: If the token contains characters that are not allowed in a header value.
    """

    for char in token:
        if char == "\t":
            continue
        if ord(char) < 0x20 or ord(char) == 0x7F:
            raise InvalidTokenError(f"token contains invalid header character {char!r}")

    return {"Authorization": f"Bearer {token}"}
