import ipaddress
import socket
from typing import NamedTuple, Optional
from urllib.parse import urljoin, urlparse

import httpx

MAX_CONTENT_SIZE = 10 * 1024 * 1024  # 10 MB
TIMEOUT = 10  # seconds
MAX_REDIRECTS = 10
ALLOWED_SCHEMES = {"http", "https"}
USER_AGENT = "Chunkwise/1.0"
HTML_CONTENT_TYPES = {"text/html", "application/xhtml+xml"}


class FetchedPage(NamedTuple):
    url: str  # final URL after redirects
    html: str


def _is_private_address(hostname: str) -> bool:
    """Return True if *hostname* resolves to a private, loopback, or link-local address."""
    try:
        infos = socket.getaddrinfo(hostname, None)
    except socket.gaierror:
        return False

    for info in infos:
        raw_ip = info[4][0]
        # Strip IPv6 zone IDs (e.g. "::1%eth0" → "::1")
        raw_ip = raw_ip.split("%")[0]
        try:
            addr = ipaddress.ip_address(raw_ip)
        except ValueError:
            continue
        if addr.is_private or addr.is_loopback or addr.is_link_local or addr.is_reserved:
            return True
    return False


def _validate_url(url: str) -> None:
    """Raise ValueError if *url* fails SSRF / scheme validation."""
    parsed = urlparse(url)

    if parsed.scheme not in ALLOWED_SCHEMES:
        raise ValueError(f"Scheme '{parsed.scheme}' is not allowed. Use http or https.")

    hostname = parsed.hostname
    if not hostname:
        raise ValueError("URL must have a valid hostname.")

    if _is_private_address(hostname):
        raise ValueError("Requests to private/internal addresses are not allowed.")


def new_client() -> httpx.AsyncClient:
    """Return an HTTP client configured for page fetching (redirects handled manually)."""
    return httpx.AsyncClient(
        follow_redirects=False,
        timeout=TIMEOUT,
        headers={"User-Agent": USER_AGENT},
    )


async def _fetch(client: httpx.AsyncClient, url: str) -> FetchedPage:
    current_url = url
    for _ in range(MAX_REDIRECTS + 1):
        async with client.stream("GET", current_url) as response:
            if response.is_redirect:
                location = response.headers.get("location", "")
                next_url = urljoin(current_url, location)
                _validate_url(next_url)
                current_url = next_url
                continue

            response.raise_for_status()

            # A missing header is treated as HTML
            content_type = response.headers.get("content-type", "")
            media_type = content_type.split(";")[0].strip().lower()
            if media_type and media_type not in HTML_CONTENT_TYPES:
                raise RuntimeError(f"Unsupported content type '{media_type}'.")

            content_length = response.headers.get("content-length")
            if content_length and int(content_length) > MAX_CONTENT_SIZE:
                raise RuntimeError("Response body exceeds the maximum allowed size.")

            chunks = []
            total = 0
            async for chunk in response.aiter_bytes():
                total += len(chunk)
                if total > MAX_CONTENT_SIZE:
                    raise RuntimeError("Response body exceeds the maximum allowed size.")
                chunks.append(chunk)

            html = b"".join(chunks).decode(response.encoding or "utf-8", errors="replace")
            return FetchedPage(url=current_url, html=html)

    raise RuntimeError("Too many redirects.")


async def fetch_page(url: str, client: Optional[httpx.AsyncClient] = None) -> FetchedPage:
    """Fetch *url* and return the final URL together with the response body.

    Redirects are followed manually so that every redirect destination is
    validated against the SSRF rules before the next request is made.  When
    *client* is omitted a short-lived client is created for this one call.

    Raises:
        ValueError: if the URL fails SSRF / scheme validation.
        httpx.HTTPError: on network or HTTP errors.
        RuntimeError: if the response is not HTML, the body exceeds
            MAX_CONTENT_SIZE or redirects loop.
    """
    _validate_url(url)

    if client is None:
        async with new_client() as own_client:
            return await _fetch(own_client, url)
    return await _fetch(client, url)
