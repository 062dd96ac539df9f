"""Host name extraction and root-domain matching for domain lookups.

Examples:
    >>> extract_domain("https://www.example.com:8080/a/b?x=1#top")
    'www.example.com'
    >>> root_domain("www.abc.example.com")
    'example.com'
"""

from typing import List
from urllib.parse import urlsplit


def extract_domain(value: str) -> str:
    """Reduce a URL or host to a lower-case host name.

    Scheme, credentials, port, path, query and fragment are removed.
    """
    value = value.strip()
    if "://" not in value:
        value = "//" + value
    host = urlsplit(value).netloc
    host = host.rsplit("@", 1)[-1]
    host = host.split(":", 1)[0]
    return host.lower().strip(".")


def root_domain(host: str) -> str:
    """Last two labels of a host; hosts with two labels or fewer are returned as is."""
    parts = host.split(".")
    if len(parts) <= 2:
        return host
    return ".".join(parts[-2:])


def candidate_domains(value: str) -> List[str]:
    """Domains to try, in order: the exact host, then its root domain."""
    host = extract_domain(value)
    if not host:
        return []
    root = root_domain(host)
    return [host] if root == host else [host, root]
