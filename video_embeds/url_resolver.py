#!/usr/bin/env python3
"""
URL Resolution Utilities

Resolves embed source references against an optional base URL. The result
keeps "resolved" and "failed" apart so callers can tell a malformed source
from a missing one.
"""

import re
from dataclasses import dataclass
from enum import Enum
from ipaddress import IPv6Address
from typing import Optional, Tuple
from urllib.parse import SplitResult, unquote, urljoin, urlsplit, urlunsplit, uses_netloc, uses_relative

from video_embeds.config import Config

# Stripped from both ends of a reference before parsing
_C0_CONTROL_OR_SPACE = ''.join(chr(c) for c in range(0x21))

# Not allowed in any host
_FORBIDDEN_HOST_CHARS = re.compile(r'[\x00\t\n\r #/:<>?@\[\\\]^|]')

# Not allowed in a decoded web-scheme host
_FORBIDDEN_DOMAIN_CHARS = re.compile(r'[\x00-\x20#%/:<>?@\[\\\]^|\x7f]')


class UrlParseError(str, Enum):
    RELATIVE_URL_WITHOUT_BASE = 'relative URL without a base'
    RELATIVE_URL_WITH_CANNOT_BE_A_BASE_BASE = 'relative URL with a cannot-be-a-base base'
    EMPTY_HOST = 'empty host'
    INVALID_PORT = 'invalid port number'
    INVALID_IPV6_ADDRESS = 'invalid IPv6 address'
    INVALID_DOMAIN_CHARACTER = 'invalid domain character'
    IDNA_ERROR = 'invalid international domain name'


@dataclass(frozen=True)
class UrlResolution:
    """Outcome of resolving a reference: exactly one of `url` / `error` is set"""
    url: Optional[str] = None
    error: Optional[UrlParseError] = None

    @classmethod
    def resolved(cls, url: str) -> 'UrlResolution':
        return cls(url=url)

    @classmethod
    def failed(cls, error: UrlParseError) -> 'UrlResolution':
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def parts(self) -> Optional[SplitResult]:
        return urlsplit(self.url) if self.ok else None

    @property
    def host(self) -> Optional[str]:
        """Host of the resolved URL, or None when failed or host-less"""
        if not self.ok:
            return None
        return self.parts.hostname or None


def _split_error(exc: ValueError) -> UrlParseError:
    # urlsplit rejects bad bracketed hosts and netlocs that NFKC-normalize into delimiters
    message = str(exc)
    if 'IPv6' in message or 'IPv4' in message:
        return UrlParseError.INVALID_IPV6_ADDRESS
    return UrlParseError.INVALID_DOMAIN_CHARACTER


def _split(url: str) -> Optional[SplitResult]:
    try:
        return urlsplit(url)
    except ValueError:
        return None


def _backslashes_to_slashes(url: str) -> str:
    # Query and fragment keep their backslashes
    ends = [i for i in (url.find('?'), url.find('#')) if i != -1]
    end = min(ends) if ends else len(url)
    return url[:end].replace('\\', '/') + url[end:]


def _is_absolute_base(parts: Optional[SplitResult]) -> bool:
    return parts is not None and bool(parts.scheme)


def _can_be_a_base(parts: SplitResult) -> bool:
    # mailto:, data:, javascript: and friends have opaque paths
    return bool(parts.netloc) or parts.path.startswith('/')


def _join(base: str, base_parts: SplitResult, reference: str) -> str:
    scheme = base_parts.scheme
    if scheme in uses_relative and scheme in uses_netloc:
        return urljoin(base, reference)

    # urljoin returns the reference untouched for schemes it does not know
    placeholder = urlunsplit(base_parts._replace(scheme='http'))
    joined = urlsplit(urljoin(placeholder, reference))
    return urlunsplit(joined._replace(scheme=scheme))


def _normalize_host(scheme: str, host: str) -> Tuple[Optional[str], Optional[UrlParseError]]:
    """
    Normalize a host the way browsers do before comparing it

    Returns:
        Tuple of (host, error); special-scheme hosts come back percent-decoded,
        IDNA-mapped and lower-cased
    """
    if ':' in host:
        # urlsplit only leaves colons in bracketed IPv6 literals
        try:
            return f'[{IPv6Address(host).compressed}]', None
        except ValueError:
            return None, UrlParseError.INVALID_IPV6_ADDRESS

    if scheme not in Config.SPECIAL_SCHEMES:
        if _FORBIDDEN_HOST_CHARS.search(host):
            return None, UrlParseError.INVALID_DOMAIN_CHARACTER
        return host, None

    host = unquote(host)
    if not host.isascii():
        try:
            host = host.encode('idna').decode('ascii')
        except UnicodeError:
            return None, UrlParseError.IDNA_ERROR
    host = host.lower()

    if _FORBIDDEN_DOMAIN_CHARS.search(host):
        return None, UrlParseError.INVALID_DOMAIN_CHARACTER
    return host, None


def _serialize(parts: SplitResult, host: Optional[str], port: Optional[int]) -> str:
    netloc = parts.netloc
    if host is not None:
        netloc = host
        if port is not None and port != Config.DEFAULT_PORTS.get(parts.scheme):
            netloc = f'{netloc}:{port}'
        userinfo = parts.netloc.rpartition('@')[0]
        if userinfo:
            netloc = f'{userinfo}@{netloc}'

    path = parts.path
    if not path and parts.scheme in Config.SPECIAL_SCHEMES:
        path = '/'

    return urlunsplit((parts.scheme, netloc, path, parts.query, parts.fragment))


def _finish(url: str) -> UrlResolution:
    try:
        parts = urlsplit(url)
    except ValueError as e:
        return UrlResolution.failed(_split_error(e))

    try:
        port = parts.port
    except ValueError:
        return UrlResolution.failed(UrlParseError.INVALID_PORT)

    host = None
    if parts.hostname:
        host, error = _normalize_host(parts.scheme, parts.hostname)
        if error:
            return UrlResolution.failed(error)

    if parts.scheme in Config.HOST_REQUIRED_SCHEMES and not host:
        return UrlResolution.failed(UrlParseError.EMPTY_HOST)

    return UrlResolution.resolved(_serialize(parts, host, port))


def resolve_url(reference: str, base: Optional[str] = None) -> UrlResolution:
    """
    Resolve a URL reference against an optional base URL

    Absolute references ignore the base. Relative references need an
    absolute base that can serve as one. The resolved URL is serialized
    with a lower-case scheme and host, no default port, and "/" for an
    empty path on web schemes.

    Args:
        reference: The reference as written in the document
        base: Absolute URL of the document, if known

    Returns:
        A resolved or failed UrlResolution

    Examples:
        >>> resolve_url("//www.youtube.com/embed/abc", "https://example.com/page").url
        'https://www.youtube.com/embed/abc'
        >>> resolve_url("HTTP://A.com").url
        'http://a.com/'
        >>> resolve_url("/embed/x").error
        <UrlParseError.RELATIVE_URL_WITHOUT_BASE: 'relative URL without a base'>
    """
    reference = reference.strip(_C0_CONTROL_OR_SPACE)

    try:
        parts = urlsplit(reference)
    except ValueError as e:
        return UrlResolution.failed(_split_error(e))
    if parts.scheme:
        if parts.scheme in Config.SPECIAL_SCHEMES:
            reference = _backslashes_to_slashes(reference)
        return _finish(reference)

    base_parts = _split(base) if base else None
    if not _is_absolute_base(base_parts):
        return UrlResolution.failed(UrlParseError.RELATIVE_URL_WITHOUT_BASE)
    if not _can_be_a_base(base_parts):
        return UrlResolution.failed(UrlParseError.RELATIVE_URL_WITH_CANNOT_BE_A_BASE_BASE)

    if base_parts.scheme in Config.SPECIAL_SCHEMES:
        reference = _backslashes_to_slashes(reference)
    return _finish(_join(base, base_parts, reference))
