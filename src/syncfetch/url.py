__all__ = ["URL"]


import re
from typing import Any

from ._stringify import to_str
from .code import Code
from .exceptions import FetchException
from .params import QueryParams

# scheme, authority, path, query (with "?"), fragment (with "#")
_URL_PATTERN = re.compile(r"(.+?)://([^/?#]+)(/?[^?#]*)([^#]*)(#?.*)")
_LEADING_PARENTS = re.compile(r"(?:\.\./)*")


class URL:
    """A parsed absolute URL whose components can be read and reassigned.

    The composite `href` is never stored. Every read rebuilds it from the
    components, and every component setter normalizes its input, so the
    URL always serializes to a string that parses back to the same parts.

    Args:
        url: An absolute URL, another `URL` to copy, or a reference relative
            to `base`.
        base: The URL (string or `URL`) that a relative `url` is resolved
            against. Ignored when `url` contains ``://``.
    """

    _protocol: str
    _username: str
    _password: str
    _hostname: str
    _port: str
    _pathname: str
    _search_params: QueryParams
    _hash: str

    def __init__(self, url: Any, base: Any = None) -> None:
        if isinstance(url, URL):
            url = url.href
            base = None
        url = to_str(url)
        self._reset()

        if base is not None and "://" not in url:
            if isinstance(base, URL):
                base = base.href
            self._parse(to_str(base))
            if url:
                self._resolve(url)
        else:
            self._parse(url)

    def _reset(self) -> None:
        self._protocol = ""
        self._username = ""
        self._password = ""
        self._hostname = ""
        self._port = ""
        self._pathname = "/"
        self._search_params = QueryParams()
        self._hash = ""

    def _parse(self, url: str) -> None:
        match = _URL_PATTERN.fullmatch(url)
        if match is None:
            raise _invalid(url)
        protocol, authority, pathname, search, fragment = match.groups()

        credentials, at, host = authority.partition("@")
        if not at:
            credentials, host = "", authority
        username, _, password = credentials.partition(":")
        hostname, port = _split_host(host)
        if not _valid_hostname(hostname):
            raise _invalid(url)

        self._reset()
        self.protocol = protocol
        self.username = username
        self.password = password
        self.hostname = hostname
        self.port = port
        self.pathname = pathname
        self.search = search
        self.hash = fragment

    def _resolve(self, reference: str) -> None:
        # Simplified resolution: only a leading run of "../" climbs the base
        # path, and the base query and fragment are always dropped.
        if reference.startswith("/"):
            self._parse(self._prefix + reference)
            return

        if reference.startswith("./"):
            reference = reference[2:]
        parents = len(_LEADING_PARENTS.match(reference).group()) // 3

        segments = self._pathname.split("/")
        keep = max(len(segments) - parents - 1, 1)
        segments = segments[:keep] + reference[parents * 3 :].split("/")
        self._parse(self._prefix + "/".join(segments))

    @property
    def _prefix(self) -> str:
        """Everything before the pathname: scheme, credentials and host."""
        return f"{self._protocol}//{self._credentials}{self.host}"

    @property
    def _credentials(self) -> str:
        if not self._username and not self._password:
            return ""
        if self._password:
            return f"{self._username}:{self._password}@"
        return f"{self._username}@"

    @property
    def hash(self) -> str:
        """The fragment, including its leading ``#``, or an empty string."""
        return self._hash

    @hash.setter
    def hash(self, value: Any) -> None:
        value = to_str(value)
        if value and not value.startswith("#"):
            value = f"#{value}"
        self._hash = value

    @property
    def host(self) -> str:
        """The hostname followed by ``:port`` when a port is set."""
        if not self._port:
            return self._hostname
        return f"{self._hostname}:{self._port}"

    @host.setter
    def host(self, value: Any) -> None:
        hostname, port = _split_host(to_str(value))
        self.hostname = hostname
        self.port = port

    @property
    def hostname(self) -> str:
        return self._hostname

    @hostname.setter
    def hostname(self, value: Any) -> None:
        # Values that would not parse back out of href are ignored.
        value = to_str(value)
        if _valid_hostname(value):
            self._hostname = value

    @property
    def href(self) -> str:
        """The whole URL as a string."""
        return f"{self._prefix}{self._pathname}{self.search}{self._hash}"

    @href.setter
    def href(self, value: Any) -> None:
        parsed = URL(value)
        self._protocol = parsed._protocol
        self._username = parsed._username
        self._password = parsed._password
        self._hostname = parsed._hostname
        self._port = parsed._port
        self._pathname = parsed._pathname
        self._search_params = parsed._search_params
        self._hash = parsed._hash

    @property
    def origin(self) -> str:
        """Scheme, hostname and port."""
        return f"{self._protocol}//{self.host}"

    @property
    def password(self) -> str:
        return self._password

    @password.setter
    def password(self, value: Any) -> None:
        self._password = to_str(value)

    @property
    def pathname(self) -> str:
        """The path, always starting with ``/``, without query or fragment."""
        return self._pathname

    @pathname.setter
    def pathname(self, value: Any) -> None:
        value = to_str(value)
        if not value.startswith("/"):
            value = f"/{value}"
        self._pathname = value

    @property
    def port(self) -> str:
        return self._port

    @port.setter
    def port(self, value: Any) -> None:
        # Non-numeric ports are ignored and the previous port is kept.
        value = to_str(value)
        if value == "" or (value.isascii() and value.isdigit()):
            self._port = value

    @property
    def protocol(self) -> str:
        """The scheme, including the final ``:``."""
        return self._protocol

    @protocol.setter
    def protocol(self, value: Any) -> None:
        value = to_str(value)
        if not value.endswith(":"):
            value += ":"
        self._protocol = value

    @property
    def search(self) -> str:
        """The query string with a leading ``?``, or empty when there is none."""
        query = self._search_params.to_string()
        if query:
            return f"?{query}"
        return query

    @search.setter
    def search(self, value: Any) -> None:
        self._search_params = QueryParams(to_str(value))

    @property
    def search_params(self) -> QueryParams:
        """The parameters of the query string. Changes show up in `href`."""
        return self._search_params

    @property
    def username(self) -> str:
        return self._username

    @username.setter
    def username(self, value: Any) -> None:
        self._username = to_str(value)

    def to_json(self) -> str:
        """Returns the whole URL. Equivalent to `href`."""
        return self.href

    def __str__(self) -> str:
        return self.href

    def __repr__(self) -> str:
        return f"URL({self.href!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URL):
            return NotImplemented
        return self.href == other.href

    __hash__ = None  # type: ignore[assignment]

    @staticmethod
    def create_object_url(obj: Any) -> str:
        """Not supported: there are no in-memory objects to address."""
        msg = "URL.create_object_url is not implemented"
        raise NotImplementedError(msg)

    @staticmethod
    def revoke_object_url(object_url: str) -> None:
        """Not supported: there are no in-memory objects to address."""
        msg = "URL.revoke_object_url is not implemented"
        raise NotImplementedError(msg)


def _split_host(host: str) -> tuple[str, str]:
    parts = host.split(":")
    if len(parts) > 2:
        raise _invalid(host)
    if len(parts) == 2:
        return parts[0], parts[1]
    return parts[0], ""


def _valid_hostname(hostname: str) -> bool:
    return bool(hostname) and not any(c in hostname for c in ":/?#@")


def _invalid(url: str) -> FetchException:
    return FetchException(Code.MALFORMED_URL, f"{url} is not a valid URL")
