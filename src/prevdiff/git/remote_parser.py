"""Parser for ``git remote -v`` listings.

Each line reads ``<name>\\t<url> (<capability>)``. A remote usually shows up
twice, once for ``fetch`` and once for ``push``; lines sharing a URL are
merged into a single descriptor carrying both capabilities.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from prevdiff.git.models import RemoteDescriptor

_REMOTE_LINE_RE = re.compile(r"^(.*)\t(.*)\s\((.*)\)$")

# Tried left to right, first alternative wins. The host lands in one of
# groups 1-5 depending on the shape, the path always in group 6.
_URL_RE = re.compile(
    r"^(?:"
    r"git://(.*?)/"
    r"|https://(.*?)/"
    r"|http://(.*?)/"
    r"|[^@/:\s]+@([^/:\s]+):"
    r"|ssh://(?:.*@)?(.*?)(?::.*?)?/"
    r")(.*)$"
)
_GIT_SUFFIX_RE = re.compile(r"\.git/?$")


class RemoteParser:
    """Turn raw remote listings into :class:`RemoteDescriptor` objects.

    Usage::

        remotes = RemoteParser.parse(listing, repo_path)
        host, path = RemoteParser.decompose("git@github.com:org/repo.git")
    """

    @staticmethod
    def parse(data: Optional[str], repo_path: str) -> List[RemoteDescriptor]:
        """Return one descriptor per distinct URL, in order of first appearance.

        Lines that do not look like a remote listing are skipped.
        """
        if not data:
            return []

        remotes: List[RemoteDescriptor] = []
        by_url: Dict[str, RemoteDescriptor] = {}

        for line in data.splitlines():
            m = _REMOTE_LINE_RE.match(line)
            if m is None:
                continue

            name, url, capability = m.group(1), m.group(2), m.group(3)

            remote = by_url.get(url)
            if remote is not None:
                remote.capabilities.append(capability)
                continue

            host, path = RemoteParser.decompose(url)
            remote = RemoteDescriptor(
                repo_path=repo_path,
                name=name,
                url=url,
                host=host,
                path=path,
                capabilities=[capability],
            )
            remotes.append(remote)
            by_url[url] = remote

        return remotes

    @staticmethod
    def decompose(url: str) -> Tuple[str, str]:
        """Split a remote URL into ``(host, path)``; ``("", "")`` if unrecognised."""
        m = _URL_RE.match(url)
        if m is None:
            return "", ""

        host = next((g for g in m.groups()[:5] if g), "")
        return host, _GIT_SUFFIX_RE.sub("", m.group(6))
