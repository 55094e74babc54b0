"""JSON reporter for diff requests and remotes."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from prevdiff.git.models import RemoteDescriptor
from prevdiff.resolver.models import ComparisonSide, DiffRequest


def _side_dict(side: ComparisonSide) -> Dict[str, Any]:
    return {"revision": side.revision, "path": side.path}


def request_to_dict(request: DiffRequest) -> Dict[str, Any]:
    """Convert a DiffRequest to a JSON-serialisable dict."""
    return {
        "repo_path": request.repo_path,
        "left": _side_dict(request.left),
        "right": _side_dict(request.right),
        "line": request.line,
    }


def remotes_to_list(remotes: List[RemoteDescriptor]) -> List[Dict[str, Any]]:
    return [
        {
            "name": r.name,
            "url": r.url,
            "host": r.host,
            "path": r.path,
            "capabilities": list(r.capabilities),
            "repo_path": r.repo_path,
        }
        for r in remotes
    ]


def render_request(request: DiffRequest) -> str:
    """Return formatted JSON string."""
    return json.dumps(request_to_dict(request), indent=2)


def render_remotes(remotes: List[RemoteDescriptor]) -> str:
    return json.dumps(remotes_to_list(remotes), indent=2)
