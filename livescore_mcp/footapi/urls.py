"""Upstream URL construction."""

from typing import Iterable, Optional, Tuple
from urllib.parse import quote, urlencode

from .arguments import ToolArguments


def path_segment(value: str) -> str:
    """Percent-escape a user-supplied identifier for use inside a path segment."""
    return quote(str(value), safe="")


def join_path(base_url: str, *parts: str) -> str:
    return "/".join([base_url.rstrip("/")] + [p.strip("/") for p in parts if p])


def _with_query(url: str, pairs: Iterable[Tuple[str, str]]) -> str:
    # Query keys are emitted sorted, so identical calls build identical URLs
    return f"{url}?{urlencode(sorted(pairs))}"


def build_url(base_url: str, path: str, args: ToolArguments,
              extra: Optional[Iterable[Tuple[str, object]]] = None) -> str:
    """Build an upstream URL for `path` carrying `lang`, `version` and any extra pairs.

    Args:
        base_url: Upstream API base URL
        path: Relative path, identifiers already escaped
        args: Resolved tool arguments
        extra: Additional query key/value pairs

    Returns:
        Fully qualified URL
    """
    query = {"lang": args.language, "version": str(args.version)}
    for key, value in extra or ():
        query[key] = str(value)
    return _with_query(join_path(base_url, path), query.items())


def build_search_url(base_url: str, args: ToolArguments) -> str:
    """Build the search URL; `country` is only sent when non-empty."""
    query = {
        "q": args["q"],
        "lang": args.language,
        "version": str(args.version),
    }
    if args["country"]:
        query["country"] = args["country"]
    return _with_query(join_path(base_url, "search_v3"), query.items())


def build_image_url(base_url: str, team_id: str) -> str:
    return join_path(base_url, "images", "teams_gs", f"{path_segment(team_id)}.png")


__all__ = [
    "path_segment",
    "join_path",
    "build_url",
    "build_search_url",
    "build_image_url",
]
