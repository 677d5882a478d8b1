from typing import Dict, Iterable, List, Tuple
from urllib.parse import parse_qsl

from fastapi import Request


def group_query_items(items: Iterable[Tuple[str, str]]) -> Dict[str, List[str]]:
    """Group ``(key, value)`` pairs into key -> values, keeping URL order."""
    raw_query: Dict[str, List[str]] = {}
    for key, value in items:
        raw_query.setdefault(key, []).append(value)
    return raw_query


def parse_query_string(query: str) -> Dict[str, List[str]]:
    """Parse ``a=1&a=2&b=`` into ``{"a": ["1", "2"], "b": [""]}``.

    A leading ``?`` is ignored. Blank values are kept so the binder can treat
    ``?b=`` like an absent parameter.
    """
    return group_query_items(parse_qsl(query.lstrip('?'), keep_blank_values=True))


def raw_query_from_request(request: Request) -> Dict[str, List[str]]:
    return group_query_items(request.query_params.multi_items())
