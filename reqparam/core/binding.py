"""Binding of raw query parameters to typed handler arguments.

A handler declares an ordered list of :class:`ParameterSpec` and calls
:func:`bind` once per request with the raw multi-valued query. The rules
mirror annotation-driven request parameter binding:

- absent (or blank) parameters fall back to the default value, then to a
  bound-absent value when optional, and fail when required;
- a ``SCALAR_INT`` that is optional and absent binds to ``0``, not ``None``.
  Callers that must tell "not given" from "given as 0" declare
  ``SCALAR_INTEGER_NULLABLE`` instead;
- several occurrences bound to a plain string are joined with ``,``;
- malformed numbers always fail, they never fall back to the absent value.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Set, Tuple, Union

from .exceptions import MissingParameterError, TypeConversionError


logger = logging.getLogger(__name__)


INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

# Decimal only: hex (0x1A, #1A) and leading-zero octal are not accepted.
_INTEGER_PATTERN = re.compile(r'^[+-]?[0-9]+$')

RawQuery = Mapping[str, Sequence[str]]
BoundValue = Union[int, str, None, Tuple[str, ...], List[str], Set[str]]


class TargetKind(str, Enum):
    SCALAR_INT = "scalar-int"
    SCALAR_INTEGER_NULLABLE = "scalar-integer-nullable"
    SCALAR_STRING = "scalar-string"
    ARRAY_OF_STRING = "array-of-string"
    ORDERED_LIST_OF_STRING = "ordered-list-of-string"
    UNIQUE_SET_OF_STRING = "unique-set-of-string"

    @property
    def is_collection(self) -> bool:
        return self in _COLLECTION_KINDS

    @property
    def is_numeric(self) -> bool:
        return self in (TargetKind.SCALAR_INT, TargetKind.SCALAR_INTEGER_NULLABLE)


_COLLECTION_KINDS = frozenset({
    TargetKind.ARRAY_OF_STRING,
    TargetKind.ORDERED_LIST_OF_STRING,
    TargetKind.UNIQUE_SET_OF_STRING,
})


@dataclass(frozen=True)
class ParameterSpec:
    """Declares how one query parameter binds to a handler argument.

    Attributes:
        source_name: Query key to read.
        target_kind: Kind of value to produce.
        required: Whether absence is an error. Ignored when a default is set.
        default_value: Raw default, parsed exactly like a query value.
        target_name: Key of the bound value in the result; ``source_name``
            when not given.
    """

    source_name: str
    target_kind: TargetKind
    required: bool = True
    default_value: Optional[str] = None
    target_name: Optional[str] = None

    @property
    def key(self) -> str:
        return self.target_name or self.source_name

    @property
    def is_required(self) -> bool:
        return self.required and self.default_value is None


def absent_value(kind: TargetKind) -> BoundValue:
    """Return the value an optional parameter binds to when not given."""
    if kind == TargetKind.SCALAR_INT:
        return 0
    if kind == TargetKind.ARRAY_OF_STRING:
        return ()
    if kind == TargetKind.ORDERED_LIST_OF_STRING:
        return []
    if kind == TargetKind.UNIQUE_SET_OF_STRING:
        return set()
    return None


def parse_int(name: str, raw_value: str, kind: TargetKind) -> int:
    text = raw_value.strip()
    if not _INTEGER_PATTERN.match(text):
        raise TypeConversionError(name, raw_value, kind)
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        raise TypeConversionError(name, raw_value, kind)
    return value


def _occurrences(raw_query: RawQuery, name: str) -> List[str]:
    values = raw_query.get(name) or ()
    if isinstance(values, str):
        values = [values]
    values = list(values)
    if all(value == "" for value in values):
        return []
    return values


def _convert(spec: ParameterSpec, occurrences: List[str]) -> BoundValue:
    kind = spec.target_kind
    if kind == TargetKind.ARRAY_OF_STRING:
        return tuple(occurrences)
    if kind == TargetKind.ORDERED_LIST_OF_STRING:
        return list(occurrences)
    if kind == TargetKind.UNIQUE_SET_OF_STRING:
        return set(occurrences)
    if kind == TargetKind.SCALAR_STRING:
        return ",".join(occurrences)
    return parse_int(spec.source_name, occurrences[0], kind)


def bind_one(raw_query: RawQuery, spec: ParameterSpec) -> BoundValue:
    occurrences = _occurrences(raw_query, spec.source_name)
    # A blank first value of a numeric kind counts as absent.
    if spec.target_kind.is_numeric and occurrences and occurrences[0] == "":
        occurrences = []
    if not occurrences:
        if spec.default_value is not None:
            return _convert(spec, [spec.default_value])
        if not spec.required:
            return absent_value(spec.target_kind)
        raise MissingParameterError(spec.source_name)
    return _convert(spec, occurrences)


def bind(raw_query: RawQuery, specs: Sequence[ParameterSpec]) -> Dict[str, BoundValue]:
    """Bind every declared parameter from a raw query.

    Args:
        raw_query: Parameter name to its raw values, in URL order.
        specs: Parameter declarations, evaluated in order.

    Returns:
        Mapping of each spec's key to its bound value.

    Raises:
        MissingParameterError: A required parameter is absent.
        TypeConversionError: A numeric parameter is not a valid integer.
    """
    bound: Dict[str, BoundValue] = {}
    for spec in specs:
        try:
            bound[spec.key] = bind_one(raw_query, spec)
        except (MissingParameterError, TypeConversionError) as e:
            logger.debug(f"Binding failed for '{spec.source_name}': {e}")
            raise
    return bound
