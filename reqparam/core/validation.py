import re
from typing import Sequence

from .binding import ParameterSpec, TargetKind, parse_int
from .exceptions import TypeConversionError

PARAMETER_NAME_PATTERN = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_.\-\[\]]*$')


def validate_spec(spec: ParameterSpec) -> None:
    if not isinstance(spec.target_kind, TargetKind):
        raise ValueError(f"Invalid target kind for '{spec.source_name}': {spec.target_kind!r}")

    if not spec.source_name or not PARAMETER_NAME_PATTERN.match(spec.source_name):
        raise ValueError(f"Invalid parameter name: {spec.source_name!r}")

    if spec.target_name is not None and not spec.target_name.isidentifier():
        raise ValueError(f"Invalid target name for '{spec.source_name}': {spec.target_name!r}")

    if spec.default_value is not None and spec.target_kind.is_numeric:
        try:
            parse_int(spec.source_name, spec.default_value, spec.target_kind)
        except TypeConversionError as e:
            raise ValueError(f"Invalid default value for '{spec.source_name}': {e}") from e


def validate_specs(specs: Sequence[ParameterSpec]) -> None:
    """Check a handler's parameter declarations before any request is bound.

    Raises:
        ValueError: A spec is malformed, a numeric default does not parse, or
            two specs bind to the same result key.
    """
    seen = set()
    for spec in specs:
        validate_spec(spec)
        if spec.key in seen:
            raise ValueError(f"Duplicate bound parameter: {spec.key!r}")
        seen.add(spec.key)
