"""Student operations: request parameter binding scenarios.

Each operation declares the parameters its route reads and how the bound
values are reported. All operations share one evaluator,
:func:`run_operation`, which binds the raw query, logs the report lines and
returns the fixed view name.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from ..core.binding import BoundValue, ParameterSpec, RawQuery, TargetKind, bind
from ..core.config import Config
from ..core.validation import validate_specs


logger = logging.getLogger(__name__)

Report = Callable[[Dict[str, BoundValue]], List[str]]


@dataclass(frozen=True)
class StudentOperation:
    name: str
    title: str
    specs: Tuple[ParameterSpec, ...]
    report: Report
    example: str
    description: str = ""

    @property
    def path(self) -> str:
        return f"/{self.name}"


@dataclass
class OperationResult:
    view: str
    case: str
    params: Dict[str, BoundValue]
    output: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "view": self.view,
            "case": self.case,
            "params": {key: jsonable(value) for key, value in self.params.items()},
            "output": list(self.output),
        }


def jsonable(value: BoundValue) -> Any:
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    if isinstance(value, tuple):
        return list(value)
    return value


def format_value(value: BoundValue) -> str:
    """Render a bound value the way the console report shows it.

    ``None`` prints as ``null`` and collections print as ``[a, b]``. Sets are
    sorted so the report is stable.
    """
    if value is None:
        return "null"
    if isinstance(value, (set, frozenset)):
        return "[" + ", ".join(sorted(value)) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(value) + "]"
    return str(value)


def _joined(*keys: str) -> Report:
    def report(params: Dict[str, BoundValue]) -> List[str]:
        return [" ".join(format_value(params[key]) for key in keys)]
    return report


def _wrapper_report(params: Dict[str, BoundValue]) -> List[str]:
    return [f"AGE: {format_value(params['age'])}"]


def _multi_report(params: Dict[str, BoundValue]) -> List[str]:
    return [
        f"Array : {format_value(params['city_array'])}",
        f"List  : {format_value(params['city_list'])}",
        f"Set   : {format_value(params['city_set'])}",
    ]


def _duplicate_report(params: Dict[str, BoundValue]) -> List[str]:
    return [
        f"List: {format_value(params['list'])}",
        f"Set : {format_value(params['set'])}",
    ]


def _csv_report(params: Dict[str, BoundValue]) -> List[str]:
    lines = _joined("sno", "sname", "city")(params)
    city = params["city"]
    if city is not None:
        lines.extend(f"CITY: {c.strip()}" for c in city.split(","))
    return lines


OPERATIONS: Dict[str, StudentOperation] = {
    op.name: op
    for op in (
        StudentOperation(
            name="basic",
            title="CASE 1: BASIC BINDING",
            specs=(
                ParameterSpec("sno", TargetKind.SCALAR_INT, target_name="no"),
                ParameterSpec("sname", TargetKind.SCALAR_STRING, target_name="name"),
            ),
            report=_joined("no", "name"),
            example="/basic?sno=101&sname=John",
            description="Both parameters are required and bound to differently named arguments.",
        ),
        StudentOperation(
            name="implicit",
            title="CASE 2: IMPLICIT NAMES",
            specs=(
                ParameterSpec("sno", TargetKind.SCALAR_INT),
                ParameterSpec("sname", TargetKind.SCALAR_STRING),
            ),
            report=_joined("sno", "sname"),
            example="/implicit?sno=101&sname=John",
            description="Arguments named after the query keys. Names are case-sensitive.",
        ),
        StudentOperation(
            name="optional",
            title="CASE 3: OPTIONAL PARAM",
            specs=(
                ParameterSpec("sno", TargetKind.SCALAR_INTEGER_NULLABLE),
                ParameterSpec("sname", TargetKind.SCALAR_STRING, required=False),
            ),
            report=_joined("sno", "sname"),
            example="/optional?sno=101",
            description="sno is required, sname binds to null when missing.",
        ),
        StudentOperation(
            name="wrapper",
            title="CASE 4: WRAPPER TYPE",
            specs=(
                ParameterSpec("age", TargetKind.SCALAR_INTEGER_NULLABLE, required=False),
            ),
            report=_wrapper_report,
            example="/wrapper?age=25",
            description="A nullable integer binds to null, not 0, when missing.",
        ),
        StudentOperation(
            name="default",
            title="CASE 5: DEFAULT VALUES",
            specs=(
                ParameterSpec("sno", TargetKind.SCALAR_INT, default_value="0"),
                ParameterSpec("sname", TargetKind.SCALAR_STRING, default_value="Guest"),
            ),
            report=_joined("sno", "sname"),
            example="/default?sno=101",
            description="A default value makes the parameter optional.",
        ),
        StudentOperation(
            name="multi",
            title="CASE 6: MULTIPLE VALUES",
            specs=(
                ParameterSpec("city", TargetKind.ARRAY_OF_STRING, target_name="city_array"),
                ParameterSpec("city", TargetKind.ORDERED_LIST_OF_STRING, target_name="city_list"),
                ParameterSpec("city", TargetKind.UNIQUE_SET_OF_STRING, target_name="city_set"),
            ),
            report=_multi_report,
            example="/multi?city=Hyd&city=Pune&city=Delhi",
            description="One repeated key bound as array, list and set.",
        ),
        StudentOperation(
            name="duplicate",
            title="CASE 7: DUPLICATES",
            specs=(
                ParameterSpec("city", TargetKind.ORDERED_LIST_OF_STRING, target_name="list"),
                ParameterSpec("city", TargetKind.UNIQUE_SET_OF_STRING, target_name="set"),
            ),
            report=_duplicate_report,
            example="/duplicate?city=Hyd&city=Pune&city=Hyd",
            description="Lists keep duplicate values, sets drop them.",
        ),
        StudentOperation(
            name="csv",
            title="CASE 8: CSV VALUES",
            specs=(
                ParameterSpec("sno", TargetKind.SCALAR_INTEGER_NULLABLE, required=False),
                ParameterSpec("sname", TargetKind.SCALAR_STRING),
                ParameterSpec("city", TargetKind.SCALAR_STRING, required=False),
            ),
            report=_csv_report,
            example="/csv?sno=101&sname=John&city=Hyd&city=Pune&city=Delhi",
            description="Repeated values bound to a plain string are joined with commas.",
        ),
        StudentOperation(
            name="mixed",
            title="CASE 9: MIXED",
            specs=(
                ParameterSpec("sno", TargetKind.SCALAR_INT, default_value="0"),
                ParameterSpec("sname", TargetKind.SCALAR_STRING),
                ParameterSpec("age", TargetKind.SCALAR_INTEGER_NULLABLE, required=False),
            ),
            report=_joined("sno", "sname", "age"),
            example="/mixed?sno=101&sname=John&age=25",
            description="Required, optional and defaulted parameters together.",
        ),
    )
}

for _operation in OPERATIONS.values():
    validate_specs(_operation.specs)


def get_operation(name: str) -> StudentOperation:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise KeyError(f"Unknown student operation: {name}") from None


def run_operation(name: str, raw_query: RawQuery) -> OperationResult:
    """Bind the raw query for one operation and report the bound values.

    Args:
        name: Operation name, which is also its route path without the slash.
        raw_query: Parameter name to raw values, in URL order.

    Returns:
        The view name, the bound parameters and the report lines.

    Raises:
        BindingError: Binding failed; nothing is reported.
    """
    operation = get_operation(name)
    params = bind(raw_query, operation.specs)

    output = [operation.title] + operation.report(params)
    for line in output:
        logger.info(line)

    return OperationResult(view=Config.VIEW_NAME, case=operation.title, params=params, output=output)


def catalogue() -> List[Dict[str, Any]]:
    """Describe every operation with its parameters and an example URL."""
    return [
        {
            "path": op.path,
            "case": op.title,
            "description": op.description,
            "example": op.example,
            "parameters": [
                {
                    "name": spec.source_name,
                    "bound_as": spec.key,
                    "kind": spec.target_kind.value,
                    "required": spec.is_required,
                    "default": spec.default_value,
                }
                for spec in op.specs
            ],
        }
        for op in OPERATIONS.values()
    ]
