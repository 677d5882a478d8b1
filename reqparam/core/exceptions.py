from typing import Any


class BindingError(Exception):
    """Base class for request parameter binding failures.

    Every binding failure is a client error: the request carried the wrong
    parameters, so the boundary answers with ``status_code``.
    """

    status_code = 400

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {
            "detail": self.message,
            "parameter": self.name,
            "error": type(self).__name__,
        }


class MissingParameterError(BindingError):
    def __init__(self, name: str):
        super().__init__(name, f"Required request parameter '{name}' is not present")


class TypeConversionError(BindingError):
    def __init__(self, name: str, raw_value: str, kind: Any):
        kind_label = getattr(kind, "value", kind)
        super().__init__(
            name,
            f"Failed to convert value '{raw_value}' of parameter '{name}' to {kind_label}",
        )
        self.raw_value = raw_value
        self.kind = kind

