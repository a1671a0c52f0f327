"""Typed parameter values and a thread-safe per-scope parameter store."""

from __future__ import annotations

import enum
import json
import threading
from dataclasses import dataclass
from typing import Union

from auracore.bus import log
from auracore.errors import ParameterConfigurationError, ParameterNotFoundError

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class ParamKind(enum.Enum):
    """The type a parameter value holds."""

    STRING = "String"
    INT = "Int"
    FLOAT = "Float"
    BOOL = "Bool"


@dataclass(frozen=True)
class ParamValue:
    """A parameter value tagged with its kind."""

    kind: ParamKind
    value: Union[str, int, float, bool]

    @classmethod
    def string(cls, value: str) -> ParamValue:
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")
        return cls(ParamKind.STRING, value)

    @classmethod
    def int(cls, value: int) -> ParamValue:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        if not _I64_MIN <= value <= _I64_MAX:
            raise ValueError(f"integer {value} does not fit in 64 bits")
        return cls(ParamKind.INT, value)

    @classmethod
    def float(cls, value: float) -> ParamValue:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"expected float, got {type(value).__name__}")
        return cls(ParamKind.FLOAT, float(value))

    @classmethod
    def bool(cls, value: bool) -> ParamValue:
        if not isinstance(value, bool):
            raise TypeError(f"expected bool, got {type(value).__name__}")
        return cls(ParamKind.BOOL, value)

    def as_string(self) -> str | None:
        return self.value if self.kind is ParamKind.STRING else None

    def as_int(self) -> int | None:
        return self.value if self.kind is ParamKind.INT else None

    def as_float(self) -> float | None:
        return self.value if self.kind is ParamKind.FLOAT else None

    def as_bool(self) -> bool | None:
        return self.value if self.kind is ParamKind.BOOL else None

    def get_string(self) -> str:
        """Return the string value or raise if the kind differs."""
        if self.kind is ParamKind.STRING:
            return self.value
        raise ParameterConfigurationError(f"Expected String, found {self!r}")

    def __repr__(self) -> str:
        if self.kind is ParamKind.STRING:
            shown = json.dumps(self.value, ensure_ascii=False)
        elif self.kind is ParamKind.BOOL:
            shown = "true" if self.value else "false"
        else:
            shown = repr(self.value)
        return f"{self.kind.value}({shown})"


class ParameterManager:
    """Stores the parameters of one scope, such as a node."""

    def __init__(self, scope_name: str) -> None:
        log("debug", f"Initializing ParameterManager for scope: '{scope_name}'")
        self._scope_name = scope_name
        self._lock = threading.Lock()
        self._parameters: dict[str, ParamValue] = {}

    @property
    def scope_name(self) -> str:
        return self._scope_name

    def declare_parameter(self, name: str, default_value: ParamValue) -> None:
        """Set ``name`` to ``default_value`` unless it already has a value."""
        self._check_value(default_value)
        log(
            "info",
            f"[{self._scope_name}] Declaring parameter '{name}' with default: {default_value!r}",
        )
        with self._lock:
            self._parameters.setdefault(name, default_value)

    def set_parameter(self, name: str, value: ParamValue) -> None:
        """Set ``name`` to ``value``, creating it if needed."""
        self._check_value(value)
        log("info", f"[{self._scope_name}] Setting parameter '{name}' to: {value!r}")
        with self._lock:
            self._parameters[name] = value

    def get_parameter(self, name: str) -> ParamValue:
        """Return the value of ``name`` or raise ParameterNotFoundError."""
        with self._lock:
            value = self._parameters.get(name)
        if value is None:
            message = f"[{self._scope_name}] Parameter '{name}' not found."
            log("warn", message)
            raise ParameterNotFoundError(message)
        log("trace", f"[{self._scope_name}] Getting parameter '{name}': {value!r}")
        return value

    def has_parameter(self, name: str) -> bool:
        with self._lock:
            return name in self._parameters

    @staticmethod
    def _check_value(value: object) -> None:
        if not isinstance(value, ParamValue):
            raise TypeError(f"expected ParamValue, got {type(value).__name__}")