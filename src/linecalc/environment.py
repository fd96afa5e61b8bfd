"""Name tables that identifiers resolve against.

Constants and functions are installed once at startup; variables change
only through the assignment form of a statement. The three key sets stay
disjoint: assignment never shadows a constant or a function.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .errors import (
    ArityError,
    AssignmentTargetError,
    DomainError,
    UndefinedFunctionError,
    UndefinedIdentifierError,
)


@dataclass(frozen=True)
class Function:
    name: str
    arities: Tuple[int, ...]
    impl: Callable[..., float]
    doc: str = ""

    def __call__(self, args: Sequence[float]) -> float:
        if len(args) not in self.arities:
            raise ArityError(self.name, len(args), self.arities)
        try:
            return float(self.impl(*args))
        except ZeroDivisionError:
            raise DomainError(self.name, "division by zero") from None
        except OverflowError:
            raise DomainError(self.name, "result out of range") from None
        except ValueError:
            raise DomainError(self.name, "math domain error") from None


@dataclass
class Snapshot:
    constants: Dict[str, float]
    variables: Dict[str, float]
    functions: Dict[str, Function]


@dataclass
class Environment:
    constants: Dict[str, float] = field(default_factory=dict)
    variables: Dict[str, float] = field(default_factory=dict)
    functions: Dict[str, Function] = field(default_factory=dict)

    # --- startup ---
    def define_constant(self, name: str, value: float) -> None:
        self._ensure_unbound(name)
        self.constants[name] = float(value)

    def define_function(self, function: Function) -> None:
        self._ensure_unbound(function.name)
        self.functions[function.name] = function

    def _ensure_unbound(self, name: str) -> None:
        kind = self.kind_of(name)
        if kind is not None:
            raise ValueError(f"name '{name}' is already bound as a {kind}")

    # --- resolution ---
    def kind_of(self, name: str) -> Optional[str]:
        if name in self.constants:
            return "constant"
        if name in self.variables:
            return "variable"
        if name in self.functions:
            return "function"
        return None

    def lookup(self, name: str) -> float:
        if name in self.constants:
            return self.constants[name]
        if name in self.variables:
            return self.variables[name]
        raise UndefinedIdentifierError(name)

    def call(self, name: str, args: List[float]) -> float:
        function = self.functions.get(name)
        if function is None:
            raise UndefinedFunctionError(name)
        return function(args)

    # --- mutation ---
    def assign(self, name: str, value: float) -> None:
        if name in self.constants:
            raise AssignmentTargetError(name, "constant")
        if name in self.functions:
            raise AssignmentTargetError(name, "function")
        self.variables[name] = value

    def clear_variables(self) -> None:
        self.variables.clear()

    # --- introspection ---
    def snapshot(self) -> Snapshot:
        return Snapshot(
            constants=dict(self.constants),
            variables=dict(self.variables),
            functions=dict(self.functions),
        )

    def names(self) -> List[str]:
        return sorted({*self.constants, *self.variables, *self.functions})


__all__ = ["Environment", "Function", "Snapshot"]
