"""Startup contents of the environment: numeric constants and math functions."""

from __future__ import annotations

import math
from typing import Dict, List, Optional

from .environment import Environment, Function

# Fixed-precision literals, not math.pi / math.e.
CONSTANTS: Dict[str, float] = {
    "pi": 3.1415926535898,
    "e": 2.7182818284590,
}


def _log(x: float, base: Optional[float] = None) -> float:
    if base is None:
        return math.log(x)
    return math.log(x) / math.log(base)


FUNCTIONS: List[Function] = [
    Function("abs", (1,), abs, "absolute value"),
    Function("pow", (2,), math.pow, "x raised to the power y"),
    Function("sqrt", (1,), math.sqrt, "square root"),
    Function("exp", (1,), math.exp, "e raised to the power x"),
    Function("log", (1, 2), _log, "natural log, or log of x in base b"),
    Function("sin", (1,), math.sin, "sine (radians)"),
    Function("cos", (1,), math.cos, "cosine (radians)"),
    Function("tan", (1,), math.tan, "tangent (radians)"),
]


def setup(env: Environment) -> Environment:
    for name, value in CONSTANTS.items():
        env.define_constant(name, value)
    for function in FUNCTIONS:
        env.define_function(function)
    return env


def default_environment() -> Environment:
    return setup(Environment())


__all__ = ["CONSTANTS", "FUNCTIONS", "setup", "default_environment"]
