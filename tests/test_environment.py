import math
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from linecalc.environment import Environment, Function  # noqa: E402
from linecalc.errors import (  # noqa: E402
    ArityError,
    AssignmentTargetError,
    DomainError,
    UndefinedFunctionError,
    UndefinedIdentifierError,
)
from linecalc.parser import evaluate  # noqa: E402
from linecalc.prelude import CONSTANTS, FUNCTIONS, default_environment  # noqa: E402


def log_feature(name: str):
    print(f"[feature] {name}")


def fabricated() -> Environment:
    env = Environment()
    env.define_constant("k", 2)
    env.define_function(Function("double", (1,), lambda x: 2 * x))
    return env


def test_lookup_prefers_constants_then_variables():
    log_feature("name resolution order")
    env = fabricated()
    env.variables["v"] = 5.0
    assert env.lookup("k") == 2
    assert env.lookup("v") == 5
    with pytest.raises(UndefinedIdentifierError):
        env.lookup("double")


def test_fabricated_environment_drives_the_grammar():
    env = fabricated()
    assert evaluate("double(k) + 1", env) == 5
    with pytest.raises(UndefinedIdentifierError):
        evaluate("pi", env)


def test_assign_rejects_constant_and_function_names():
    log_feature("assignment targets")
    env = fabricated()
    with pytest.raises(AssignmentTargetError):
        env.assign("k", 1)
    with pytest.raises(AssignmentTargetError):
        env.assign("double", 1)
    assert env.variables == {}
    env.assign("x", 1.5)
    env.assign("x", 2.5)
    assert env.variables == {"x": 2.5}


def test_startup_definitions_keep_tables_disjoint():
    env = fabricated()
    with pytest.raises(ValueError):
        env.define_constant("double", 1)
    with pytest.raises(ValueError):
        env.define_function(Function("k", (0,), lambda: 0))


def test_kind_of():
    env = fabricated()
    env.assign("x", 0)
    assert env.kind_of("k") == "constant"
    assert env.kind_of("x") == "variable"
    assert env.kind_of("double") == "function"
    assert env.kind_of("nope") is None


def test_call_unknown_function():
    with pytest.raises(UndefinedFunctionError):
        fabricated().call("triple", [1.0])


def test_function_enforces_arity():
    fn = Function("two", (2,), lambda a, b: a + b)
    assert fn([1, 2]) == 3
    with pytest.raises(ArityError) as info:
        fn([1])
    assert info.value.expected == (2,)
    assert "expected 2, got 1" in str(info.value)


def test_function_maps_math_errors_to_domain_errors():
    with pytest.raises(DomainError):
        Function("bad", (1,), math.sqrt)([-1.0])
    with pytest.raises(DomainError):
        Function("big", (1,), math.exp)([1000.0])
    with pytest.raises(DomainError):
        Function("div", (2,), lambda a, b: a / b)([1.0, 0.0])


def test_snapshot_is_independent_copy():
    env = default_environment()
    snap = env.snapshot()
    env.assign("x", 1)
    assert "x" not in snap.variables
    assert env.snapshot() != snap


def test_clear_variables_keeps_constants_and_functions():
    env = default_environment()
    env.assign("x", 1)
    env.clear_variables()
    assert env.variables == {}
    assert env.constants == CONSTANTS
    assert set(env.functions) == {f.name for f in FUNCTIONS}


def test_names_lists_every_table():
    env = fabricated()
    env.assign("x", 0)
    assert env.names() == ["double", "k", "x"]


def test_prelude_contents():
    log_feature("prelude")
    env = default_environment()
    assert env.constants == {"pi": 3.1415926535898, "e": 2.7182818284590}
    assert env.constants["pi"] != math.pi
    assert sorted(env.functions) == [
        "abs",
        "cos",
        "exp",
        "log",
        "pow",
        "sin",
        "sqrt",
        "tan",
    ]
    assert env.functions["log"].arities == (1, 2)
    assert env.variables == {}


def test_two_argument_log_divides_natural_logs():
    env = default_environment()
    assert env.call("log", [1000.0, 10.0]) == math.log(1000.0) / math.log(10.0)


def test_default_environments_are_independent():
    a = default_environment()
    b = default_environment()
    a.assign("x", 1)
    assert b.variables == {}
