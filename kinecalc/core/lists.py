"""Named list variables.

Each list variable is an ordered list of single-argument calls such as
``"m(μ)"``. The evaluator expands a list variable by invoking each entry
through the ``FunctionRegistry``, so every referenced function name must be
registered there.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from kinecalc.core.errors import InvalidArgumentError
from kinecalc.core.registry import FunctionRegistry
from kinecalc.utils.validation import ValidationResult

LIST_VARIABLES: dict[str, list[str]] = {
    "Leptons": ["m(e)", "m(μ)", "m(τ)", "m(ν_e)", "m(ν_μ)", "m(ν_τ)"],
    "Nucleons": ["m(p)", "m(n)"],
}

_CALL_RE = re.compile(r"^\s*(?P<func>[A-Za-z_]\w*)\((?P<arg>[^()]*)\)\s*$")


def parse_call(expr: str) -> tuple[str, str]:
    """Split ``"name(arg)"`` into ``("name", "arg")``.

    Raises:
        InvalidArgumentError: If *expr* is not a single-argument call.
    """
    match = _CALL_RE.match(expr)
    if match is None:
        raise InvalidArgumentError(f"Malformed list entry: {expr!r}")
    return match.group("func"), match.group("arg").strip()


def check_list_variables(
    registry: FunctionRegistry,
    variables: Mapping[str, Sequence[str]] = LIST_VARIABLES,
) -> ValidationResult:
    """Report list entries that are malformed or call unregistered functions."""
    result = ValidationResult()
    for list_name, entries in variables.items():
        for expr in entries:
            try:
                func, _ = parse_call(expr)
            except InvalidArgumentError as exc:
                result.error(list_name, str(exc), value=expr)
                continue
            if func not in registry:
                result.error(list_name, f"'{expr}' calls unregistered function '{func}'", value=expr)
    return result


def resolve_list_variable(
    name: str,
    registry: FunctionRegistry,
    variables: Mapping[str, Sequence[str]] = LIST_VARIABLES,
) -> list[float]:
    """Evaluate every entry of list variable *name*.

    Raises:
        KeyError: If *name* is not a list variable.
    """
    if name not in variables:
        raise KeyError(f"List variable '{name}' not found. Available: {list(variables)}")
    values = []
    for expr in variables[name]:
        func, arg = parse_call(expr)
        values.append(registry.call(func, arg))
    return values
