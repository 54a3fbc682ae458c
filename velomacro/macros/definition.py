"""
Static description of a macro and of one call site.

A ``MacroDefinition`` is built once when the macro is declared and never
mutated afterwards.  Its parameter tuple reserves slot 0 for the macro's own
name, so positional parameters are addressed ``1..accepted_arg_count``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Union


@dataclass(frozen=True)
class Parameter:
    name: str
    default: Any = None     # default-value expression, evaluated per call

    @property
    def has_default(self) -> bool:
        return self.default is not None


ParameterSpec = Union[str, Parameter, tuple]


@dataclass(frozen=True)
class MacroDefinition:
    name: str
    parameters: tuple[Parameter, ...]
    body: Any = None
    min_required: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        params = tuple(self.parameters)
        if not params:
            raise ValueError(f"Macro #{self.name} has no name slot in its parameter list")
        object.__setattr__(self, "parameters", params)
        object.__setattr__(
            self,
            "min_required",
            sum(1 for p in params[1:] if not p.has_default),
        )

    @classmethod
    def create(
        cls,
        name: str,
        parameters: Iterable[ParameterSpec] = (),
        body: Any = None,
    ) -> "MacroDefinition":
        """Build a definition from parameter names, ``(name, default)`` pairs
        or ``Parameter`` objects.  The name slot is prepended automatically.
        """
        params = [Parameter(name)]
        for spec in parameters:
            if isinstance(spec, Parameter):
                params.append(spec)
            elif isinstance(spec, str):
                params.append(Parameter(spec))
            else:
                param_name, default = spec
                params.append(Parameter(param_name, default))
        return cls(name=name, parameters=tuple(params), body=body)

    @property
    def accepted_arg_count(self) -> int:
        return len(self.parameters) - 1

    def parameter_at(self, index: int) -> Parameter:
        if not 1 <= index <= self.accepted_arg_count:
            raise IndexError(
                f"Macro #{self.name} has no parameter at position {index} "
                f"(accepts {self.accepted_arg_count})"
            )
        return self.parameters[index]

    def parameter_names(self) -> list[str]:
        return [p.name for p in self.parameters[1:]]


@dataclass(frozen=True)
class CallSite:
    """One invocation: argument expressions plus an optional body block.

    ``args`` never includes the body block.
    """
    args: tuple = ()
    body: Any = None
    line: Optional[int] = None
    column: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def supplied_count(self) -> int:
        return len(self.args)
