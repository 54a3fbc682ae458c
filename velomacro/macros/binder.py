"""
Argument binder
---------------
Matches a call site's argument expressions against a macro's parameter list
and writes the results into the macro's new scope.

Argument and default expressions are always evaluated against the *caller's*
context, never against the scope being populated, and each is evaluated at
most once.

Strict mode raises ``ArgumentCountError`` on any arity mismatch.  Lenient mode
logs the mismatch at debug level, ignores surplus arguments, and stops binding
at the first parameter that has neither a supplied value nor a default; that
parameter and every one after it stay unbound for the call.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence, Union

from .context import Context, ScopeContext
from .definition import MacroDefinition
from .exceptions import ArgumentCountError, ArgumentCountKind
from .location import Location

logger = logging.getLogger(__name__)

Evaluator = Callable[[Any, Context], Any]


def arity_message(macro: str, wanted: int, given: int) -> str:
    which = "few" if wanted > given else "many"
    return f"VM #{macro}: too {which} arguments to macro. Wanted {wanted} got {given}"


def bind_arguments(
    definition: MacroDefinition,
    args: Sequence[Any],
    scope: ScopeContext,
    caller: Context,
    *,
    evaluate: Evaluator,
    strict: bool = False,
    location: Union[str, Location] = Location(),
) -> ScopeContext:
    """Bind *args* to *definition*'s parameters inside *scope* and return it."""
    call_arg_num = len(args)
    accepted = definition.accepted_arg_count

    if call_arg_num > accepted:
        if strict:
            raise ArgumentCountError(
                ArgumentCountKind.TOO_MANY, definition.name, accepted, call_arg_num, location,
            )
        logger.debug(
            "%s at %s", arity_message(definition.name, accepted, call_arg_num), location,
        )

    for i in range(1, accepted + 1):
        param = definition.parameters[i]
        if i - 1 < call_arg_num:
            scope.put(param.name, evaluate(args[i - 1], caller))
        elif param.has_default:
            scope.put(param.name, evaluate(param.default, caller))
        elif strict:
            raise ArgumentCountError(
                ArgumentCountKind.TOO_FEW, definition.name,
                definition.min_required, call_arg_num, location,
            )
        else:
            logger.debug(
                "%s at %s", arity_message(definition.name, accepted, call_arg_num), location,
            )
            break

    return scope
