"""
Helper functions for dealing with Twisted deferreds
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar, cast

from twisted.internet.defer import Deferred
from twisted.python import failure

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    # typing.Concatenate and typing.ParamSpec require Python 3.10
    from typing_extensions import Concatenate, ParamSpec

    _P = ParamSpec("_P")


_T = TypeVar("_T")


def process_chain(
    callbacks: Iterable[Callable[Concatenate[_T, _P], _T]],
    input: _T,
    *a: _P.args,
    **kw: _P.kwargs,
) -> Deferred[_T]:
    """Return a Deferred built by chaining the given callbacks"""
    d: Deferred[_T] = Deferred()
    for x in callbacks:
        d.addCallback(x, *a, **kw)
    d.callback(input)
    return d


def deferred_result(d: Deferred[_T]) -> _T:
    """Return the result of a Deferred that has already fired.

    A failure is re-raised as its original exception. Only use this for
    chains made of synchronous callbacks, it raises RuntimeError if ``d`` is
    still waiting on a result.
    """
    results: list[Any] = []
    d.addBoth(results.append)
    if not results:
        raise RuntimeError(f"{d!r} has not fired yet")
    result = results[0]
    if isinstance(result, failure.Failure):
        result.raiseException()
    return cast("_T", result)
