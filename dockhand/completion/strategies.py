"""Stock completion functions.

Every function here has the signature ``(ctx, args, incomplete) ->
CompletionResult``. Factories return such a function bound to a list, a
cache or a live source.
"""

import os
from typing import Callable

from dockhand.completion import sources
from dockhand.completion.directive import CompletionResult, Directive
from dockhand.completion.dynamic import DynamicSource
from dockhand.utils.cache import StaticCache


def no_complete(ctx, args, incomplete: str) -> CompletionResult:
    """For flags whose values cannot be suggested"""
    return CompletionResult([], Directive.DEFAULT)


def file_names(ctx, args, incomplete: str) -> CompletionResult:
    """Let the shell complete paths"""
    return CompletionResult([], Directive.DEFAULT)


def from_list(*values: str) -> Callable[..., CompletionResult]:
    """Offer a fixed set of keywords"""
    frozen = tuple(values)

    def complete(ctx, args, incomplete: str) -> CompletionResult:
        return CompletionResult(list(frozen), Directive.NO_FILE_COMP)

    return complete


def env_var_names(ctx, args, incomplete: str) -> CompletionResult:
    return CompletionResult(list(os.environ), Directive.NO_FILE_COMP)


platforms = from_list(*sources.COMMON_PLATFORMS)
restart_policies = from_list(*sources.RESTART_POLICIES)


def capabilities(cache: StaticCache) -> Callable[..., CompletionResult]:
    def complete(ctx, args, incomplete: str) -> CompletionResult:
        return CompletionResult(list(sources.capability_names(cache)), Directive.NO_FILE_COMP)

    return complete


def signals(cache: StaticCache) -> Callable[..., CompletionResult]:
    def complete(ctx, args, incomplete: str) -> CompletionResult:
        return CompletionResult(list(sources.signal_names(cache)), Directive.NO_FILE_COMP)

    return complete


def names_from(source: DynamicSource) -> Callable[..., CompletionResult]:
    """Live names (containers, networks) with no file fallback"""

    def complete(ctx, args, incomplete: str) -> CompletionResult:
        return CompletionResult(source.list(incomplete), Directive.NO_FILE_COMP)

    return complete
