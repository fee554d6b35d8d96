"""Flag value completion for container commands."""

from dockhand.completion.container import add_container_completions, build_registry
from dockhand.completion.directive import CompletionResult, Directive
from dockhand.completion.registry import CompletionRegistry, attach

__all__ = [
    "CompletionRegistry",
    "CompletionResult",
    "Directive",
    "add_container_completions",
    "attach",
    "build_registry",
]
