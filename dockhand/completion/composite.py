"""Completions built by combining a fixed shape with a live lookup.

``--ipc`` accepts either a mode keyword or ``container:<name>``; ``--link``
accepts ``<name>[:alias]``.
"""

from enum import Enum
from typing import List, Sequence

from dockhand.completion.directive import CompletionResult, Directive
from dockhand.completion.dynamic import DynamicSource

IPC_QUALIFIER = "container"
IPC_SEPARATOR = ":"
IPC_QUALIFIER_TOKEN = IPC_QUALIFIER + IPC_SEPARATOR
IPC_MODES = ("host", "none", "private", "shareable")

LINK_ALIAS_SEPARATOR = ":"


def prefix_with(prefix: str, values: Sequence[str]) -> List[str]:
    return [prefix + v for v in values]


def postfix_with(postfix: str, values: Sequence[str]) -> List[str]:
    return [v + postfix for v in values]


class IpcBranch(Enum):
    QUALIFIER_PREFIX = "qualifier-prefix"
    QUALIFIER_SCOPED = "qualifier-scoped"
    KEYWORD = "keyword"


def classify_ipc(partial: str) -> IpcBranch:
    """Decide which part of the ``--ipc`` value space is being typed.

    Order matters: anything that could still grow into ``container:`` is
    completed to the qualifier first, since a name can only be resolved once
    the separator is present.
    """
    if IPC_QUALIFIER.startswith(partial):
        return IpcBranch.QUALIFIER_PREFIX
    if partial.startswith(IPC_QUALIFIER_TOKEN):
        return IpcBranch.QUALIFIER_SCOPED
    return IpcBranch.KEYWORD


class IpcCompleter:
    def __init__(self, containers: DynamicSource):
        self.containers = containers

    def __call__(self, ctx, args, incomplete: str) -> CompletionResult:
        branch = classify_ipc(incomplete)

        if branch is IpcBranch.QUALIFIER_PREFIX:
            return CompletionResult([IPC_QUALIFIER_TOKEN], Directive.NO_SPACE)

        if branch is IpcBranch.QUALIFIER_SCOPED:
            remainder = incomplete[len(IPC_QUALIFIER_TOKEN):]
            names = self.containers.list(remainder)
            return CompletionResult(prefix_with(IPC_QUALIFIER_TOKEN, names), Directive.NO_FILE_COMP)

        return CompletionResult([IPC_QUALIFIER_TOKEN, *IPC_MODES], Directive.NO_FILE_COMP)


class LinkCompleter:
    """Container names with ``:`` appended, ready for an alias"""

    def __init__(self, containers: DynamicSource):
        self.containers = containers

    def __call__(self, ctx, args, incomplete: str) -> CompletionResult:
        names = self.containers.list(incomplete)
        return CompletionResult(postfix_with(LINK_ALIAS_SEPARATOR, names), Directive.NO_SPACE)
