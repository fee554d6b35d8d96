from typing import Callable, Dict, Iterable, List, Optional, Union

import click
from click.shell_completion import CompletionItem

from dockhand.completion.directive import CompletionResult, Directive, empty
from dockhand.utils.errors import DockhandError
from dockhand.utils.logging import get_logger

logger = get_logger(__name__)

FlagCompletionFunc = Callable[..., CompletionResult]


class CompletionRegistry:
    """Maps flag names (without leading dashes) to completion functions"""

    def __init__(self):
        self._funcs: Dict[str, FlagCompletionFunc] = {}

    def register(self, flag: str, fn: FlagCompletionFunc) -> None:
        """Bind fn to flag, replacing any earlier binding"""
        if flag in self._funcs:
            logger.debug(f"Replacing completion for --{flag}")
        self._funcs[flag] = fn

    def register_many(self, flags: Iterable[str], fn: FlagCompletionFunc) -> None:
        for flag in flags:
            self.register(flag, fn)

    def lookup(self, flag: str) -> Optional[FlagCompletionFunc]:
        return self._funcs.get(flag)

    def complete(self, flag: str, ctx, args: List[str], incomplete: str) -> CompletionResult:
        """Run the completion bound to flag; unknown flags complete to nothing"""
        fn = self._funcs.get(flag)
        if fn is None:
            logger.debug(f"No completion registered for --{flag}")
            return empty()

        candidates, directive = fn(ctx, args, incomplete)
        return CompletionResult(list(candidates), Directive(directive))

    def flags(self) -> List[str]:
        return sorted(self._funcs)

    def __contains__(self, flag: object) -> bool:
        return flag in self._funcs

    def __len__(self) -> int:
        return len(self._funcs)


def long_flag_name(param: click.Parameter) -> Optional[str]:
    """First ``--long`` option name of param, without dashes"""
    for opt in getattr(param, "opts", []):
        if opt.startswith("--"):
            return opt[2:]
    return None


def to_completion_items(result: CompletionResult, incomplete: str) -> List[CompletionItem]:
    """Translate a result into click completion items.

    Click's shell scripts have no notion of directives; each item carries it
    as an attribute, and an empty DEFAULT result becomes a ``file`` item so
    the shell falls back to path completion.
    """
    candidates, directive = result
    if not candidates:
        if directive & (Directive.NO_FILE_COMP | Directive.ERROR):
            return []
        return [CompletionItem(incomplete, type="file", directive=directive)]
    return [CompletionItem(c, directive=directive) for c in candidates]


RegistrySource = Union[CompletionRegistry, Callable[[], CompletionRegistry]]


def attach(registry: RegistrySource, command: click.Command) -> click.Command:
    """Wire registry entries into the long options of a click command.

    ``registry`` may be a zero-argument callable; it is then resolved on the
    first completion request, since click completes without running group
    callbacks. Options without a registered function complete the way their
    click type does.
    """
    lazy = callable(registry)
    for param in command.params:
        if not isinstance(param, click.Option):
            continue
        flag = long_flag_name(param)
        if flag is None:
            continue
        if not lazy and flag not in registry:
            continue
        param._custom_shell_complete = _click_adapter(registry, flag)
    return command


def _click_adapter(registry: RegistrySource, flag: str):
    def shell_complete(ctx: click.Context, param: click.Parameter, incomplete: str):
        try:
            resolved = registry() if callable(registry) else registry
            if flag not in resolved:
                return param.type.shell_complete(ctx, param, incomplete)
            result = resolved.complete(flag, ctx, list(ctx.args), incomplete)
        except DockhandError as e:
            logger.debug(f"Completion of --{flag} unavailable: {e}", exc_info=True)
            return []
        return to_completion_items(result, incomplete)

    return shell_complete
