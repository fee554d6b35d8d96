"Directive-aware shell completion scripts for the dockhand CLI"

from click.shell_completion import (
    BashComplete,
    CompletionItem,
    ZshComplete,
    add_completion_class,
)

from dockhand.completion.directive import Directive


def item_directive(item: CompletionItem) -> int:
    """Directive carried by a completion item; plain click items have none"""
    return int(item.directive or Directive.DEFAULT)


# Each response line is "type,directive,value"; read leaves any commas in
# the value to the last variable.
BASH_SOURCE = """\
%(complete_func)s() {
    local IFS=$'\\n'
    local response

    response=$(env COMP_WORDS="${COMP_WORDS[*]}" COMP_CWORD=$COMP_CWORD \
%(complete_var)s=bash_complete $1)

    for completion in $response; do
        IFS=',' read type directive value <<< "$completion"

        if (( directive & 2 )); then
            compopt -o nospace
        fi

        if [[ $type == 'dir' ]]; then
            COMPREPLY=()
            compopt -o dirnames
        elif [[ $type == 'file' ]]; then
            COMPREPLY=()
            if (( ! (directive & 4) )); then
                compopt -o default
            fi
        elif [[ $type == 'plain' ]]; then
            COMPREPLY+=($value)
        fi
    done

    return 0
}

%(complete_func)s_setup() {
    complete -o nosort -F %(complete_func)s %(prog_name)s
}

%(complete_func)s_setup;
"""

# Four lines per item: type, value, help ("_" when absent), directive.
ZSH_SOURCE = """\
#compdef %(prog_name)s

%(complete_func)s() {
    local -a completions
    local -a completions_with_descriptions
    local -a response
    local -a suffix
    (( ! $+commands[%(prog_name)s] )) && return 1

    response=("${(@f)$(env COMP_WORDS="${words[*]}" COMP_CWORD=$((CURRENT-1)) \
%(complete_var)s=zsh_complete %(prog_name)s)}")

    for type key descr directive in ${response}; do
        if (( directive & 2 )); then
            suffix=(-S '')
        fi

        if [[ "$type" == "plain" ]]; then
            if [[ "$descr" == "_" ]]; then
                completions+=("$key")
            else
                completions_with_descriptions+=("$key":"$descr")
            fi
        elif [[ "$type" == "dir" ]]; then
            _path_files -/
        elif [[ "$type" == "file" ]] && (( ! (directive & 4) )); then
            _path_files -f
        fi
    done

    if [ -n "$completions_with_descriptions" ]; then
        _describe -V unsorted completions_with_descriptions -U "${suffix[@]}"
    fi

    if [ -n "$completions" ]; then
        compadd -U -V unsorted "${suffix[@]}" -a completions
    fi
}

if [[ $zsh_eval_context[-1] == loadautofunc ]]; then
    %(complete_func)s "$@"
else
    compdef %(complete_func)s %(prog_name)s
fi
"""


class DirectiveBashComplete(BashComplete):
    """Bash completion that honours no-space and no-file directives"""

    source_template = BASH_SOURCE

    def format_completion(self, item: CompletionItem) -> str:
        return f"{item.type},{item_directive(item)},{item.value}"


class DirectiveZshComplete(ZshComplete):
    """Zsh completion that honours no-space and no-file directives"""

    source_template = ZSH_SOURCE

    def format_completion(self, item: CompletionItem) -> str:
        help_ = item.help or "_"
        # _describe splits value from help at the first unescaped colon
        value = item.value.replace(":", r"\:") if help_ != "_" else item.value
        return f"{item.type}\n{value}\n{help_}\n{item_directive(item)}"


def register_shells() -> None:
    """Replace click's bash and zsh classes with the directive-aware ones.

    Fish needs no override: it leaves out the trailing space after values
    ending in ``:`` on its own.
    """
    add_completion_class(DirectiveBashComplete)
    add_completion_class(DirectiveZshComplete)
