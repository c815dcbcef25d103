"""Shell completion scripts.

Preset names are completed at runtime by calling ``slatus list --names``,
so the scripts never go stale when presets change.
"""

from __future__ import annotations

from .errors import InvalidInput

VERBS = (
    "list",
    "add",
    "remove",
    "set",
    "clear",
    "current",
    "config",
    "completions",
    "doctor",
)
SHELLS = ("bash", "zsh", "fish")

_BASH = """\
# slatus bash completion
# Install: slatus completions bash > ~/.local/share/bash-completion/completions/slatus
_slatus() {
    local cur prev words cword
    cur="${COMP_WORDS[COMP_CWORD]}"
    prev="${COMP_WORDS[COMP_CWORD-1]}"
    if [ "$COMP_CWORD" -eq 1 ]; then
        COMPREPLY=( $(compgen -W "{verbs}" -- "$cur") )
        return
    fi
    case "${COMP_WORDS[1]}" in
        set|remove)
            if [ "$COMP_CWORD" -eq 2 ]; then
                COMPREPLY=( $(compgen -W "$(slatus list --names 2>/dev/null)" -- "$cur") )
            fi
            ;;
        completions)
            COMPREPLY=( $(compgen -W "{shells}" -- "$cur") )
            ;;
    esac
}
complete -F _slatus slatus
"""

_ZSH = """\
#compdef slatus
# slatus zsh completion
# Install: slatus completions zsh > "${fpath[1]}/_slatus"
_slatus() {
    local -a verbs
    verbs=({verbs})
    if (( CURRENT == 2 )); then
        _describe 'command' verbs
        return
    fi
    case "$words[2]" in
        set|remove)
            (( CURRENT == 3 )) && compadd -- ${(f)"$(slatus list --names 2>/dev/null)"}
            ;;
        completions)
            compadd -- {shells}
            ;;
    esac
}
_slatus "$@"
"""

_FISH = """\
# slatus fish completion
# Install: slatus completions fish > ~/.config/fish/completions/slatus.fish
complete -c slatus -f
complete -c slatus -n "__fish_use_subcommand" -a "{verbs}"
complete -c slatus -n "__fish_seen_subcommand_from set remove" -a "(slatus list --names 2>/dev/null)"
complete -c slatus -n "__fish_seen_subcommand_from set" -s e -l expires -d "Expiration in minutes"
complete -c slatus -n "__fish_seen_subcommand_from completions" -a "{shells}"
"""

_TEMPLATES = {"bash": _BASH, "zsh": _ZSH, "fish": _FISH}


def render_completion(shell: str) -> str:
    """Return the completion script for *shell*."""
    template = _TEMPLATES.get(shell)
    if template is None:
        raise InvalidInput(
            f"Unsupported shell '{shell}' (choose from: {', '.join(SHELLS)})"
        )
    # str.replace, not str.format: the scripts are full of braces
    return template.replace("{verbs}", " ".join(VERBS)).replace(
        "{shells}", " ".join(SHELLS)
    )
