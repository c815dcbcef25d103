"""Tests for shell completion scripts."""

from __future__ import annotations

import pytest

from slatus.completions import SHELLS, VERBS, render_completion
from slatus.errors import InvalidInput


class TestRenderCompletion:
    @pytest.mark.parametrize("shell", SHELLS)
    def test_mentions_every_verb(self, shell):
        script = render_completion(shell)
        for verb in VERBS:
            assert verb in script

    @pytest.mark.parametrize("shell", SHELLS)
    def test_placeholders_filled(self, shell):
        script = render_completion(shell)
        assert "{verbs}" not in script
        assert "{shells}" not in script

    @pytest.mark.parametrize("shell", SHELLS)
    def test_completes_preset_names(self, shell):
        assert "slatus list --names" in render_completion(shell)

    def test_bash_registers_function(self):
        assert render_completion("bash").rstrip().endswith("complete -F _slatus slatus")

    def test_zsh_compdef_header(self):
        assert render_completion("zsh").startswith("#compdef slatus")

    def test_unknown_shell(self):
        with pytest.raises(InvalidInput, match="tcsh"):
            render_completion("tcsh")
