"""
Settings and codeword registry tests
"""

import pytest
from pydantic import ValidationError

from textmotion.config import AnimatorSettings
from textmotion.lib.codewords import CodewordRegistry
from textmotion.lib.compiler import markup_compile
from textmotion.lib.decoder import command_decode
from textmotion.models.codewords import CodewordRole, CodewordSpec
from textmotion.models.timeline import AnimationKind
from textmotion.models.tokens import AnimationParams, Codeword


class TestAnimatorSettings:
    """Test configuration values and validation"""

    def test_defaults_get(self):
        """The six defaults are bundled in directive order"""
        settings = AnimatorSettings(curr_amplitude=5, prev_frequency_y=0.5)
        defaults = settings.defaults_get()
        assert isinstance(defaults, AnimationParams)
        assert defaults.curr_amplitude == 5.0
        assert defaults.prev_frequency_y == 0.5

    def test_environment_override(self, monkeypatch):
        """TEXTMOTION_ environment variables are read"""
        monkeypatch.setenv("TEXTMOTION_PAUSE_WAIT", "0.8")
        monkeypatch.setenv("TEXTMOTION_TYPEWRITER_ENABLED", "false")
        settings = AnimatorSettings()
        assert settings.pause_wait == 0.8
        assert settings.typewriter_enabled is False

    @pytest.mark.parametrize("pause_char", ["<", ">", "", ".."])
    def test_invalid_pause_char(self, pause_char):
        """Pause character must be one non-bracket character"""
        with pytest.raises(ValidationError):
            AnimatorSettings(pause_char=pause_char)

    def test_negative_wait_rejected(self):
        """Waits cannot be negative"""
        with pytest.raises(ValidationError):
            AnimatorSettings(letter_wait=-0.1)

    def test_pause_char_used_by_compile(self):
        """A custom pause character drives pause splitting"""
        settings = AnimatorSettings(pause_char="!", verbosity=0)
        result = markup_compile("go!", settings)
        assert [t.content for t in result.processedTokens] == ["go", "!"]


class TestCodewordRegistry:
    """Test keyword registration and lookup"""

    def test_builtin_pairs(self):
        """End specs know which start they close"""
        registry = CodewordRegistry()
        end = registry.spec_get(Codeword.WAVE_END)
        assert end.role is CodewordRole.END
        assert end.closes is Codeword.WAVE
        assert registry.spec_get(Codeword.JITTER).kind is AnimationKind.JITTER

    def test_unknown_keyword(self):
        """Unknown keywords are not found"""
        assert CodewordRegistry().lookup("color=red") is None

    def test_duplicate_keyword_rejected(self):
        """A keyword cannot be registered twice"""
        registry = CodewordRegistry()
        with pytest.raises(ValueError, match="already registered"):
            registry.register(CodewordSpec(
                keyword="wave",
                codeword=Codeword.WAVE,
                role=CodewordRole.START,
                kind=AnimationKind.WAVE,
            ))

    def test_end_spec_must_close_a_start(self):
        """An end codeword needs a registered start to close"""
        registry = CodewordRegistry()
        with pytest.raises(ValueError, match="must close"):
            registry.register(CodewordSpec(
                keyword="stop", codeword=Codeword.NONE, role=CodewordRole.END,
            ))
        with pytest.raises(ValueError, match="must close"):
            registry.register(CodewordSpec(
                keyword="stop",
                codeword=Codeword.NONE,
                role=CodewordRole.END,
                closes=Codeword.WAVE_END,
            ))

    def test_start_spec_needs_kind(self):
        """A start codeword must name the animation it opens"""
        with pytest.raises(ValueError, match="animation kind"):
            CodewordRegistry().register(CodewordSpec(
                keyword="go", codeword=Codeword.NONE, role=CodewordRole.START,
            ))

    def test_custom_registry_alias(self):
        """A host-registered alias is honoured end to end"""
        registry = CodewordRegistry()
        registry.register(CodewordSpec(
            keyword="shake",
            codeword=Codeword.JITTER,
            role=CodewordRole.START,
            kind=AnimationKind.JITTER,
        ))
        command, _ = command_decode("shake: 1, 2", registry=registry)
        assert command.codeword is Codeword.JITTER
        assert command_decode("shake")[0].codeword is Codeword.NATIVE

        result = markup_compile(
            "<shake>ok</jitter>", AnimatorSettings(verbosity=0), registry=registry
        )
        assert result.cleanText == "ok"
        assert [(r.kind, r.start_index, r.end_index) for r in result.timeline] == [
            (AnimationKind.JITTER, 0, 2)
        ]

    def test_end_closes_region_it_names(self):
        """An end codeword closes the region of the start it names"""
        registry = CodewordRegistry()
        registry.register(CodewordSpec(
            keyword="calm",
            codeword=Codeword.JITTER_END,
            role=CodewordRole.END,
            closes=Codeword.JITTER,
        ))
        result = markup_compile(
            "<jitter>a<wave>b<calm>c</wave>", AnimatorSettings(verbosity=0), registry=registry
        )
        assert result.errors == ()
        assert [(r.kind, r.start_index, r.end_index) for r in result.timeline] == [
            (AnimationKind.JITTER, 0, 2),
            (AnimationKind.WAVE, 1, 3),
        ]
