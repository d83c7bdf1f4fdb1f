"""
Command decoder tests

Covers keyword resolution, positional parameters and parameter errors.
"""

import pytest

from textmotion.lib.decoder import command_decode, number_parse
from textmotion.models.errors import ErrorKind
from textmotion.models.tokens import AnimationParams, Codeword


class TestKeywordResolution:
    """Test resolving keywords to codewords"""

    def test_custom_keyword(self):
        """Custom keyword resolves to its codeword"""
        command, errors = command_decode("wave")
        assert command.codeword is Codeword.WAVE
        assert command.params.is_unset()
        assert errors == []

    def test_keyword_is_trimmed(self):
        """Whitespace around the keyword is ignored"""
        command, _ = command_decode("  jitter ")
        assert command.codeword is Codeword.JITTER

    def test_end_keywords_and_aliases(self):
        """Closing keywords and their -end aliases resolve to end codewords"""
        assert command_decode("/wave")[0].codeword is Codeword.WAVE_END
        assert command_decode("wave-end")[0].codeword is Codeword.WAVE_END
        assert command_decode("/jitter")[0].codeword is Codeword.JITTER_END
        assert command_decode("jitter-end")[0].codeword is Codeword.JITTER_END

    def test_matching_is_case_sensitive(self):
        """Differently cased keyword is a native tag"""
        command, errors = command_decode("Wave")
        assert command.codeword is Codeword.NATIVE
        assert errors == []

    def test_native_tag(self):
        """Unknown keyword is native with every parameter unset"""
        command, errors = command_decode("size=200%")
        assert command.codeword is Codeword.NATIVE
        assert command.params.is_unset()
        assert errors == []

    def test_native_tag_with_colon_is_opaque(self):
        """Native tags containing ':' are not parsed for parameters"""
        command, errors = command_decode('link="https://example.com"')
        assert command.codeword is Codeword.NATIVE
        assert errors == []

    def test_empty_command(self):
        """Empty command decodes as native"""
        command, errors = command_decode("")
        assert command.codeword is Codeword.NATIVE
        assert errors == []


class TestParameters:
    """Test positional parameter parsing"""

    def test_all_six_parameters(self):
        """Six parameters fill every field in order"""
        command, errors = command_decode("wave : 5, 0, -5, 1, 0, .01")
        assert errors == []
        assert command.codeword is Codeword.WAVE
        assert command.params == AnimationParams(
            curr_amplitude=5.0,
            curr_frequency_x=0.0,
            curr_frequency_y=-5.0,
            prev_amplitude=1.0,
            prev_frequency_x=0.0,
            prev_frequency_y=0.01,
        )

    def test_partial_parameters(self):
        """Missing trailing fields stay unset, zero stays zero"""
        command, errors = command_decode("jitter: 0, 3")
        assert errors == []
        assert command.params.curr_amplitude == 0.0
        assert command.params.curr_frequency_x == 3.0
        assert command.params.curr_frequency_y is None
        assert command.params.prev_frequency_y is None

    def test_exponent_and_signed_fraction(self):
        """Exponents and signed bare fractions are accepted"""
        command, errors = command_decode("wave: 1e2, -.5")
        assert errors == []
        assert command.params.curr_amplitude == 100.0
        assert command.params.curr_frequency_x == -0.5

    def test_decoding_is_idempotent(self):
        """Decoding the same text twice gives equal commands"""
        first, _ = command_decode("jitter : 1, 3, 2, 1, 0, 0")
        second, _ = command_decode("jitter : 1, 3, 2, 1, 0, 0")
        assert first == second


class TestParameterErrors:
    """Test decode errors and their recovery"""

    def test_single_field_is_malformed(self):
        """Amplitude alone is reported and leaves every field unset"""
        command, errors = command_decode("wave: 5")
        assert [e.kind for e in errors] == [ErrorKind.MALFORMED_PARAMETER]
        assert errors[0].offset == 7
        assert command.codeword is Codeword.WAVE
        assert command.params.is_unset()

    def test_empty_block_is_malformed(self):
        """A separator with nothing after it is reported"""
        command, errors = command_decode("wave:")
        assert [e.kind for e in errors] == [ErrorKind.MALFORMED_PARAMETER]
        assert errors[0].offset == 1
        assert command.params.is_unset()

    def test_empty_block_points_at_keyword(self):
        """The keyword is located in the source, past leading blanks"""
        _, errors = command_decode(" wave :", offset=10)
        assert errors[0].offset == 12

    def test_bad_field_left_unset(self):
        """A non-numeric field is reported, the others still parse"""
        command, errors = command_decode("jitter: 1, x, 3")
        assert [e.kind for e in errors] == [ErrorKind.MALFORMED_PARAMETER]
        assert errors[0].offset == 12
        assert command.params.curr_amplitude == 1.0
        assert command.params.curr_frequency_x is None
        assert command.params.curr_frequency_y == 3.0

    def test_too_many_parameters(self):
        """Seven fields are reported and the seventh dropped"""
        command, errors = command_decode("wave: 1,2,3,4,5,6,7")
        assert [e.kind for e in errors] == [ErrorKind.TOO_MANY_PARAMETERS]
        assert errors[0].offset == 19
        assert command.params == AnimationParams(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)

    def test_error_offset_uses_directive_position(self):
        """Offsets are shifted by the directive's source position"""
        _, errors = command_decode("jitter: 1, x, 3", offset=10)
        assert errors[0].offset == 22

    @pytest.mark.parametrize("text", ["nan", "inf", "1_000", "", "1.2.3", "0x10"])
    def test_rejected_numbers(self, text):
        """Only plain finite decimals parse"""
        assert number_parse(text) is None
