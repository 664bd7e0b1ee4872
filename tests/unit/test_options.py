"""Unit tests for synthesis option records and wire key formatting."""

import pytest
from pydantic import ValidationError

from polly_ops.models.options import (
    WIRE_KEYS,
    SynthesisOptions,
    SynthesisTaskOptions,
    format_option,
)


class TestFormatOption:
    """Tests for format_option()."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("engine", "Engine"),
            ("language_code", "LanguageCode"),
            ("lexicon_names", "LexiconNames"),
            ("output_s3_key_prefix", "OutputS3KeyPrefix"),
            ("sample_rate", "SampleRate"),
            ("sns_topic_arn", "SnsTopicArn"),
            ("text_type", "TextType"),
        ],
    )
    def test_documented_names_use_table(self, name, expected):
        """Documented options map to their exact wire keys."""
        assert format_option(name) == expected
        assert WIRE_KEYS[name] == expected

    def test_unrecognized_name_is_pascal_cased(self):
        """Unknown options are forwarded rather than dropped."""
        assert format_option("speech_mark_types") == "SpeechMarkTypes"

    def test_single_word_name(self):
        assert format_option("foo") == "Foo"


class TestSynthesisOptions:
    """Tests for SynthesisOptions defaults and wire_params()."""

    def test_defaults(self):
        """Format and voice default to mp3 and Joanna."""
        options = SynthesisOptions()

        assert options.output_format == "mp3"
        assert options.voice_id == "Joanna"
        assert options.wire_params() == {}

    def test_required_options_never_in_wire_params(self):
        """output_format and voice_id are required keys, not optional ones."""
        options = SynthesisOptions(output_format="pcm", voice_id="Takumi")

        assert options.wire_params() == {}

    def test_supplied_options_are_mapped(self):
        options = SynthesisOptions(
            engine="neural",
            language_code="en-IN",
            lexicon_names=["tech", "names"],
            sample_rate="22050",
            text_type="ssml",
        )

        assert options.wire_params() == {
            "Engine": "neural",
            "LanguageCode": "en-IN",
            "LexiconNames": ["tech", "names"],
            "SampleRate": "22050",
            "TextType": "ssml",
        }

    def test_none_values_are_omitted(self):
        """Explicit None is treated as absent."""
        options = SynthesisOptions(engine=None, text_type="text")

        assert options.wire_params() == {"TextType": "text"}

    def test_integer_sample_rate_is_coerced(self):
        options = SynthesisOptions(sample_rate=16000)

        assert options.sample_rate == "16000"
        assert options.wire_params() == {"SampleRate": "16000"}

    def test_extra_options_are_forwarded(self):
        options = SynthesisOptions(speech_mark_types=["word"])

        assert options.wire_params() == {"SpeechMarkTypes": ["word"]}

    def test_wire_params_are_copies(self):
        """Changing returned values leaves the record untouched."""
        options = SynthesisOptions(speech_mark_types=["word"], lexicon_names=["tech"])

        params = options.wire_params()
        params["SpeechMarkTypes"].append("ssml")
        params["LexiconNames"].append("names")

        assert options.wire_params() == {"LexiconNames": ["tech"], "SpeechMarkTypes": ["word"]}

    def test_options_are_frozen(self):
        options = SynthesisOptions()

        with pytest.raises(ValidationError):
            options.voice_id = "Takumi"


class TestSynthesisTaskOptions:
    """Tests for SynthesisTaskOptions."""

    def test_task_only_options(self):
        options = SynthesisTaskOptions(
            output_s3_key_prefix="audio/",
            sns_topic_arn="arn:aws:sns:us-east-1:123456789012:polly",
        )

        assert options.wire_params() == {
            "OutputS3KeyPrefix": "audio/",
            "SnsTopicArn": "arn:aws:sns:us-east-1:123456789012:polly",
        }

    def test_inherits_synthesis_defaults(self):
        options = SynthesisTaskOptions()

        assert options.output_format == "mp3"
        assert options.voice_id == "Joanna"
