from .base import Base
from flatini import IniDocument, KeyValuePair, Parameters
import pytest


class TestParameters:

    def test_defaults(self):
        parameters = Parameters()
        assert parameters.comment_prefixes == (";", "#")
        assert parameters.option_delimiter == "="
        assert parameters.write_comment_prefix == ";"

    def test_single_comment_prefix(self):
        assert Parameters(comment_prefixes="#").comment_prefixes == ("#",)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"comment_prefixes": "["},
            {"comment_prefixes": ("#", "]")},
            {"comment_prefixes": "//"},
            {"comment_prefixes": ()},
            {"option_delimiter": " "},
            {"option_delimiter": ""},
            {"option_delimiter": ";"},
            {"comment_prefixes": "=", "option_delimiter": "="},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            Parameters(**kwargs)

    def test_update(self):
        parameters = Parameters()
        parameters.update(option_delimiter=":", comment_prefixes="#")
        assert parameters.option_delimiter == ":"
        assert parameters.comment_prefixes == ("#",)
        with pytest.raises(ValueError):
            parameters.update(option_delimiter="#")

    @pytest.mark.parametrize(
        "write_parameters",
        [
            Parameters(),
            Parameters(comment_prefixes="#"),
            Parameters(comment_prefixes=("!", ";"), option_delimiter=":"),
        ],
    )
    def test_read_with_parameters(self, write_parameters):
        base = Base(write_parameters)
        base.add_comment()
        base.add_pair(padding=" ")
        base.add_section()
        base.add_comment()
        base.add_pair()
        base.verify(base.read(write_parameters))

    def test_read_with_kwargs(self):
        doc = IniDocument.from_string(
            "! note\nkey: value", comment_prefixes="!", option_delimiter=":"
        )
        assert doc.get_pair("key") == KeyValuePair("key", "value")
        assert doc.to_string("lines") == "! note\nkey : value\n"

    def test_other_delimiter_is_plain_text(self):
        doc = IniDocument.from_string("key: a=b", option_delimiter=":")
        assert doc.get("key") == "a=b"
