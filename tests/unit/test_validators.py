"""Unit tests for nocaptcha.shared.validators."""

import pytest

from nocaptcha.errors import ConfigurationError, EmptyKeyError, InvalidKeyTypeError
from nocaptcha.shared.validators import check_key


class TestCheckKey:
    def test_returns_trimmed_value(self):
        assert check_key("site key", "  abc123 \n") == "abc123"

    def test_plain_value_unchanged(self):
        assert check_key("secret key", "s3cr3t") == "s3cr3t"

    @pytest.mark.parametrize(
        "value, type_name",
        [(None, "NoneType"), (123, "int"), (1.5, "float"), (["k"], "list"), (b"k", "bytes")],
        ids=["none", "int", "float", "list", "bytes"],
    )
    def test_non_string_raises_type_error(self, value, type_name):
        with pytest.raises(InvalidKeyTypeError) as exc_info:
            check_key("site key", value)
        assert isinstance(exc_info.value, TypeError)
        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.message == (
            f"The site key must be a string value, {type_name} given"
        )

    @pytest.mark.parametrize("value", ["", " ", "\t\n  "], ids=["empty", "space", "mixed"])
    def test_empty_after_trim_raises_value_error(self, value):
        with pytest.raises(EmptyKeyError) as exc_info:
            check_key("secret key", value)
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.message == "The secret key must not be empty"
        assert exc_info.value.field == "secret key"
