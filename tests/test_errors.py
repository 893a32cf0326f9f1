"""Tests for error types."""

from resolvconf.core.errors import (
    CapacityExceededError,
    DuplicateItemError,
    MalformedAddressError,
    MultiError,
    ParseError,
    ResolvConfError,
)


class TestResolvConfError:
    """Tests for single errors."""

    def test_message_without_line(self):
        assert str(DuplicateItemError("Nameserver 8.8.8.8 already exists")) == (
            "Nameserver 8.8.8.8 already exists"
        )

    def test_message_with_line(self):
        err = MalformedAddressError("Malformed IP address: x", line=3)
        assert str(err) == "line 3: Malformed IP address: x"

    def test_hierarchy(self):
        assert issubclass(MalformedAddressError, ParseError)
        assert issubclass(CapacityExceededError, ResolvConfError)
        assert not issubclass(CapacityExceededError, ParseError)


class TestMultiError:
    """Tests for aggregated errors."""

    def test_empty(self):
        errors = MultiError()
        assert len(errors) == 0
        assert errors.error_or_none() is None

    def test_single(self):
        errors = MultiError([DuplicateItemError("dup")])
        assert str(errors) == "1 error occurred:\n\t* dup"

    def test_several(self):
        errors = MultiError()
        errors.append(DuplicateItemError("dup"))
        errors.append(CapacityExceededError("full", line=7))

        assert str(errors) == "2 errors occurred:\n\t* dup\n\t* line 7: full"
        assert errors.error_or_none() is errors
        assert [type(e) for e in errors] == [DuplicateItemError, CapacityExceededError]

    def test_append_flattens(self):
        inner = MultiError([DuplicateItemError("a"), DuplicateItemError("b")])
        outer = MultiError()
        outer.append(inner)
        assert len(outer) == 2

    def test_of_type(self):
        errors = MultiError([DuplicateItemError("a"), CapacityExceededError("b")])
        assert [e.message for e in errors.of_type(CapacityExceededError)] == ["b"]
        assert errors.of_type(ParseError) == []
