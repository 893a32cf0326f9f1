"""Tests for stream-level read/write helpers."""

import io

import pytest

from resolvconf import (
    Domain,
    MultiError,
    Nameserver,
    Option,
    OptionType,
    ResolvConf,
    SearchDomain,
    SortlistPair,
    read_conf,
    write_conf,
)


class FailingReader:
    def read(self) -> str:
        raise OSError("device not ready")


class TestReadConf:
    """Tests for read_conf."""

    def test_read_from_stream(self):
        conf, errors = read_conf(io.StringIO("nameserver 8.8.8.8\noptions debug"))
        assert errors is None
        assert [str(ns) for ns in conf.get_nameservers()] == ["8.8.8.8"]
        assert [str(o) for o in conf.get_options()] == ["debug"]

    def test_read_from_string(self):
        conf, errors = read_conf("# comment\n\nsearch a.com b.com")
        assert errors is None
        assert [sd.name for sd in conf.get_search_domains()] == ["a.com", "b.com"]

    def test_bad_nameserver(self):
        conf, errors = read_conf(io.StringIO("nameserver bad-ip"))
        assert isinstance(errors, MultiError)
        assert conf.get_nameservers() == []

    def test_non_decimal_option_values_rejected(self):
        conf, errors = read_conf("options ndots:1_0 timeout:\u0663")
        assert isinstance(errors, MultiError)
        assert errors.errors[0].line == 1
        assert conf.get_options() == []

    def test_ipv4_mapped_nameserver_round_trip(self):
        conf, errors = read_conf("nameserver ::ffff:8.8.8.8\nnameserver 8.8.8.8\n")
        assert len(errors) == 1
        out = io.StringIO()
        write_conf(conf, out)
        assert out.getvalue() == "nameserver 8.8.8.8\n\n"

    def test_read_failure_is_fatal(self):
        with pytest.raises(OSError):
            read_conf(FailingReader())


class TestWriteConf:
    """Tests for write_conf."""

    def test_write(self):
        conf, _ = read_conf("nameserver 8.8.8.8\noptions debug")
        out = io.StringIO()
        write_conf(conf, out)
        assert out.getvalue() == "nameserver 8.8.8.8\n\noptions debug\n\n"

    def test_write_empty(self):
        out = io.StringIO()
        write_conf(ResolvConf(), out)
        assert out.getvalue() == ""

    def test_round_trip(self):
        conf = ResolvConf()
        conf.add(
            Domain(name="example.com"),
            Nameserver(ip="8.8.8.8"),
            Nameserver(ip="::1"),
            SortlistPair(address="130.155.160.0", netmask="255.255.240.0"),
            SortlistPair(address="130.155.0.0"),
            SearchDomain(name="example.com"),
            SearchDomain(name="example.org"),
            Option(type=OptionType.NDOTS, value=4),
            Option(type=OptionType.SINGLE_REQUEST),
        )

        out = io.StringIO()
        write_conf(conf, out)
        out.seek(0)
        reread, errors = read_conf(out)

        assert errors is None
        assert reread.get_domain() == conf.get_domain()
        assert reread.get_nameservers() == conf.get_nameservers()
        assert reread.get_sort_items() == conf.get_sort_items()
        assert reread.get_search_domains() == conf.get_search_domains()
        assert reread.get_options() == conf.get_options()
