"""Pytest configuration and fixtures."""

import pytest

from resolvconf.core.conf import ResolvConf
from resolvconf.core.resolv.config import ResolvConfGenerator, ResolvConfParser


@pytest.fixture
def conf() -> ResolvConf:
    """Empty configuration fixture."""
    return ResolvConf()


@pytest.fixture
def parser() -> ResolvConfParser:
    return ResolvConfParser()


@pytest.fixture
def generator() -> ResolvConfGenerator:
    return ResolvConfGenerator()


@pytest.fixture
def sample_resolv_conf() -> str:
    """Sample resolv.conf content."""
    return """# Generated by NetworkManager
domain example.com
nameserver 8.8.8.8
nameserver 2001:4860:4860::8888
; secondary resolvers follow
nameserver 1.1.1.1

sortlist 130.155.160.0/255.255.240.0 130.155.0.0
search example.com corp.example.com
options ndots:2 timeout:3 rotate edns0
"""
