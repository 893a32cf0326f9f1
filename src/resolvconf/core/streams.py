"""Stream helpers for reading and writing resolv.conf files."""

import logging
from typing import TextIO

from resolvconf.core.conf import ResolvConf
from resolvconf.core.errors import MultiError
from resolvconf.core.resolv.config import ResolvConfGenerator, ResolvConfParser


def read_conf(
    source: TextIO | str,
    logger: logging.Logger | None = None,
) -> tuple[ResolvConf, MultiError | None]:
    """
    Read a configuration from a text stream or string.

    The stream is read in full with a single read() call; a failing read
    propagates immediately. Parse and limit errors are collected and
    returned alongside the (possibly partial) configuration.
    """
    text = source if isinstance(source, str) else source.read()
    return ResolvConfParser(logger=logger).parse(text)


def write_conf(conf: ResolvConf, sink: TextIO) -> None:
    """Write the configuration to a text stream."""
    sink.write(ResolvConfGenerator().generate(conf))
