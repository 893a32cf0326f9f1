"""Read, edit and write resolv.conf resolver configuration files."""

import logging

from resolvconf.core.conf import ResolvConf
from resolvconf.core.errors import (
    AlreadyPresentError,
    CapacityExceededError,
    DuplicateItemError,
    InvalidValueError,
    MalformedAddressError,
    MalformedNetmaskError,
    MalformedOptionValueError,
    MissingArgumentError,
    MultiError,
    NilItemError,
    NotFoundError,
    ParseError,
    ResolvConfError,
    UnknownKeywordError,
    UnknownOptionError,
)
from resolvconf.core.limits import (
    NAMESERVER_MAX_COUNT,
    OPTION_ATTEMPTS_MAX,
    OPTION_NDOTS_MAX,
    OPTION_TIMEOUT_MAX,
    SEARCH_DOMAIN_MAX_CHARS,
    SEARCH_DOMAIN_MAX_COUNT,
    SORTLIST_MAX_COUNT,
)
from resolvconf.core.models import (
    ConfigValidationError,
    ConfigValidationResult,
    ConfItem,
    Domain,
    Nameserver,
    Option,
    OptionType,
    SearchDomain,
    SortlistPair,
)
from resolvconf.core.resolv import ResolvConfGenerator, ResolvConfParser
from resolvconf.core.streams import read_conf, write_conf

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ResolvConf",
    "ResolvConfParser",
    "ResolvConfGenerator",
    "read_conf",
    "write_conf",
    # Items
    "ConfItem",
    "Domain",
    "Nameserver",
    "Option",
    "OptionType",
    "SearchDomain",
    "SortlistPair",
    "ConfigValidationError",
    "ConfigValidationResult",
    # Errors
    "ResolvConfError",
    "ParseError",
    "MalformedAddressError",
    "MalformedNetmaskError",
    "MalformedOptionValueError",
    "MissingArgumentError",
    "UnknownKeywordError",
    "UnknownOptionError",
    "CapacityExceededError",
    "DuplicateItemError",
    "AlreadyPresentError",
    "InvalidValueError",
    "NotFoundError",
    "NilItemError",
    "MultiError",
    # Limits
    "NAMESERVER_MAX_COUNT",
    "SEARCH_DOMAIN_MAX_COUNT",
    "SEARCH_DOMAIN_MAX_CHARS",
    "SORTLIST_MAX_COUNT",
    "OPTION_NDOTS_MAX",
    "OPTION_TIMEOUT_MAX",
    "OPTION_ATTEMPTS_MAX",
]
