"""Core library modules for resolv.conf handling."""

from resolvconf.core.conf import ResolvConf
from resolvconf.core.models import (
    ConfItem,
    Domain,
    Nameserver,
    Option,
    OptionType,
    SearchDomain,
    SortlistPair,
)

__all__ = [
    "ResolvConf",
    "ConfItem",
    "Domain",
    "Nameserver",
    "Option",
    "OptionType",
    "SearchDomain",
    "SortlistPair",
]
