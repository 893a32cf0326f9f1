"""Core data models for resolv.conf configuration items."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, IPvAnyAddress, model_validator

from resolvconf.core.errors import MalformedOptionValueError, UnknownOptionError


class OptionType(str, Enum):
    """Resolver option types."""

    # Flag options
    DEBUG = "debug"
    ROTATE = "rotate"
    NO_CHECK_NAMES = "no-check-names"
    INET6 = "inet6"
    IP6_BYTESTRING = "ip6-bytestring"
    IP6_DOTINT = "ip6-dotint"
    NO_IP6_DOTINT = "no-ip6-dotint"
    EDNS0 = "edns0"
    SINGLE_REQUEST = "single-request"
    SINGLE_REQUEST_REOPEN = "single-request-reopen"
    NO_TLD_QUERY = "no-tld-query"
    USE_VC = "use-vc"

    # Valued options
    NDOTS = "ndots"
    TIMEOUT = "timeout"
    ATTEMPTS = "attempts"


FLAG_OPTIONS = frozenset(
    {
        "debug",
        "rotate",
        "no-check-names",
        "inet6",
        "ip6-bytestring",
        "ip6-dotint",
        "no-ip6-dotint",
        "edns0",
        "single-request",
        "single-request-reopen",
        "no-tld-query",
        "use-vc",
    }
)

VALUED_OPTIONS = frozenset({"ndots", "timeout", "attempts"})


def _unmap_ipv4(ip):
    """Collapse an IPv4-mapped IPv6 address (::ffff:a.b.c.d) to plain IPv4."""
    return getattr(ip, "ipv4_mapped", None) or ip


ResolverAddress = Annotated[IPvAnyAddress, AfterValidator(_unmap_ipv4)]


# ============================================================================
# Configuration Items
# ============================================================================


class ResolvItem(BaseModel):
    """Base for every item that can be stored in a resolv.conf."""

    model_config = ConfigDict(validate_assignment=True)

    def render(self) -> str:
        """Canonical textual form of the item."""
        raise NotImplementedError

    def matches(self, other: object) -> bool:
        """Identity check used for lookups and duplicate detection."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


class Nameserver(ResolvItem):
    """A nameserver entry."""

    kind: Literal["nameserver"] = "nameserver"
    ip: ResolverAddress = Field(..., description="Resolver IPv4 or IPv6 address")

    def render(self) -> str:
        return str(self.ip)

    def matches(self, other: object) -> bool:
        return isinstance(other, Nameserver) and self.ip == other.ip


class Domain(ResolvItem):
    """The local domain name."""

    kind: Literal["domain"] = "domain"
    name: str = ""

    def render(self) -> str:
        return self.name

    def matches(self, other: object) -> bool:
        return isinstance(other, Domain) and self.name == other.name


class SearchDomain(ResolvItem):
    """One entry of the search list."""

    kind: Literal["search_domain"] = "search_domain"
    name: str

    def render(self) -> str:
        return self.name

    def matches(self, other: object) -> bool:
        return isinstance(other, SearchDomain) and self.name == other.name


class SortlistPair(ResolvItem):
    """
    One entry of the sortlist.

    Renders as ``address/netmask`` when a netmask is set, else as the bare
    address. Identity is the address alone.
    """

    kind: Literal["sortlist_pair"] = "sortlist_pair"
    address: ResolverAddress
    netmask: ResolverAddress | None = None

    def render(self) -> str:
        if self.netmask is not None:
            return f"{self.address}/{self.netmask}"
        return str(self.address)

    def matches(self, other: object) -> bool:
        return isinstance(other, SortlistPair) and self.address == other.address


class Option(ResolvItem):
    """
    A resolver option.

    Flag options carry no value (``debug``); valued options carry a
    non-negative integer (``ndots:3``).
    """

    kind: Literal["option"] = "option"
    type: OptionType
    value: int | None = None

    @model_validator(mode="after")
    def _check_value(self) -> "Option":
        name = self.type_name
        if name in VALUED_OPTIONS:
            if self.value is None:
                raise ValueError(f"option {name} requires a value")
            if self.value < 0:
                raise ValueError(f"option {name} value must be non-negative, got {self.value}")
        elif self.value is not None:
            raise ValueError(f"option {name} does not take a value")
        return self

    @property
    def type_name(self) -> str:
        if isinstance(self.type, OptionType):
            return self.type.value
        return str(self.type)

    @property
    def is_flag(self) -> bool:
        return self.type_name in FLAG_OPTIONS

    def render(self) -> str:
        name = self.type_name
        if name in FLAG_OPTIONS:
            return name
        if name in VALUED_OPTIONS:
            return f"{name}:{self.value}"
        return ""

    def matches(self, other: object) -> bool:
        return isinstance(other, Option) and self.type_name == other.type_name

    @classmethod
    def parse(cls, token: str) -> "Option":
        """Parse an option token like 'rotate' or 'ndots:2'."""
        name, sep, raw_value = token.partition(":")

        if name in FLAG_OPTIONS:
            if sep:
                raise UnknownOptionError(f"Option {name} does not take a value: {token}")
            return cls(type=OptionType(name))

        if name in VALUED_OPTIONS:
            # ASCII decimal digits with an optional sign only
            digits = raw_value[1:] if raw_value[:1] in ("+", "-") else raw_value
            if not (digits.isascii() and digits.isdigit()):
                raise MalformedOptionValueError(
                    f"{name} unable to parse option value '{raw_value}'"
                )
            value = int(raw_value)
            if value < 0:
                raise MalformedOptionValueError(f"{name} option value must be non-negative: {value}")
            return cls(type=OptionType(name), value=value)

        raise UnknownOptionError(f"Unknown option {name}")


ConfItem = Annotated[
    Union[Nameserver, Domain, SearchDomain, SortlistPair, Option],
    Field(discriminator="kind"),
]


# ============================================================================
# Validation Models
# ============================================================================


class ConfigValidationError(BaseModel):
    """Configuration validation error."""

    line: int | None = None
    message: str
    error_type: str
    severity: str = "error"  # error, warning


class ConfigValidationResult(BaseModel):
    """Result of configuration validation."""

    valid: bool
    errors: list[ConfigValidationError] = Field(default_factory=list)
    warnings: list[ConfigValidationError] = Field(default_factory=list)
