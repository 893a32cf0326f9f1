"""resolv.conf parser and generator."""

import ipaddress
import logging
from typing import Any, Iterator

from resolvconf.core.base import BaseConfigGenerator, BaseConfigParser
from resolvconf.core.conf import ResolvConf
from resolvconf.core.errors import (
    CapacityExceededError,
    MalformedAddressError,
    MalformedNetmaskError,
    MissingArgumentError,
    MultiError,
    ParseError,
    ResolvConfError,
    UnknownKeywordError,
)
from resolvconf.core.limits import OPTION_MAX, SORTLIST_MAX_COUNT
from resolvconf.core.models import (
    ConfigValidationError,
    ConfigValidationResult,
    ConfItem,
    Domain,
    Nameserver,
    Option,
    SearchDomain,
    SortlistPair,
)

logger = logging.getLogger(__name__)

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


class ResolvConfParser(BaseConfigParser):
    """
    Parser for resolv.conf files.

    Handles the keywords:
    - nameserver
    - domain
    - search
    - sortlist
    - options

    Lines are stripped before they are looked at; blank lines and lines
    starting with '#' or ';' are skipped.
    """

    COMMENT_CHARS = ("#", ";")

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger

    def parse(self, config_text: str) -> tuple[ResolvConf, MultiError | None]:
        """
        Parse resolv.conf text into a configuration.

        Reading continues past lines that fail to parse or whose items are
        rejected; every such error is returned in the MultiError, annotated
        with its line number.
        """
        conf = ResolvConf(logger=self.logger)
        errors = MultiError()

        for lineno, line in self._iter_lines(config_text):
            try:
                items = self.parse_line(line)
            except ResolvConfError as e:
                logger.debug(f"Line {lineno} rejected: {e.message}")
                e.line = lineno
                errors.append(e)
                continue

            try:
                conf.add(*items)
            except MultiError as e:
                for err in e:
                    err.line = lineno
                    errors.append(err)

        return conf, errors.error_or_none()

    def _iter_lines(self, config_text: str) -> Iterator[tuple[int, str]]:
        """Yield (line number, stripped line) for every non-comment line."""
        for lineno, raw in enumerate(config_text.splitlines(), 1):
            line = raw.strip()
            if not line or line.startswith(self.COMMENT_CHARS):
                continue
            yield lineno, line

    def parse_line(self, line: str) -> list[ConfItem]:
        """Parse a single non-comment line into items."""
        tokens = line.split()
        if not tokens:
            return []

        keyword, args = tokens[0], tokens[1:]
        match keyword:
            case "nameserver":
                if not args:
                    raise MalformedAddressError("Missing nameserver address")
                ip = self._parse_ip(args[0], MalformedAddressError, f"Malformed IP address: {args[0]}")
                return [Nameserver(ip=ip)]
            case "domain":
                if not args:
                    raise MissingArgumentError("Missing domain name")
                return [Domain(name=args[0])]
            case "search":
                return [SearchDomain(name=name) for name in args]
            case "sortlist":
                if len(args) > SORTLIST_MAX_COUNT:
                    raise CapacityExceededError(
                        f"Too long sortlist, {SORTLIST_MAX_COUNT} is maximum, got {len(args)}"
                    )
                return [self._parse_sortlist_pair(token) for token in args]
            case "options":
                return [Option.parse(token) for token in args]
            case _:
                raise UnknownKeywordError(f"Unknown keyword {keyword}")

    def _parse_sortlist_pair(self, token: str) -> SortlistPair:
        """Parse 'address' or 'address/netmask'."""
        addr_str, sep, mask_str = token.partition("/")
        address = self._parse_ip(
            addr_str, MalformedAddressError, f"Malformed IP address {token} in sortlist"
        )
        netmask = None
        if sep:
            netmask = self._parse_ip(
                mask_str, MalformedNetmaskError, f"Malformed netmask {token} in sortlist"
            )
        return SortlistPair(address=address, netmask=netmask)

    def _parse_ip(self, token: str, error: type[ParseError], message: str) -> IPAddress:
        try:
            return ipaddress.ip_address(token)
        except ValueError:
            raise error(message) from None

    def validate(self, config_text: str) -> ConfigValidationResult:
        """Validate resolv.conf syntax and limits."""
        _, parse_errors = self.parse(config_text)
        errors = [
            ConfigValidationError(
                line=e.line,
                message=e.message,
                error_type=type(e).__name__,
            )
            for e in (parse_errors or [])
        ]

        warnings: list[ConfigValidationError] = []
        domain_line: int | None = None

        for lineno, line in self._iter_lines(config_text):
            keyword, *args = line.split()

            if keyword == "domain" and args:
                if domain_line is not None:
                    warnings.append(
                        ConfigValidationError(
                            line=lineno,
                            message=f"Domain replaces the one set on line {domain_line}",
                            error_type="DomainOverride",
                            severity="warning",
                        )
                    )
                domain_line = lineno

            elif keyword == "options":
                for token in args:
                    try:
                        opt = Option.parse(token)
                    except ParseError:
                        continue
                    maximum = OPTION_MAX.get(opt.type_name)
                    if maximum is not None and opt.value > maximum:
                        warnings.append(
                            ConfigValidationError(
                                line=lineno,
                                message=f"Option {opt.type_name} is capped to {maximum}, set value is {opt.value}",
                                error_type="OptionCapped",
                                severity="warning",
                            )
                        )

        return ConfigValidationResult(
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
        )

    def to_dict(self, config_text: str) -> dict[str, Any]:
        """Convert resolv.conf text to dictionary representation."""
        conf, _ = self.parse(config_text)
        return conf.to_dict()


class ResolvConfGenerator(BaseConfigGenerator):
    """Generator for resolv.conf files."""

    def generate(self, config: ResolvConf | dict[str, Any]) -> str:
        """
        Generate resolv.conf text.

        Sections are written in a fixed order: domain, nameservers, sortlist,
        search, options. Empty sections are left out.
        """
        if isinstance(config, dict):
            config = ResolvConf.from_dict(config)

        lines: list[str] = []

        # Domain
        domain = config.get_domain().name
        if domain:
            lines.append(f"domain {domain}")

        # Nameservers
        nameservers = config.get_nameservers()
        for ns in nameservers:
            lines.append(f"nameserver {ns}")
        if nameservers:
            lines.append("")

        # Sortlist
        sort_items = config.get_sort_items()
        if sort_items:
            lines.append("sortlist " + " ".join(str(p) for p in sort_items))
            lines.append("")

        # Search
        search = config.get_search_domains()
        if search:
            lines.append("search " + " ".join(sd.name for sd in search))
            lines.append("")

        # Options
        options = config.get_options()
        if options:
            lines.append("options " + " ".join(str(o) for o in options))
            lines.append("")

        if not lines:
            return ""
        return "\n".join(lines) + "\n"
