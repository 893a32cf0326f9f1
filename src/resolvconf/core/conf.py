"""In-memory resolv.conf configuration model."""

import logging
from typing import Any, Callable, Iterator, TextIO, TypeVar

from resolvconf.core.diagnostics import stream_logger
from resolvconf.core.errors import (
    AlreadyPresentError,
    CapacityExceededError,
    DuplicateItemError,
    InvalidValueError,
    MultiError,
    NilItemError,
    NotFoundError,
    ParseError,
    ResolvConfError,
    UnknownOptionError,
)
from resolvconf.core.limits import (
    NAMESERVER_MAX_COUNT,
    OPTION_MAX,
    SEARCH_DOMAIN_MAX_CHARS,
    SEARCH_DOMAIN_MAX_COUNT,
    SORTLIST_MAX_COUNT,
)
from resolvconf.core.models import (
    VALUED_OPTIONS,
    Domain,
    Nameserver,
    Option,
    ResolvItem,
    SearchDomain,
    SortlistPair,
)

T = TypeVar("T", bound=ResolvItem)


class ResolvConf:
    """
    Ordered collection of resolv.conf items.

    Items are validated against the resolver limits when added. Every
    successful add or remove is visible immediately; failures in a batch are
    collected and raised together as a MultiError once the whole batch has
    been processed.

    Not safe for concurrent mutation; callers sharing an instance between
    threads must serialize access themselves.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._items: list[ResolvItem] = []
        self._logger = logger or logging.getLogger(__name__)

    def __repr__(self) -> str:
        return f"ResolvConf({[str(i) for i in self._items]!r})"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ResolvItem]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return isinstance(item, ResolvItem) and self.index_of(item) != -1

    @property
    def items(self) -> tuple[ResolvItem, ...]:
        """All stored items in insertion order."""
        return tuple(self._items)

    # ========================================================================
    # Logging
    # ========================================================================

    def enable_logging(self, stream: TextIO) -> None:
        """Write change records for this configuration to the given stream."""
        self._logger = stream_logger(f"{__name__}.instance.{id(self)}", stream)

    # ========================================================================
    # Add / Remove / Find
    # ========================================================================

    def add(self, *items: ResolvItem | None) -> None:
        """
        Add items to the configuration.

        Each item is checked against the limits for its kind. Items that fail
        are skipped, the rest are applied; all failures are raised together
        as a MultiError afterwards.
        """
        errors = MultiError()
        for item in items:
            if item is None:
                errors.append(NilItemError("Trying to add None item"))
                continue
            try:
                append = self._admit(item)
            except ResolvConfError as e:
                errors.append(e)
                continue
            if append:
                self._items.append(item)
                self._logger.info(f"Added {item.kind} {item}")

        if errors:
            raise errors

    def remove(self, *items: ResolvItem | None) -> None:
        """
        Remove items from the configuration.

        Removing any Domain clears the current domain regardless of its name.
        """
        errors = MultiError()
        for item in items:
            if item is None:
                errors.append(NilItemError("Trying to remove None item"))
                continue
            if isinstance(item, Domain):
                i = self._index_of_kind(Domain)
            else:
                i = self.index_of(item)
            if i == -1:
                errors.append(NotFoundError(f"{item.kind} {item} not found"))
                continue
            removed = self._items.pop(i)
            self._logger.info(f"Removed {removed.kind} {removed}")

        if errors:
            raise errors

    def find(self, item: T) -> T | None:
        """
        Find the stored item matching the given one.

        The stored instance itself is returned, so changes made to it are
        reflected in the configuration.
        """
        i = self.index_of(item)
        if i == -1:
            return None
        return self._items[i]  # type: ignore[return-value]

    def update(self, item: T, fn: Callable[[T], Any]) -> T:
        """Apply fn to the stored item matching the given one and return it."""
        stored = self.find(item)
        if stored is None:
            raise NotFoundError(f"{item.kind} {item} not found")
        fn(stored)
        self._logger.info(f"Updated {stored.kind} {stored}")
        return stored

    def index_of(self, item: ResolvItem) -> int:
        for i, stored in enumerate(self._items):
            if item.matches(stored):
                return i
        return -1

    def _index_of_kind(self, kind: type[ResolvItem]) -> int:
        for i, stored in enumerate(self._items):
            if isinstance(stored, kind):
                return i
        return -1

    def _of_kind(self, kind: type[T]) -> list[T]:
        return [item for item in self._items if isinstance(item, kind)]

    # ========================================================================
    # Admission Checks
    # ========================================================================

    def _admit(self, item: ResolvItem) -> bool:
        """
        Check an item against the limits for its kind.

        Returns True when the item should be appended, False when it was
        merged into an existing item. Raises when it must be rejected.
        """
        match item:
            case Nameserver():
                return self._admit_nameserver(item)
            case Domain():
                return self._admit_domain(item)
            case SearchDomain():
                return self._admit_search_domain(item)
            case SortlistPair():
                return self._admit_sortlist_pair(item)
            case Option():
                return self._admit_option(item)
            case _:
                raise TypeError(f"Unsupported item type: {type(item).__name__}")

    def _admit_nameserver(self, ns: Nameserver) -> bool:
        if len(self.get_nameservers()) >= NAMESERVER_MAX_COUNT:
            raise CapacityExceededError(
                f"Too many nameservers, {NAMESERVER_MAX_COUNT} is maximum"
            )
        if self.find(ns) is not None:
            raise DuplicateItemError(f"Nameserver {ns} already exists in conf")
        return True

    def _admit_domain(self, dom: Domain) -> bool:
        i = self._index_of_kind(Domain)
        if i == -1:
            return True
        self._items[i] = dom
        self._logger.info(f"Updated domain {dom}")
        return False

    def _admit_search_domain(self, sd: SearchDomain) -> bool:
        if self.find(sd) is not None:
            raise DuplicateItemError(f"Search domain {sd} already exists in conf")

        domains = self.get_search_domains()
        if len(domains) >= SEARCH_DOMAIN_MAX_COUNT:
            raise CapacityExceededError(
                f"Too many search domains, {SEARCH_DOMAIN_MAX_COUNT} is maximum"
            )

        char_count = sum(len(d.name) for d in domains)
        if char_count + len(sd.name) > SEARCH_DOMAIN_MAX_CHARS:
            raise CapacityExceededError(
                f"Too many characters in search domain list, "
                f"{SEARCH_DOMAIN_MAX_CHARS} is maximum"
            )
        return True

    def _admit_sortlist_pair(self, pair: SortlistPair) -> bool:
        existing = self.find(pair)
        if existing is not None:
            if existing.netmask == pair.netmask:
                raise DuplicateItemError(f"Sortlist pair {pair} already exists in conf")
            existing.netmask = pair.netmask
            self._logger.info(f"Updated sortlist_pair {existing}")
            return False

        if len(self.get_sort_items()) >= SORTLIST_MAX_COUNT:
            raise CapacityExceededError(f"Too long sortlist, {SORTLIST_MAX_COUNT} is maximum")
        return True

    def _admit_option(self, opt: Option) -> bool:
        name = opt.type_name
        if name in VALUED_OPTIONS and (opt.value is None or opt.value < 0):
            raise InvalidValueError(f"Bad value {opt.value} for option {name}")
        try:
            Option.parse(opt.render())
        except ParseError:
            raise UnknownOptionError(f"Unknown option {name}") from None

        maximum = OPTION_MAX.get(name)
        if maximum is not None and opt.value > maximum:
            self._logger.warning(
                f"[WARN] Option {name} is capped to {maximum}, set value is {opt.value}"
            )
            opt.value = maximum

        existing = self.find(opt)
        if existing is not None:
            if existing.is_flag:
                raise AlreadyPresentError(f"Option {opt} is already present")
            existing.value = opt.value
            self._logger.info(f"Updated option {existing}")
            return False
        return True

    # ========================================================================
    # Getters
    # ========================================================================

    def get_nameservers(self) -> list[Nameserver]:
        return self._of_kind(Nameserver)

    def get_domain(self) -> Domain:
        """Current domain, or an empty Domain when none is set."""
        domains = self._of_kind(Domain)
        return domains[0] if domains else Domain()

    def get_search_domains(self) -> list[SearchDomain]:
        return self._of_kind(SearchDomain)

    def get_sort_items(self) -> list[SortlistPair]:
        return self._of_kind(SortlistPair)

    def get_options(self) -> list[Option]:
        return self._of_kind(Option)

    # ========================================================================
    # Dict Conversion
    # ========================================================================

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view of the configuration, grouped by section."""
        domain = self.get_domain().name
        return {
            "domain": domain or None,
            "nameservers": [str(ns.ip) for ns in self.get_nameservers()],
            "sortlist": [
                {
                    "address": str(p.address),
                    "netmask": str(p.netmask) if p.netmask is not None else None,
                }
                for p in self.get_sort_items()
            ],
            "search": [sd.name for sd in self.get_search_domains()],
            "options": [{"type": o.type_name, "value": o.value} for o in self.get_options()],
        }

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any], logger: logging.Logger | None = None) -> "ResolvConf":
        """
        Build a configuration from the shape produced by to_dict.

        Raises a MultiError if any item is rejected by the limits; pydantic
        ValidationError if a value cannot be converted to an item.
        """
        conf = cls(logger=logger)
        items: list[ResolvItem] = []

        if config_dict.get("domain"):
            items.append(Domain(name=config_dict["domain"]))
        for ip in config_dict.get("nameservers", []):
            items.append(Nameserver(ip=ip))
        for pair in config_dict.get("sortlist", []):
            items.append(SortlistPair(address=pair["address"], netmask=pair.get("netmask")))
        for name in config_dict.get("search", []):
            items.append(SearchDomain(name=name))
        for opt in config_dict.get("options", []):
            items.append(Option(type=opt["type"], value=opt.get("value")))

        conf.add(*items)
        return conf
