"""Fixed resolver limits for resolv.conf items."""

SEARCH_DOMAIN_MAX_COUNT = 6  # Maximum number of search domains
SEARCH_DOMAIN_MAX_CHARS = 256  # Maximum total characters in the search list
NAMESERVER_MAX_COUNT = 3  # Maximum number of nameservers
SORTLIST_MAX_COUNT = 10  # Maximum number of sortlist pairs

# Valued options are silently capped to these
OPTION_NDOTS_MAX = 15
OPTION_TIMEOUT_MAX = 30
OPTION_ATTEMPTS_MAX = 5

OPTION_MAX = {
    "ndots": OPTION_NDOTS_MAX,
    "timeout": OPTION_TIMEOUT_MAX,
    "attempts": OPTION_ATTEMPTS_MAX,
}
