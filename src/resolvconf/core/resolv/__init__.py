"""resolv.conf parser and generator modules."""

from resolvconf.core.resolv.config import ResolvConfGenerator, ResolvConfParser

__all__ = ["ResolvConfParser", "ResolvConfGenerator"]
