"""Abstract base classes defining configuration parser/generator interfaces."""

from abc import ABC, abstractmethod
from typing import Any

from resolvconf.core.conf import ResolvConf
from resolvconf.core.errors import MultiError
from resolvconf.core.models import ConfigValidationResult


class BaseConfigParser(ABC):
    """Abstract base class for configuration parsers."""

    @abstractmethod
    def parse(self, config_text: str) -> tuple[ResolvConf, MultiError | None]:
        """Parse configuration text into a configuration and collected errors."""
        ...

    @abstractmethod
    def validate(self, config_text: str) -> ConfigValidationResult:
        """Validate configuration syntax and limits."""
        ...

    @abstractmethod
    def to_dict(self, config_text: str) -> dict[str, Any]:
        """Convert configuration to dictionary representation."""
        ...


class BaseConfigGenerator(ABC):
    """Abstract base class for configuration generators."""

    @abstractmethod
    def generate(self, config: ResolvConf | dict[str, Any]) -> str:
        """Generate configuration text from a configuration or its dict form."""
        ...
