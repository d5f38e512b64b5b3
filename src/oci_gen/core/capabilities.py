"""Capability registry and capability name validation."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from oci_gen.knowledge.capabilities import (
    CAP_BLOCK_SUSPEND,
    CAP_LAST_CAP_PATH,
    get_capability_table,
)
from oci_gen.utils.errors import HostUnsupportedCapabilityError, ValidationError
from oci_gen.utils.logging import get_logger_with_context

logger = get_logger_with_context("capabilities")


@runtime_checkable
class CapabilityRegistry(Protocol):
    """Protocol for sources of capability information.

    A registry enumerates the capabilities it knows about and reports the
    highest capability number the host kernel supports.

    Example:
        class FixedRegistry:
            def list(self) -> list[str]:
                return ["CAP_CHOWN", "CAP_KILL"]

            def index_of(self, name: str) -> int | None:
                return {"CAP_CHOWN": 0, "CAP_KILL": 5}.get(name)

            def last_supported_index(self) -> int:
                return 5
    """

    def list(self) -> list[str]:
        """Known capabilities as "CAP_X" names, in number order."""
        ...

    def index_of(self, name: str) -> int | None:
        """Kernel number of a "CAP_X" name, or None if unknown."""
        ...

    def last_supported_index(self) -> int:
        """Highest capability number supported by the host."""
        ...


class LinuxCapabilityRegistry:
    """Capability registry backed by the built-in table and /proc.

    Example:
        registry = LinuxCapabilityRegistry()
        registry.index_of("CAP_SYS_ADMIN")  # 21
        registry.last_supported_index()     # e.g. 40
    """

    def __init__(self, cap_last_cap_path: str | Path = CAP_LAST_CAP_PATH) -> None:
        self._table = get_capability_table()
        self._cap_last_cap_path = Path(cap_last_cap_path)
        self._last_supported: int | None = None

    def list(self) -> list[str]:
        return list(self._table)

    def index_of(self, name: str) -> int | None:
        return self._table.get(name)

    def last_supported_index(self) -> int:
        """Read the host's last capability, falling back to CAP_BLOCK_SUSPEND."""
        if self._last_supported is None:
            try:
                self._last_supported = int(self._cap_last_cap_path.read_text().strip())
            except (OSError, ValueError) as e:
                logger.debug(f"Cannot read {self._cap_last_cap_path} ({e}), assuming CAP_BLOCK_SUSPEND is last")
                self._last_supported = CAP_BLOCK_SUSPEND
        return self._last_supported


def normalize_capability(token: str) -> str:
    """Upper-case a capability token and add the CAP_ prefix if missing.

    Args:
        token: Capability such as "chown", "CHOWN" or "cap_chown"

    Returns:
        Canonical "CAP_CHOWN" form
    """
    name = token.strip().upper()
    if not name.startswith("CAP_"):
        name = f"CAP_{name}"
    return name


def check_capability(token: str, registry: CapabilityRegistry, host_specific: bool = False) -> str:
    """Validate a capability token against a registry.

    Args:
        token: Capability token in any case, with or without CAP_ prefix
        registry: Registry the token must be known to
        host_specific: Also require the host kernel to support it

    Returns:
        Canonical capability name

    Raises:
        ValidationError: If the capability is unknown
        HostUnsupportedCapabilityError: If the host does not support it
    """
    name = normalize_capability(token)
    log = logger.bind(capability=name)
    index = registry.index_of(name)
    if index is None:
        log.warning(f"Rejected unknown capability {token!r}")
        raise ValidationError(f"Invalid value passed for adding capability: {token}", field="capability")

    if host_specific:
        last = registry.last_supported_index()
        if index > last:
            log.bind(last_supported=last).warning("Capability not supported by the host")
            raise HostUnsupportedCapabilityError(name, last_supported=last)

    return name


def privileged_capabilities(registry: CapabilityRegistry, host_specific: bool = False) -> list[str]:
    """Every capability a privileged container receives.

    Args:
        registry: Registry listing the capabilities
        host_specific: Leave out capabilities the host does not support

    Returns:
        Capability names in registry order
    """
    names = registry.list()
    if not host_specific:
        return names

    last = registry.last_supported_index()
    return [name for name in names if (registry.index_of(name) or 0) <= last]


_default_registry: LinuxCapabilityRegistry | None = None


def get_default_registry() -> LinuxCapabilityRegistry:
    """Get the shared LinuxCapabilityRegistry instance."""
    global _default_registry
    if _default_registry is None:
        _default_registry = LinuxCapabilityRegistry()
    return _default_registry
