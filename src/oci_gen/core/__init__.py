"""Core domain logic for oci-gen.

This module provides the main library API for assembling runtime configs.
"""

from oci_gen.core.capabilities import (
    CapabilityRegistry,
    LinuxCapabilityRegistry,
    check_capability,
    normalize_capability,
    privileged_capabilities,
)
from oci_gen.core.generator import Generator
from oci_gen.core.seccomp import SyscallOpts
from oci_gen.core.validation import (
    parse_cgroup_mount_mode,
    parse_namespace_type,
    parse_rootfs_propagation,
)

__all__ = [
    "Generator",
    # Capabilities
    "CapabilityRegistry",
    "LinuxCapabilityRegistry",
    "check_capability",
    "normalize_capability",
    "privileged_capabilities",
    # Seccomp
    "SyscallOpts",
    # Validation
    "parse_cgroup_mount_mode",
    "parse_namespace_type",
    "parse_rootfs_propagation",
]
