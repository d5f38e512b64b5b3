"""Data models for oci-gen.

Runtime config models are mutable Pydantic BaseModels; the Generator
edits them in place.
"""

from oci_gen.models.common import ErrorDetail
from oci_gen.models.seccomp import (
    LinuxSeccomp,
    SeccompAction,
    SeccompArch,
    SeccompArg,
    SeccompOperator,
    Syscall,
)
from oci_gen.models.spec import (
    CPU,
    OCI_VERSION,
    CgroupMountMode,
    DeviceCgroup,
    Hook,
    Hooks,
    IDMapping,
    InterfacePriority,
    Linux,
    Memory,
    Mount,
    Namespace,
    NamespaceType,
    Network,
    Pids,
    Platform,
    Process,
    Resources,
    Rlimit,
    Root,
    RootfsPropagation,
    SpecDocument,
    User,
    is_zero,
    prune_empty,
)

__all__ = [
    # Common
    "ErrorDetail",
    # Seccomp
    "LinuxSeccomp",
    "SeccompAction",
    "SeccompArch",
    "SeccompArg",
    "SeccompOperator",
    "Syscall",
    # Spec
    "CPU",
    "OCI_VERSION",
    "CgroupMountMode",
    "DeviceCgroup",
    "Hook",
    "Hooks",
    "IDMapping",
    "InterfacePriority",
    "Linux",
    "Memory",
    "Mount",
    "Namespace",
    "NamespaceType",
    "Network",
    "Pids",
    "Platform",
    "Process",
    "Resources",
    "Rlimit",
    "Root",
    "RootfsPropagation",
    "SpecDocument",
    "User",
    "is_zero",
    "prune_empty",
]
