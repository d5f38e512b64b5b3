"""Runtime config knowledge base.

Contains the capability table, the default seccomp profile and the
values a fresh runtime config is populated with.
"""

from oci_gen.knowledge.capabilities import get_capability_table
from oci_gen.knowledge.defaults import get_default_mounts, get_default_rlimits, get_host_platform
from oci_gen.knowledge.seccomp_profile import get_default_profile

__all__ = [
    "get_capability_table",
    "get_default_mounts",
    "get_default_rlimits",
    "get_host_platform",
    "get_default_profile",
]
