"""Parsing of enumerated runtime config tokens."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from oci_gen.models.spec import CgroupMountMode, NamespaceType, RootfsPropagation
from oci_gen.utils.errors import ValidationError
from oci_gen.utils.logging import get_logger

logger = get_logger("validation")

E = TypeVar("E", bound=Enum)


def _parse(enum_type: type[E], token: str | E, field: str, message: str) -> E:
    if isinstance(token, enum_type):
        return token
    try:
        return enum_type(token)
    except ValueError:
        logger.warning(f"Rejected {field} value {token!r}")
        raise ValidationError(f"{message}, got {token!r}", field=field) from None


def parse_namespace_type(kind: str | NamespaceType) -> NamespaceType:
    """Parse a namespace kind such as "pid" or "network".

    Raises:
        ValidationError: If the kind is not one of the seven namespace kinds
    """
    choices = "|".join(ns.value for ns in NamespaceType)
    return _parse(NamespaceType, kind, "namespace", f"namespace must be one of {choices}")


def parse_cgroup_mount_mode(mode: str | CgroupMountMode) -> CgroupMountMode:
    """Parse a cgroup mount mode (ro, rw or no).

    Raises:
        ValidationError: For any other token
    """
    return _parse(CgroupMountMode, mode, "mount-cgroups", "mount-cgroups should be one of (ro,rw,no)")


def parse_rootfs_propagation(mode: str | RootfsPropagation) -> RootfsPropagation:
    """Parse a rootfs propagation mode; the empty string means unset.

    Raises:
        ValidationError: For any other token
    """
    return _parse(
        RootfsPropagation,
        mode,
        "rootfs-propagation",
        "rootfs-propagation must be empty or one of private|rprivate|slave|rslave|shared|rshared",
    )
