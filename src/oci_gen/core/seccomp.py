"""Seccomp rule engine.

Functions in this module edit a LinuxSeccomp subtree in place. They own
every rule about action, architecture, operator and syscall tokens and
raise SeccompRuleError when a token is not understood.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from oci_gen.models.seccomp import (
    LinuxSeccomp,
    SeccompAction,
    SeccompArch,
    SeccompArg,
    SeccompOperator,
    Syscall,
)
from oci_gen.utils.errors import SeccompRuleError
from oci_gen.utils.logging import get_logger

logger = get_logger("seccomp")

_SYSCALL_NAME = re.compile(r"^[a-z_][a-z0-9_]*$")

_ACTIONS = {
    "kill": SeccompAction.KILL,
    "trap": SeccompAction.TRAP,
    "errno": SeccompAction.ERRNO,
    "trace": SeccompAction.TRACE,
    "allow": SeccompAction.ALLOW,
}

_ARCHES = {
    "x86": SeccompArch.X86,
    "amd64": SeccompArch.X86_64,
    "x32": SeccompArch.X32,
    "arm": SeccompArch.ARM,
    "arm64": SeccompArch.AARCH64,
    "mips": SeccompArch.MIPS,
    "mips64": SeccompArch.MIPS64,
    "mips64n32": SeccompArch.MIPS64N32,
    "mipsel": SeccompArch.MIPSEL,
    "mipsel64": SeccompArch.MIPSEL64,
    "mipsel64n32": SeccompArch.MIPSEL64N32,
    "ppc": SeccompArch.PPC,
    "ppc64": SeccompArch.PPC64,
    "ppc64le": SeccompArch.PPC64LE,
    "s390": SeccompArch.S390,
    "s390x": SeccompArch.S390X,
}

_OPERATORS = {
    "NE": SeccompOperator.NOT_EQUAL,
    "LT": SeccompOperator.LESS_THAN,
    "LE": SeccompOperator.LESS_EQUAL,
    "EQ": SeccompOperator.EQUAL_TO,
    "GE": SeccompOperator.GREATER_EQUAL,
    "GT": SeccompOperator.GREATER_THAN,
    "ME": SeccompOperator.MASKED_EQUAL,
}


class SyscallOpts(BaseModel):
    """A syscall rule as supplied on the command line.

    All fields are raw strings. ``syscall`` may name several syscalls
    separated by commas. The four argument fields must be given together
    or not at all.
    """

    model_config = {"frozen": True}

    action: str = Field(default="", description="allow, errno, kill, trace or trap")
    syscall: str = Field(default="", description="Comma separated syscall names")
    index: str = Field(default="", description="Argument index")
    value: str = Field(default="", description="Argument value")
    value_two: str = Field(default="", description="Second argument value")
    operator: str = Field(default="", description="NE, LT, LE, EQ, GE, GT or ME")

    def args_are_empty(self) -> bool:
        """Check whether no argument condition was supplied."""
        return not (self.index or self.value or self.value_two or self.operator)


def parse_action(action: str) -> SeccompAction:
    """Parse an action token such as "errno" or "SCMP_ACT_ERRNO"."""
    token = action.strip()
    if token in _ACTIONS:
        return _ACTIONS[token]
    try:
        return SeccompAction(token.upper())
    except ValueError:
        logger.warning(f"Rejected seccomp action {action!r}")
        raise SeccompRuleError(
            f"unrecognized action: {action!r}, must be one of {', '.join(_ACTIONS)}",
            field="action",
        ) from None


def parse_arch(arch: str) -> SeccompArch:
    """Parse an architecture token such as "amd64" or "SCMP_ARCH_X86_64"."""
    token = arch.strip()
    if token in _ARCHES:
        return _ARCHES[token]
    try:
        return SeccompArch(token.upper())
    except ValueError:
        raise SeccompRuleError(f"unrecognized architecture: {arch!r}", field="architecture") from None


def parse_operator(operator: str) -> SeccompOperator:
    """Parse a comparison operator token such as "EQ"."""
    token = operator.strip().upper()
    if token in _OPERATORS:
        return _OPERATORS[token]
    try:
        return SeccompOperator(token)
    except ValueError:
        raise SeccompRuleError(
            f"unrecognized operator: {operator!r}, must be one of {', '.join(_OPERATORS)}",
            field="operator",
        ) from None


def parse_syscall_names(syscalls: str) -> list[str]:
    """Split and validate a comma separated list of syscall names."""
    names = [name.strip() for name in syscalls.split(",") if name.strip()]
    if not names:
        raise SeccompRuleError("no syscall names given", field="syscall")
    for name in names:
        if not _SYSCALL_NAME.match(name):
            raise SeccompRuleError(f"invalid syscall name: {name!r}", field="syscall")
    return names


def _parse_uint(raw: str, field: str) -> int:
    try:
        value = int(raw.strip(), 0)
    except ValueError:
        raise SeccompRuleError(f"{field} must be an unsigned integer, got {raw!r}", field=field) from None
    if value < 0:
        raise SeccompRuleError(f"{field} must be an unsigned integer, got {raw!r}", field=field)
    return value


def _parse_arguments(opts: SyscallOpts) -> list[SeccompArg] | None:
    if opts.args_are_empty():
        return None
    if not (opts.index and opts.value and opts.value_two and opts.operator):
        raise SeccompRuleError(
            "syscall argument conditions need index, value, value two and operator",
            field="args",
        )
    return [
        SeccompArg(
            index=_parse_uint(opts.index, "index"),
            value=_parse_uint(opts.value, "value"),
            value_two=_parse_uint(opts.value_two, "value_two"),
            op=parse_operator(opts.operator),
        )
    ]


def _require(config: LinuxSeccomp | None) -> LinuxSeccomp:
    if config is None:
        raise SeccompRuleError("cannot edit a missing seccomp configuration")
    return config


def parse_syscall_flag(opts: SyscallOpts, config: LinuxSeccomp | None) -> None:
    """Add or update rules assigning an action to syscalls.

    A rule for a syscall with the same argument conditions is updated in
    place; otherwise a new rule is appended. A rule without conditions whose
    action equals the default action is redundant: existing rules for those
    syscalls are removed instead so the default applies.

    Args:
        opts: Raw rule options
        config: Seccomp subtree to edit

    Raises:
        SeccompRuleError: If the rule is incomplete or a token is invalid
    """
    config = _require(config)
    if not opts.action and not opts.syscall:
        return
    if not opts.action or not opts.syscall:
        raise SeccompRuleError("syscall rules need both an action and syscall names")

    action = parse_action(opts.action)
    names = parse_syscall_names(opts.syscall)
    args = _parse_arguments(opts)

    if args is None and action == config.default_action:
        _remove_named(config, names)
        logger.debug(f"Syscalls {names} already use the default action {action.value}")
        return

    if config.syscalls is None:
        config.syscalls = []
    for name in names:
        for rule in config.syscalls:
            if rule.name == name and rule.args == args:
                rule.action = action
                break
        else:
            config.syscalls.append(Syscall(name=name, action=action, args=args))


def parse_default_action(action: str, config: LinuxSeccomp | None) -> None:
    """Set the default action and drop rules made redundant by it."""
    config = _require(config)
    default = parse_action(action)
    config.default_action = default
    remove_all_matches(config, default)


def parse_default_action_force(action: str, config: LinuxSeccomp | None) -> None:
    """Set the default action without touching existing rules."""
    config = _require(config)
    config.default_action = parse_action(action)


def parse_architecture_flag(architectures: str, config: LinuxSeccomp | None) -> None:
    """Add comma separated architectures, skipping ones already present."""
    config = _require(config)
    parsed = [parse_arch(token) for token in architectures.split(",") if token.strip()]
    if config.architectures is None:
        config.architectures = []
    for arch in parsed:
        if arch not in config.architectures:
            config.architectures.append(arch)


def remove_all_matches(config: LinuxSeccomp, action: SeccompAction) -> None:
    """Remove every rule whose action is ``action``."""
    if config.syscalls is None:
        return
    config.syscalls = [rule for rule in config.syscalls if rule.action != action]


def _remove_named(config: LinuxSeccomp, names: list[str]) -> None:
    if config.syscalls is None:
        return
    config.syscalls = [rule for rule in config.syscalls if rule.name not in names]


def remove_action(syscalls: str, config: LinuxSeccomp | None) -> None:
    """Remove every rule for the comma separated syscall names."""
    config = _require(config)
    _remove_named(config, parse_syscall_names(syscalls))


def remove_all_seccomp_rules(config: LinuxSeccomp | None) -> None:
    """Remove all syscall rules, keeping default action and architectures."""
    config = _require(config)
    config.syscalls = []
