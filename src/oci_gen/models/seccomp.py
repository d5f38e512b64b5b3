"""Seccomp (syscall filter) data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SeccompAction(str, Enum):
    """Action taken when a syscall matches a rule."""

    KILL = "SCMP_ACT_KILL"
    TRAP = "SCMP_ACT_TRAP"
    ERRNO = "SCMP_ACT_ERRNO"
    TRACE = "SCMP_ACT_TRACE"
    ALLOW = "SCMP_ACT_ALLOW"


class SeccompArch(str, Enum):
    """Architectures a seccomp filter can be restricted to."""

    X86 = "SCMP_ARCH_X86"
    X86_64 = "SCMP_ARCH_X86_64"
    X32 = "SCMP_ARCH_X32"
    ARM = "SCMP_ARCH_ARM"
    AARCH64 = "SCMP_ARCH_AARCH64"
    MIPS = "SCMP_ARCH_MIPS"
    MIPS64 = "SCMP_ARCH_MIPS64"
    MIPS64N32 = "SCMP_ARCH_MIPS64N32"
    MIPSEL = "SCMP_ARCH_MIPSEL"
    MIPSEL64 = "SCMP_ARCH_MIPSEL64"
    MIPSEL64N32 = "SCMP_ARCH_MIPSEL64N32"
    PPC = "SCMP_ARCH_PPC"
    PPC64 = "SCMP_ARCH_PPC64"
    PPC64LE = "SCMP_ARCH_PPC64LE"
    S390 = "SCMP_ARCH_S390"
    S390X = "SCMP_ARCH_S390X"


class SeccompOperator(str, Enum):
    """Comparison applied to a syscall argument."""

    NOT_EQUAL = "SCMP_CMP_NE"
    LESS_THAN = "SCMP_CMP_LT"
    LESS_EQUAL = "SCMP_CMP_LE"
    EQUAL_TO = "SCMP_CMP_EQ"
    GREATER_EQUAL = "SCMP_CMP_GE"
    GREATER_THAN = "SCMP_CMP_GT"
    MASKED_EQUAL = "SCMP_CMP_MASKED_EQ"


class SeccompArg(BaseModel):
    """Condition on a single syscall argument."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    index: int = Field(ge=0, description="Argument position")
    value: int = Field(ge=0, description="Value compared against")
    value_two: int = Field(default=0, ge=0, alias="valueTwo", description="Second value (masked compare)")
    op: SeccompOperator = Field(description="Comparison operator")


class Syscall(BaseModel):
    """Rule assigning an action to one syscall."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    name: str = Field(description="Syscall name")
    action: SeccompAction = Field(description="Action for matching calls")
    args: list[SeccompArg] | None = Field(default=None, description="Argument conditions")


class LinuxSeccomp(BaseModel):
    """Syscall filter subtree of a runtime config."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    default_action: SeccompAction | None = Field(
        default=None,
        alias="defaultAction",
        description="Action for syscalls no rule matches",
    )
    architectures: list[SeccompArch] | None = Field(default=None, description="Allowed architectures")
    syscalls: list[Syscall] | None = Field(default=None, description="Per-syscall rules")
