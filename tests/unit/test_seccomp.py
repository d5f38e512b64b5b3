"""Unit tests for the seccomp rule engine."""

import pytest

from oci_gen.core.seccomp import (
    SyscallOpts,
    parse_action,
    parse_arch,
    parse_architecture_flag,
    parse_default_action,
    parse_default_action_force,
    parse_operator,
    parse_syscall_flag,
    parse_syscall_names,
    remove_action,
    remove_all_seccomp_rules,
)
from oci_gen.knowledge.seccomp_profile import BLOCKED_SYSCALLS, get_default_profile
from oci_gen.models.seccomp import (
    LinuxSeccomp,
    SeccompAction,
    SeccompArch,
    SeccompOperator,
    Syscall,
)
from oci_gen.utils.errors import SeccompRuleError, ValidationError


@pytest.fixture
def profile() -> LinuxSeccomp:
    """Default-allow profile with a few errno rules."""
    return LinuxSeccomp(
        default_action=SeccompAction.ALLOW,
        syscalls=[
            Syscall(name="ptrace", action=SeccompAction.ERRNO),
            Syscall(name="mount", action=SeccompAction.ERRNO),
            Syscall(name="reboot", action=SeccompAction.KILL),
        ],
    )


class TestTokenParsing:
    """Tests for action, arch and operator tokens."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("kill", SeccompAction.KILL),
            ("trap", SeccompAction.TRAP),
            ("errno", SeccompAction.ERRNO),
            ("trace", SeccompAction.TRACE),
            ("allow", SeccompAction.ALLOW),
            ("SCMP_ACT_ERRNO", SeccompAction.ERRNO),
        ],
    )
    def test_actions(self, token, expected):
        """Test action tokens."""
        assert parse_action(token) == expected

    def test_unknown_action(self):
        """Test unknown actions are rejected."""
        with pytest.raises(SeccompRuleError) as exc_info:
            parse_action("explode")
        assert exc_info.value.code == "SECCOMP_ERROR"
        assert isinstance(exc_info.value, ValidationError)

    def test_arches(self):
        """Test Go-style and SCMP architecture tokens."""
        assert parse_arch("amd64") == SeccompArch.X86_64
        assert parse_arch("arm64") == SeccompArch.AARCH64
        assert parse_arch("SCMP_ARCH_S390X") == SeccompArch.S390X
        with pytest.raises(SeccompRuleError):
            parse_arch("z80")

    def test_operators(self):
        """Test operator tokens."""
        assert parse_operator("EQ") == SeccompOperator.EQUAL_TO
        assert parse_operator("me") == SeccompOperator.MASKED_EQUAL
        with pytest.raises(SeccompRuleError):
            parse_operator("XOR")

    def test_syscall_names(self):
        """Test comma separated syscall names."""
        assert parse_syscall_names("open, openat,") == ["open", "openat"]
        with pytest.raises(SeccompRuleError):
            parse_syscall_names("open;rm -rf")
        with pytest.raises(SeccompRuleError):
            parse_syscall_names(" , ")


class TestSyscallRules:
    """Tests for parse_syscall_flag."""

    def test_add_rule(self, profile):
        """Test a new rule is appended."""
        parse_syscall_flag(SyscallOpts(action="errno", syscall="keyctl,add_key"), profile)
        names = [rule.name for rule in profile.syscalls]
        assert names[-2:] == ["keyctl", "add_key"]
        assert profile.syscalls[-1].action == SeccompAction.ERRNO

    def test_update_rule(self, profile):
        """Test the action of an existing rule is updated in place."""
        parse_syscall_flag(SyscallOpts(action="kill", syscall="ptrace"), profile)
        assert len(profile.syscalls) == 3
        assert profile.syscalls[0].action == SeccompAction.KILL

    def test_rule_matching_default_removes_existing(self, profile):
        """Test allowing a syscall under default allow drops its rule."""
        parse_syscall_flag(SyscallOpts(action="allow", syscall="mount"), profile)
        assert [rule.name for rule in profile.syscalls] == ["ptrace", "reboot"]

    def test_rule_with_arguments(self, profile):
        """Test argument conditions make a separate rule."""
        opts = SyscallOpts(
            action="errno",
            syscall="personality",
            index="0",
            value="0xffffffff",
            value_two="0",
            operator="NE",
        )
        parse_syscall_flag(opts, profile)
        rule = profile.syscalls[-1]
        assert rule.name == "personality"
        assert rule.args[0].index == 0
        assert rule.args[0].value == 0xFFFFFFFF
        assert rule.args[0].op == SeccompOperator.NOT_EQUAL

    def test_partial_arguments(self, profile):
        """Test argument fields must be given together."""
        with pytest.raises(SeccompRuleError):
            parse_syscall_flag(SyscallOpts(action="errno", syscall="personality", index="0"), profile)

    def test_empty_opts_is_noop(self, profile):
        """Test options without action or syscall change nothing."""
        before = profile.model_copy(deep=True)
        parse_syscall_flag(SyscallOpts(), profile)
        assert profile == before

    def test_missing_action(self, profile):
        """Test a syscall without an action is rejected."""
        with pytest.raises(SeccompRuleError):
            parse_syscall_flag(SyscallOpts(syscall="ptrace"), profile)

    def test_missing_config(self):
        """Test editing a missing configuration is rejected."""
        with pytest.raises(SeccompRuleError):
            parse_syscall_flag(SyscallOpts(action="errno", syscall="ptrace"), None)


class TestDefaultAction:
    """Tests for default action and architecture handling."""

    def test_default_removes_matching_rules(self, profile):
        """Test rules equal to the new default are dropped."""
        parse_default_action("errno", profile)
        assert profile.default_action == SeccompAction.ERRNO
        assert [rule.name for rule in profile.syscalls] == ["reboot"]

    def test_default_force_keeps_rules(self, profile):
        """Test the forced variant keeps every rule."""
        parse_default_action_force("errno", profile)
        assert profile.default_action == SeccompAction.ERRNO
        assert len(profile.syscalls) == 3

    def test_architectures_deduplicated(self, profile):
        """Test architectures are appended once."""
        parse_architecture_flag("amd64,x86", profile)
        parse_architecture_flag("x86,x32", profile)
        assert profile.architectures == [SeccompArch.X86_64, SeccompArch.X86, SeccompArch.X32]


class TestRemoval:
    """Tests for removing rules."""

    def test_remove_named(self, profile):
        """Test rules for named syscalls are removed."""
        remove_action("ptrace,reboot", profile)
        assert [rule.name for rule in profile.syscalls] == ["mount"]

    def test_remove_all(self, profile):
        """Test all rules are removed but the default stays."""
        remove_all_seccomp_rules(profile)
        assert profile.syscalls == []
        assert profile.default_action == SeccompAction.ALLOW


class TestDefaultProfile:
    """Tests for the built-in profile."""

    def test_amd64_profile(self):
        """Test the amd64 profile lists the x86 family."""
        profile = get_default_profile("amd64")
        assert profile.default_action == SeccompAction.ALLOW
        assert profile.architectures[0] == SeccompArch.X86_64
        assert [rule.name for rule in profile.syscalls] == BLOCKED_SYSCALLS

    def test_unknown_arch_profile(self):
        """Test unknown architectures get no architecture list."""
        assert get_default_profile("riscv64").architectures is None
