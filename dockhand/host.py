"""Enumerate capabilities and signals known on this host."""

import signal
from typing import List

# Linux capabilities in kernel bit order (CAP_CHOWN is bit 0).
KNOWN_CAPABILITIES = (
    "chown",
    "dac_override",
    "dac_read_search",
    "fowner",
    "fsetid",
    "kill",
    "setgid",
    "setuid",
    "setpcap",
    "linux_immutable",
    "net_bind_service",
    "net_broadcast",
    "net_admin",
    "net_raw",
    "ipc_lock",
    "ipc_owner",
    "sys_module",
    "sys_rawio",
    "sys_chroot",
    "sys_ptrace",
    "sys_pacct",
    "sys_admin",
    "sys_boot",
    "sys_nice",
    "sys_resource",
    "sys_time",
    "sys_tty_config",
    "mknod",
    "lease",
    "audit_write",
    "audit_control",
    "setfcap",
    "mac_override",
    "mac_admin",
    "syslog",
    "wake_alarm",
    "block_suspend",
    "audit_read",
    "perfmon",
    "bpf",
    "checkpoint_restore",
)


def list_known_capabilities() -> List[str]:
    """Return every capability name this release knows, lowercase, in bit order"""
    return list(KNOWN_CAPABILITIES)


def _realtime_signal_names() -> List[str]:
    rtmin = getattr(signal, "SIGRTMIN", None)
    rtmax = getattr(signal, "SIGRTMAX", None)
    if rtmin is None or rtmax is None:
        return []

    span = int(rtmax) - int(rtmin)
    low = span // 2
    names = ["RTMIN", "RTMAX"]
    names.extend(f"RTMIN+{i}" for i in range(1, low + 1))
    names.extend(f"RTMAX-{i}" for i in range(1, span - low))
    return names


def list_known_signals() -> List[str]:
    """Return signal names without the SIG prefix, aliases included.

    The set depends on the platform the interpreter was built for.
    """
    names = {
        name[3:]
        for name in signal.Signals.__members__
        if name.startswith("SIG") and not name.startswith("SIG_")
    }
    names.update(_realtime_signal_names())
    return sorted(names)
