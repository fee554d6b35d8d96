"""Static candidate lists.

Capability and signal lists come from the host, so they are computed
once per cache and reused; the short fixed lists are returned fresh.
"""

from typing import Callable, List

from dockhand.host import list_known_capabilities, list_known_signals
from dockhand.utils.cache import StaticCache

ALL_CAPABILITIES = "ALL"
CAPABILITY_PREFIX = "CAP_"

CAPABILITIES_KEY = "capabilities"
SIGNALS_KEY = "signals"

# User-facing spelling and order.
RESTART_POLICIES = ("disabled", "always", "on-failure", "unless-stopped")

ATTACH_STREAMS = ("stderr", "stdin", "stdout")
CGROUPNS_MODES = ("host", "private")
PULL_POLICIES = ("always", "missing", "never")

COMMON_PLATFORMS = (
    "linux",
    "linux/386",
    "linux/amd64",
    "linux/arm",
    "linux/arm/v5",
    "linux/arm/v6",
    "linux/arm/v7",
    "linux/arm64",
    "linux/arm64/v8",
    "linux/mips64le",
    "linux/ppc64le",
    "linux/riscv64",
    "linux/s390x",
    "windows",
    "windows/amd64",
    "windows/arm64",
)


def capability_names(
    cache: StaticCache, source: Callable[[], List[str]] = list_known_capabilities
) -> List[str]:
    """``ALL`` followed by ``CAP_<NAME>`` for every known capability"""

    def build() -> List[str]:
        caps = source()
        out = [ALL_CAPABILITIES]
        out.extend(CAPABILITY_PREFIX + c.upper() for c in caps)
        return out

    return cache.get_or_compute(CAPABILITIES_KEY, build)


def signal_names(
    cache: StaticCache, source: Callable[[], List[str]] = list_known_signals
) -> List[str]:
    return cache.get_or_compute(SIGNALS_KEY, lambda: list(source()))


def restart_policies() -> List[str]:
    return list(RESTART_POLICIES)
