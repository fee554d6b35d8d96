"""Flag completions shared by ``run`` and ``create``."""

from typing import Optional

from dockhand.client.directory import ContainerDirectory, NameDirectory, NetworkDirectory
from dockhand.client.engine import EngineClient
from dockhand.completion import strategies
from dockhand.completion.composite import IpcCompleter, LinkCompleter
from dockhand.completion.dynamic import DynamicSource
from dockhand.completion.registry import CompletionRegistry
from dockhand.completion.sources import ATTACH_STREAMS, CGROUPNS_MODES, PULL_POLICIES
from dockhand.config.models import CompletionConfig
from dockhand.utils.cache import StaticCache

# Flags that take free-form values; nothing useful to suggest.
NO_COMPLETE_FLAGS = (
    "add-host",
    "annotation",
    "blkio-weight",
    "blkio-weight-device",
    "cgroup-parent",
    "cpu-period",
    "cpu-quota",
    "cpu-rt-period",
    "cpu-rt-runtime",
    "cpu-shares",
    "cpus",
    "cpuset-cpus",
    "cpuset-mems",
    "device-cgroup-rule",
    "device-read-bps",
    "device-read-iops",
    "device-write-bps",
    "device-write-iops",
    "dns",
    "dns-option",
    "dns-search",
    "domainname",
    "entrypoint",
    "expose",
    "gpus",
    "group-add",
    "health-cmd",
    "health-interval",
    "health-retries",
    "health-start-interval",
    "health-start-period",
    "health-timeout",
    "hostname",
    "ip",
    "ip6",
    "isolation",
    "kernel-memory",
    "label",
    "link-local-ip",
    "log-driver",
    "log-opt",
    "mac-address",
    "memory",
    "memory-reservation",
    "memory-swap",
    "memory-swappiness",
    "mount",
    "name",
    "network-alias",
)


def add_container_completions(
    registry: CompletionRegistry,
    containers: NameDirectory,
    networks: NameDirectory,
    cache: StaticCache,
) -> CompletionRegistry:
    """Register every flag completion that ``run`` and ``create`` have in common"""
    container_source = DynamicSource(containers, label="containers")
    network_source = DynamicSource(networks, label="networks")

    registry.register_many(NO_COMPLETE_FLAGS, strategies.no_complete)

    registry.register("attach", strategies.from_list(*ATTACH_STREAMS))
    registry.register_many(("cap-add", "cap-drop"), strategies.capabilities(cache))
    registry.register("cgroupns", strategies.from_list(*CGROUPNS_MODES))
    registry.register("env", strategies.env_var_names)
    registry.register("env-file", strategies.file_names)
    registry.register("ipc", IpcCompleter(container_source))
    registry.register("link", LinkCompleter(container_source))
    registry.register("network", strategies.names_from(network_source))
    registry.register("platform", strategies.platforms)
    registry.register("pull", strategies.from_list(*PULL_POLICIES))
    registry.register("restart", strategies.restart_policies)
    registry.register("stop-signal", strategies.signals(cache))
    registry.register("volumes-from", strategies.names_from(container_source))
    return registry


def build_registry(
    client: EngineClient,
    cache: Optional[StaticCache] = None,
    config: Optional[CompletionConfig] = None,
) -> CompletionRegistry:
    """Registry for container commands, backed by client.

    The cache is passed in so callers decide how long computed lists live.
    """
    config = config or CompletionConfig()
    containers = ContainerDirectory(
        client, show_all=config.show_all_containers, show_ids=config.show_container_ids
    )
    networks = NetworkDirectory(client)
    return add_container_completions(
        CompletionRegistry(), containers, networks, cache or StaticCache()
    )
