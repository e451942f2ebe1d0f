"""
ECS Service Configuration

Defines the task definition, container and service settings of a container service stack.
"""

from typing import Any, Dict, List, Optional

from infra_sample.configurations.base_config import BaseConfig


class HealthCheckConfig(BaseConfig):
    """Container-level health check. Timings are in seconds."""

    def __init__(self, config: Dict[str, Any], container_port: Optional[int] = None) -> None:
        super().__init__(config)
        self._container_port = container_port

    @property
    def command(self) -> List[str]:
        default_command = ["CMD-SHELL", f"curl -f http://localhost:{self._container_port} || exit 1"]
        return self.get("command", default_command)

    @property
    def interval(self) -> int:
        return self.get("interval", 30)

    @property
    def timeout(self) -> int:
        return self.get("timeout", 5)

    @property
    def retries(self) -> int:
        return self.get("retries", 2)

    @property
    def start_period(self) -> int:
        return self.get("start_period", 60)


class ContainerConfig(BaseConfig):
    """
    Configuration of the single container of the task definition.

    Port mappings are a list of {"container_port", "host_port", "protocol"}.
    """

    @property
    def name(self) -> Optional[str]:
        """Container name"""
        return self.get("name")

    @property
    def construct_name(self) -> str:
        """Name expanded into the container's construct id"""
        return self.get("construct_name", f"{self.name}Container")

    @property
    def repository_name(self) -> Optional[str]:
        """Existing ECR repository the image is pulled from"""
        return self.get("repository_name")

    @property
    def image_tag(self) -> str:
        return self.get("image_tag", "latest")

    @property
    def cpu(self) -> int:
        """CPU units reserved for the container"""
        return self.get("cpu", 256)

    @property
    def memory_reservation_mib(self) -> int:
        """Soft memory limit in MiB"""
        return self.get("memory_reservation_mib", 256)

    @property
    def port_mappings(self) -> List[Dict[str, Any]]:
        return self.get("port_mappings", [])

    @property
    def container_port(self) -> Optional[int]:
        """The first mapped container port"""
        if not self.port_mappings:
            return None
        return self.port_mappings[0].get("container_port")

    @property
    def log_group_name(self) -> Optional[str]:
        """Existing CloudWatch log group; defaults to the container name"""
        return self.get("log_group_name", self.name)

    @property
    def stream_prefix(self) -> Optional[str]:
        return self.get("stream_prefix", self.name)

    @property
    def health_check(self) -> HealthCheckConfig:
        return HealthCheckConfig(self.get_section("health_check"), container_port=self.container_port)


class TaskDefinitionConfig(BaseConfig):
    """EC2 task definition configuration"""

    @property
    def family(self) -> Optional[str]:
        return self.get("family")

    @property
    def construct_id(self) -> Optional[str]:
        """Construct id of the task definition, used as-is"""
        return self.get("construct_id", self.family)


class EcsServiceConfig(BaseConfig):
    """
    Configuration for an EC2-backed ECS service.
    """

    @property
    def name(self) -> str:
        """Name expanded into the service's physical name"""
        return self.get("name", "service")

    @property
    def construct_name(self) -> Optional[str]:
        """Name expanded into the service's construct id; defaults to the container name"""
        return self.get("construct_name", self.container.name)

    @property
    def desired_count(self) -> int:
        return self.get("desired_count", 1)

    @property
    def min_healthy_percent(self) -> int:
        return self.get("min_healthy_percent", 0)

    @property
    def max_healthy_percent(self) -> int:
        return self.get("max_healthy_percent", 100)

    @property
    def output_name(self) -> str:
        """Id of the CfnOutput holding the service name"""
        return self.get("output_name", "Service Name")

    @property
    def task_definition(self) -> TaskDefinitionConfig:
        return TaskDefinitionConfig(self.get_section("task_definition"))

    @property
    def container(self) -> ContainerConfig:
        return ContainerConfig(self.get_section("container"))
