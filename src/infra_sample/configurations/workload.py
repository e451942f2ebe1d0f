"""
WorkloadConfig - top level of the configuration file.
MIT License. See Project Root for the license information.
"""

from typing import Any, Dict, List, Optional

from infra_sample.configurations.stack import StackConfig


class WorkloadConfig:
    """
    Workload configuration.

    Accepts either the full configuration file ({"workload": {...}}) or the
    workload dictionary itself.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        config = config or {}
        self.__config = config
        self.__workload: Dict[str, Any] = config.get("workload", config)

    @property
    def dictionary(self) -> Dict[str, Any]:
        """The raw configuration dictionary as it was passed in"""
        return self.__config

    @property
    def name(self) -> str:
        """Workload name"""
        return self.__workload.get("name", "workload")

    @property
    def vpc_id(self) -> Optional[str]:
        """Default VPC id shared by every stack of the workload"""
        return self.__workload.get("vpc_id")

    @property
    def deployment(self) -> Dict[str, Any]:
        """Deployment section (account / region overrides)"""
        return self.__workload.get("deployment", {})

    @property
    def stacks(self) -> List[StackConfig]:
        """Stack configurations, in declaration order"""
        return [
            StackConfig(stack, workload=self.__workload)
            for stack in self.__workload.get("stacks", [])
        ]
