"""
StackConfig - configuration for a single stack of the workload.
MIT License. See Project Root for the license information.
"""

from typing import Any, Dict, Optional


class StackConfig:
    """
    Stack configuration.

    Holds the stack's own dictionary (with one section per resource) and a
    reference to the workload dictionary it belongs to.
    """

    def __init__(self, stack: Dict[str, Any], workload: Optional[Dict[str, Any]] = None) -> None:
        self.__stack = stack or {}
        self.__workload = workload or {}

    @property
    def dictionary(self) -> Dict[str, Any]:
        """The raw stack dictionary"""
        return self.__stack

    @property
    def workload(self) -> Dict[str, Any]:
        """The workload dictionary this stack belongs to"""
        return self.__workload

    @property
    def name(self) -> str:
        """Stack name, also used as the construct id of the stack"""
        name = self.__stack.get("name")
        if not name:
            raise ValueError("Stack name is required")
        return name

    @property
    def module(self) -> str:
        """Registered stack module used to build this stack"""
        return self.__stack.get("module", "container_service_stack")

    @property
    def enabled(self) -> bool:
        """Whether the stack is synthesized"""
        return str(self.__stack.get("enabled", True)).lower() == "true"

    @property
    def description(self) -> Optional[str]:
        return self.__stack.get("description")

    def section(self, key: str) -> Dict[str, Any]:
        """Get a resource section (e.g. "ecs_cluster") of the stack dictionary"""
        return self.__stack.get(key) or {}
