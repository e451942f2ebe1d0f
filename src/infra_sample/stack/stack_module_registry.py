"""
Stack module registry.
MIT License. See Project Root for the license information.
"""

from typing import Callable, Dict, Type

from aws_lambda_powertools import Logger

logger = Logger(__name__)


class StackModuleRegistry:
    """Registry of stack classes, keyed by the module name used in configuration"""

    _modules: Dict[str, Type] = {}

    @classmethod
    def register(cls, name: str, stack_class: Type) -> None:
        if name in cls._modules and cls._modules[name] is not stack_class:
            logger.warning(f"Stack module '{name}' is being re-registered by {stack_class.__name__}")
        cls._modules[name] = stack_class

    @classmethod
    def get(cls, name: str) -> Type:
        """
        Look up a stack class.

        Raises:
            ValueError: If no stack is registered under the name
        """
        if name not in cls._modules:
            available = ", ".join(sorted(cls._modules)) or "none"
            raise ValueError(f"Unknown stack module '{name}'. Registered modules: {available}")
        return cls._modules[name]

    @classmethod
    def names(cls):
        return sorted(cls._modules)


def register_stack(name: str) -> Callable[[Type], Type]:
    """Class decorator registering a stack class under a module name"""

    def decorator(stack_class: Type) -> Type:
        StackModuleRegistry.register(name, stack_class)
        return stack_class

    return decorator
