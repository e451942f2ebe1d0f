"""
Stack Library

Importing this package registers every stack module with the StackModuleRegistry.
"""

from .container_service import ContainerServiceStack

__all__ = ["ContainerServiceStack"]
