from .policy import TreePolicy

__all__ = ["TreePolicy"]
