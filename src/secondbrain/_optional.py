# src/secondbrain/_optional.py
"""Helpers for optional dependency handling."""

from typing import Any


def _create_missing_dependency_class(class_name: str, package: str) -> type:
    """Create a placeholder class that raises ImportError on instantiation.

    The placeholder can still be imported and used in type hints; the
    error only surfaces when someone builds one without the extra installed.

    Args:
        class_name: Name of the class being created
        package: Name of the optional extra (used in error message)

    Returns:
        A class that raises ImportError on __init__
    """

    class MissingDependencyClass:
        def __init__(self, *args: Any, **kwargs: Any) -> None:
            raise ImportError(
                f"{class_name} requires the '{package}' package. "
                f"Install it with: pip install secondbrain-rag[{package}]"
            )

    MissingDependencyClass.__name__ = class_name
    MissingDependencyClass.__qualname__ = class_name
    MissingDependencyClass.__module__ = "secondbrain"

    return MissingDependencyClass
