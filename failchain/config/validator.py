# failchain/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading values.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import List, Literal
from dataclasses import dataclass
from .modules import (
    TraversalConfig,
    RenderConfig,
    OutOfMemoryConfig,
)


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for CLI/logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "traversal.follow_context"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(
    traversal: TraversalConfig,
    render: RenderConfig,
    oom: OutOfMemoryConfig,
) -> List[ConfigIssue]:
    """
    Validate configuration.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if not isinstance(traversal.follow_context, bool):
        issues.append(ConfigIssue(
            level="error",
            path="traversal.follow_context",
            message=f"follow_context must be a boolean, got {traversal.follow_context!r}",
            hint="Set traversal.follow_context to true or false",
        ))

    if not isinstance(render.include_suppressed, bool):
        issues.append(ConfigIssue(
            level="error",
            path="render.include_suppressed",
            message=f"include_suppressed must be a boolean, got {render.include_suppressed!r}",
        ))

    for name in ("metaspace_message", "direct_message", "heap_space_message"):
        value = getattr(oom, name)
        if value is None:
            continue
        if not isinstance(value, str):
            issues.append(ConfigIssue(
                level="error",
                path=f"oom.{name}",
                message=f"{name} must be a string or null, got {type(value).__name__}",
            ))
        elif not value.strip():
            # Legal, but it would wipe the original runtime diagnostic.
            issues.append(ConfigIssue(
                level="warn",
                path=f"oom.{name}",
                message=f"{name} is empty; matching errors would lose their message",
                hint=f"Set oom.{name} to null to leave these errors untouched",
            ))

    return issues


__all__ = [
    "ConfigIssue",
    "validate_config",
]
