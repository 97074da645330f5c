"""
Core data structures for template rendering.

Delimiters are immutable values handed to the renderer explicitly, so two
messages can use different markers without touching shared state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..utils.exceptions import DelimiterError

DEFAULT_LEFT = "{"
DEFAULT_RIGHT = "}"

# Markers the engine keeps for its own block and comment syntax.
RESERVED_LEFT = ("{%", "{#")
RESERVED_RIGHT = ("%}", "#}")


@dataclass(frozen=True)
class Delimiters:
    """Opening and closing markers around a substitution expression."""
    left: str = DEFAULT_LEFT
    right: str = DEFAULT_RIGHT

    def __post_init__(self):
        """Validate the delimiter pair."""
        if not isinstance(self.left, str) or not isinstance(self.right, str):
            raise DelimiterError("Delimiters must be strings", str(self.left), str(self.right))
        if not self.left or not self.right:
            raise DelimiterError("Delimiters cannot be empty", self.left, self.right)
        if self.left == self.right:
            raise DelimiterError("Opening and closing delimiters must differ", self.left, self.right)
        if self.left in RESERVED_LEFT or self.right in RESERVED_RIGHT:
            raise DelimiterError(
                "Delimiters collide with the engine's block or comment markers",
                self.left,
                self.right,
            )

    @classmethod
    def default(cls) -> Delimiters:
        return cls(DEFAULT_LEFT, DEFAULT_RIGHT)

    def wrap(self, expression: str) -> str:
        """Surround an expression with these delimiters."""
        return f"{self.left}{expression}{self.right}"


@dataclass(frozen=True)
class ValidationResult:
    """Result of checking template text against the engine's grammar."""
    is_valid: bool
    errors: Tuple[str, ...]
    metadata: Dict[str, Any]
