"""
Formatter configuration management
"""

from dataclasses import dataclass

from simple_logger.core.exceptions import InvalidArgumentError


@dataclass
class FormatterConfig:
    """
    Normalization settings shared by all NormalizingFormatter subclasses.

    A limit of 0 disables that limit.
    """

    # Exception rendering
    include_stack_trace: bool = False
    include_stack_trace_in_context: bool = True
    base_path: str = ""

    # Size limits
    max_recursion_depth: int = 10
    max_string_length: int = 10000

    # Context handling
    remove_context_keys_once_mapped: bool = True
    skip_json_serializable: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.max_recursion_depth < 0:
            raise InvalidArgumentError("max_recursion_depth cannot be negative")
        if self.max_string_length < 0:
            raise InvalidArgumentError("max_string_length cannot be negative")

    @classmethod
    def default(cls) -> "FormatterConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "FormatterConfig":
        """Create configuration for debugging: full traces, no length limit."""
        return cls(
            include_stack_trace=True,
            include_stack_trace_in_context=True,
            max_string_length=0,
            skip_json_serializable=False,
        )

    @classmethod
    def production_config(cls) -> "FormatterConfig":
        """Create configuration for production: compact, bounded output."""
        return cls(
            include_stack_trace=False,
            include_stack_trace_in_context=False,
            max_recursion_depth=5,
            max_string_length=2000,
        )
