"""
SCASM Configuration
===================

Assembler settings with defaults defined here. Configuration can come from:
- Default values
- Environment variables (``AssemblerConfig.from_env``)
- Command-line flags, which override both

Environment Variables
---------------------
- ``SCASM_STRICT``: "1"/"true"/"yes" rejects non-numeric constants
- ``SCASM_OUTPUT_SUFFIX``: suffix for derived output files (default ".bin")
"""

from dataclasses import dataclass
import os


# Addressable memory of the target machine, in bytes
OUTPUT_CAPACITY = 256

DEFAULT_OUTPUT_SUFFIX = ".bin"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass
class AssemblerConfig:
    """
    Configuration for an assembly run.

    Attributes:
        strict_constants: Reject constant tokens that are not valid numeric
            literals instead of encoding them as zero (default: False)
        output_suffix: Suffix used when deriving the output filename
        capacity: Size of the output image in bytes
    """

    strict_constants: bool = False
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX
    capacity: int = OUTPUT_CAPACITY

    @classmethod
    def from_env(cls) -> "AssemblerConfig":
        """
        Create an AssemblerConfig from environment variables.

        Unset variables keep their defaults.
        """
        config = cls()

        if strict := os.environ.get("SCASM_STRICT"):
            config.strict_constants = strict.strip().lower() in _TRUE_VALUES

        if suffix := os.environ.get("SCASM_OUTPUT_SUFFIX"):
            suffix = suffix.strip()
            if not suffix.startswith("."):
                suffix = "." + suffix
            config.output_suffix = suffix

        return config
