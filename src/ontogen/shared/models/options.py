"""
Generator options.

The options bag passed to front ends, language mappers and renderers.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional
import logging

from ontogen.constants import FormCodes

logger = logging.getLogger(__name__)


@dataclass
class GeneratorOptions:
    """
    Application options.

    Attributes:
        input: The input file to process.
        output: Output directory, or output file when ``single_file`` is set.
        input_form: Input form code.
        output_form: Output form code.
        single_file: Place all generated code into a single file.
        type_mapping: Path to the primitive type mapping file.
        verbose: Show additional output.
        configuration: Additional free-form configuration values.
    """
    input: Optional[str] = None
    output: Optional[str] = None
    input_form: str = FormCodes.DEFAULT_INPUT_FORM
    output_form: str = FormCodes.DEFAULT_OUTPUT_FORM
    single_file: bool = False
    type_mapping: Optional[str] = None
    verbose: bool = False
    configuration: Dict[str, str] = field(default_factory=dict)

    def get_config(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return a configuration value."""
        return self.configuration.get(key, default)


def parse_config_pairs(pairs: Optional[Iterable[str]]) -> Dict[str, str]:
    """
    Parse ``name=value`` configuration entries.

    Entries without a name or a value are skipped with a warning. Later
    entries override earlier ones.
    """
    result: Dict[str, str] = {}
    for pair in pairs or []:
        key, _, value = pair.partition("=")
        key = key.strip()
        if not key or not value:
            logger.warning(f"Ignoring malformed configuration entry: {pair!r}")
            continue
        result[key] = value
    return result
