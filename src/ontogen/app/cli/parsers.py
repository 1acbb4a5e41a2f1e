"""
CLI argument parser configuration.

This module defines the argument parser of the generator command line:

    ontogen [input] [-i INPUT] [-I FORM] -o OUTPUT [-O FORM] [-s] [-v]
            [-t TYPE_MAPPING] [-c NAME=VALUE ...] [--log-level LEVEL]
            [--log-file PATH] [--log-json]
"""

import argparse
import sys
from typing import Iterable, NoReturn, Optional

from ontogen import __version__
from ontogen.constants import ExitCode, FormCodes, LoggingConfig


class GeneratorArgumentParser(argparse.ArgumentParser):
    """Argument parser reporting usage errors with the usage exit code."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(ExitCode.USAGE_ERROR, f"{self.prog}: error: {message}\n")


# ============================================================================
# Flag Group Builders
# ============================================================================

def add_input_flags(parser: argparse.ArgumentParser) -> None:
    """Add input file and input form flags."""
    parser.add_argument(
        'input_path',
        nargs='?',
        metavar='input',
        help='Input file to process'
    )
    parser.add_argument(
        '--input', '-i',
        dest='input',
        help='Input file to process (alternative to the positional argument)'
    )
    parser.add_argument(
        '--input-form', '-I',
        dest='input_form',
        default=FormCodes.DEFAULT_INPUT_FORM,
        help=f'Input form code (default: {FormCodes.DEFAULT_INPUT_FORM})'
    )


def add_output_flags(parser: argparse.ArgumentParser) -> None:
    """Add output and output form flags."""
    parser.add_argument(
        '--output', '-o',
        help='Output directory, or output file with --single-file'
    )
    parser.add_argument(
        '--output-form', '-O',
        dest='output_form',
        default=FormCodes.DEFAULT_OUTPUT_FORM,
        help=f'Output form code (default: {FormCodes.DEFAULT_OUTPUT_FORM})'
    )
    parser.add_argument(
        '--single-file', '-s',
        dest='single_file',
        action='store_true',
        help='Place all generated code into a single file'
    )


def add_generator_flags(parser: argparse.ArgumentParser) -> None:
    """Add type mapping and free-form configuration flags."""
    parser.add_argument(
        '--type-mapping', '-t',
        dest='type_mapping',
        help='JSON file mapping primitive type names to target language types'
    )
    parser.add_argument(
        '--config', '-c',
        dest='configuration',
        action='append',
        default=[],
        metavar='NAME=VALUE',
        help='Additional configuration value, e.g. namespace=MyCompany.Model (repeatable)'
    )


def add_logging_flags(parser: argparse.ArgumentParser) -> None:
    """Add verbosity and logging flags."""
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show additional output'
    )
    parser.add_argument(
        '--log-level',
        dest='log_level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        type=str.upper,
        help=f'Log level (default: {LoggingConfig.DEFAULT_LOG_LEVEL}, '
             f'{LoggingConfig.VERBOSE_LOG_LEVEL} with --verbose)'
    )
    parser.add_argument(
        '--log-file',
        dest='log_file',
        help='Also write log records to this file'
    )
    parser.add_argument(
        '--log-json',
        dest='log_json',
        action='store_true',
        help='Emit structured JSON log records'
    )


# ============================================================================
# Parser Factory
# ============================================================================

def create_argument_parser(
    input_forms: Optional[Iterable[str]] = None,
    output_forms: Optional[Iterable[str]] = None,
) -> argparse.ArgumentParser:
    """
    Create the command line parser.

    Args:
        input_forms: Registered input form codes listed in the help epilog.
        output_forms: Registered output form codes listed in the help epilog.
    """
    epilog_lines = []
    if input_forms:
        epilog_lines.append(f"Input forms: {', '.join(input_forms)}")
    if output_forms:
        epilog_lines.append(f"Output forms: {', '.join(output_forms)}")

    parser = GeneratorArgumentParser(
        prog='ontogen',
        description='Generate object models and source code from OntoUML models',
        epilog='\n'.join(epilog_lines) or None,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    add_input_flags(parser)
    add_output_flags(parser)
    add_generator_flags(parser)
    add_logging_flags(parser)
    return parser
