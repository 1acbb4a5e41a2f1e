"""
Command line interface of the OntoUML code generator.

Usage:
    from ontogen.app.cli import create_argument_parser, GenerateCommand

    parser = create_argument_parser()
    args = parser.parse_args(["model.refontouml", "-o", "out"])
    exit_code = GenerateCommand().execute(args)
"""

from .commands import BaseCommand, GenerateCommand, options_from_args
from .helpers import JSONFormatter, setup_logging
from .parsers import create_argument_parser

__all__ = [
    "BaseCommand",
    "GenerateCommand",
    "options_from_args",
    "JSONFormatter",
    "setup_logging",
    "create_argument_parser",
]
