"""
CLI commands.
"""

from .base import BaseCommand
from .generate import GenerateCommand, options_from_args

__all__ = ["BaseCommand", "GenerateCommand", "options_from_args"]
