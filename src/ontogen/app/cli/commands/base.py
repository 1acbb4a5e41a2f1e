"""
Base command class.

This module contains the base command class that all CLI commands inherit
from.
"""

import argparse
import logging
from abc import ABC, abstractmethod
from typing import Optional

from ontogen.constants import LoggingConfig

from ..helpers import setup_logging

logger = logging.getLogger(__name__)


class BaseCommand(ABC):
    """
    Base class for CLI commands.

    Provides logging setup from the common logging flags. Subclasses
    implement the execute() method.
    """

    def setup_logging_from_args(self, args: argparse.Namespace) -> Optional[str]:
        """Configure logging from ``--log-level``, ``--log-file``, ``--log-json`` and ``--verbose``."""
        level = getattr(args, 'log_level', None)
        if not level:
            level = LoggingConfig.VERBOSE_LOG_LEVEL if getattr(args, 'verbose', False) \
                else LoggingConfig.DEFAULT_LOG_LEVEL
        return setup_logging(
            level=level,
            log_file=getattr(args, 'log_file', None),
            structured=getattr(args, 'log_json', False),
        )

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code (0 for success, non-zero for error).
        """
        pass
