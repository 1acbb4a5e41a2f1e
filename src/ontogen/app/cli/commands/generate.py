"""
Generate command.

Reads the input model, transforms it and writes the selected output form.
"""

import argparse
import logging
from typing import Optional

from ontogen.constants import ExitCode
from ontogen.core.exceptions import ModelParseError, OntoGenError
from ontogen.core.pipeline import GenerationPipeline, UnknownFormError
from ontogen.shared.models.options import GeneratorOptions, parse_config_pairs

from ..helpers import print_footer, print_header
from .base import BaseCommand

logger = logging.getLogger(__name__)


def options_from_args(args: argparse.Namespace) -> GeneratorOptions:
    """Build generator options from parsed command-line arguments."""
    return GeneratorOptions(
        input=args.input or args.input_path,
        output=args.output,
        input_form=args.input_form,
        output_form=args.output_form,
        single_file=args.single_file,
        type_mapping=args.type_mapping,
        verbose=args.verbose,
        configuration=parse_config_pairs(args.configuration),
    )


class GenerateCommand(BaseCommand):
    """Run the generator for one input model."""

    def __init__(self, pipeline: Optional[GenerationPipeline] = None):
        self._pipeline = pipeline

    def get_pipeline(self) -> GenerationPipeline:
        """Get or create the generation pipeline."""
        if self._pipeline is None:
            self._pipeline = GenerationPipeline()
        return self._pipeline

    def execute(self, args: argparse.Namespace) -> int:
        self.setup_logging_from_args(args)
        options = options_from_args(args)

        if not options.input:
            logger.error("No input file specified")
            return ExitCode.USAGE_ERROR
        if not options.output:
            logger.error("No output specified (use --output)")
            return ExitCode.USAGE_ERROR

        pipeline = self.get_pipeline()
        try:
            pipeline.resolve_forms(options)
        except UnknownFormError as e:
            logger.error(str(e))
            return ExitCode.USAGE_ERROR

        try:
            result = pipeline.run(options)
        except FileNotFoundError as e:
            logger.error(f"File not found: {e}")
            return ExitCode.PROCESSING_ERROR
        except ModelParseError as e:
            location = f" ({e.file_path})" if e.file_path else ""
            logger.error(f"Invalid input{location}: {e}")
            if e.details:
                logger.debug(e.details)
            return ExitCode.PROCESSING_ERROR
        except OntoGenError as e:
            logger.error(f"Generation failed: {e}")
            return ExitCode.PROCESSING_ERROR
        except OSError as e:
            logger.error(f"Could not write output: {e}")
            return ExitCode.PROCESSING_ERROR

        if options.verbose:
            print_header("Generation complete")
            print(result.stats.get_summary())
            for operation in result.operations:
                print(f"  {operation.path}")
            print_footer()
        return ExitCode.SUCCESS
