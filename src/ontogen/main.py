#!/usr/bin/env python3
"""
OntoUML code generator entry point.

Usage:
    ontogen model.refontouml -o out
    ontogen model.refontouml -o Model.cs -s -c namespace=MyCompany.Model
    ontogen model.refontouml -O onto-object-model -o model.json
    ontogen -I onto-object-model model.json -o out -t types.json
"""

import sys
from typing import List, Optional

from ontogen.app.cli import GenerateCommand, create_argument_parser
from ontogen.plugins import get_form_registry


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run the generator and return the exit code."""
    registry = get_form_registry()
    parser = create_argument_parser(registry.list_input_forms(), registry.list_output_forms())
    args = parser.parse_args(argv)
    return int(GenerateCommand().execute(args))


if __name__ == "__main__":
    sys.exit(main())
