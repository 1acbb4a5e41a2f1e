"""
OntoUML code generator.

Transforms OntoUML conceptual models into a target-neutral Object Model and
generates source code (C# model classes) or a JSON serialization from it.

Pipeline:
    reader -> OntoUmlModel -> OntoUmlToObjectModelTransformer -> ObjectModel
           -> language mapper -> view model -> renderer -> files
"""

__version__ = "1.0.0"
