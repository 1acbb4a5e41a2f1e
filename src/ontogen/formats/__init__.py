"""
Input and output formats.

- refontouml: RefOntoUML XMI reader
- object_model_json: Object Model JSON reader, identity mapper and renderer
- csharp: C# language mapper and renderer
"""
