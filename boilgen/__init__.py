"""
boilgen

Generate boilerplate directory trees from a JSON template catalog,
substituting snippet variables into file paths and contents.
"""

__version__ = "0.1.0"

from boilgen.core.generator import GenerationRequest, generate_entity
from boilgen.cli.commands import main

__all__ = [
    "GenerationRequest",
    "generate_entity",
    "main",
]
