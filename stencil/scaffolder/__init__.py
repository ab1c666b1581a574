"""Template-driven generation.

Parses a template description and executes its ordered copy/transform
instructions against collected answers.

Quick usage::

    from stencil.scaffolder import TemplateLocator, generate, parse_template

    template = parse_template("service", TemplateLocator(["~/.stencil/templates"]))
    generate(template, answers, "./out")
"""

from stencil.scaffolder.generator import GenerationExecutor, build_context, generate
from stencil.scaffolder.locator import TemplateLocator
from stencil.scaffolder.models import GenerationInstruction, Template
from stencil.scaffolder.parser import parse_template
from stencil.scaffolder.templates import TemplateRenderer

__all__ = [
    "GenerationExecutor",
    "GenerationInstruction",
    "Template",
    "TemplateLocator",
    "TemplateRenderer",
    "build_context",
    "generate",
    "parse_template",
]
