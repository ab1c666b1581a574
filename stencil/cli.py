"""Command-line entry point.

Usage::

    stencil generate service -o ./out
    stencil init --template project
    stencil templates
    stencil version
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from stencil import __version__
from stencil.config import GeneratorConfig
from stencil.errors import CommandExecutionError
from stencil.messages import MessageBundle
from stencil.project import ProjectInitModel, project_questions
from stencil.prompting.answers import Answers
from stencil.prompting.driver import ConsoleDriver
from stencil.scaffolder.generator import GenerationExecutor, build_context
from stencil.scaffolder.locator import TemplateLocator
from stencil.scaffolder.parser import parse_template
from stencil.utils import (
    console,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def run_generate(
    config: GeneratorConfig, template_name: str, driver: ConsoleDriver
) -> tuple[Path, list[Path]]:
    """Ask a template's questions and execute its instructions.

    Returns the output directory and every written file.
    """
    locator = TemplateLocator(config.templates_dirs)
    template = parse_template(template_name, locator, config.description_file)

    tree = template.question_tree()
    answers = driver.ask(tree) if tree is not None else Answers()
    context = build_context(tree or (), answers, template.model_name)

    executor = GenerationExecutor(template.path, config.output_dir)
    return config.output_dir, executor.execute(template.instructions, context)


def run_init(
    config: GeneratorConfig, template_name: str, driver: ConsoleDriver
) -> tuple[Path, list[Path]]:
    """Ask the new-project questions, then generate *template_name*.

    The project values are exposed to placeholders under ``project``; the
    template's own questions are asked afterwards and exposed as usual.
    """
    messages = MessageBundle.for_locale(config.locale)
    locator = TemplateLocator(config.templates_dirs)
    template = parse_template(template_name, locator, config.description_file)

    project_answers = driver.ask(project_questions(messages, cwd=config.output_dir.resolve()))
    model = ProjectInitModel.from_answers(project_answers, messages)

    tree = template.question_tree()
    answers = driver.ask(tree) if tree is not None else Answers()
    context = build_context(tree or (), answers, template.model_name)
    context["project"] = model.as_context()

    target = config.output_dir / model.project_name
    executor = GenerationExecutor(template.path, target)
    return target, executor.execute(template.instructions, context)


def run_templates(config: GeneratorConfig) -> list[str]:
    return TemplateLocator(config.templates_dirs).available()


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stencil",
        description="stencil -- interactive project generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  stencil generate service -o ./out\n"
            "  stencil init --template project\n"
        ),
    )
    parser.add_argument(
        "--templates-dir",
        action="append",
        type=Path,
        default=None,
        help="Template search directory (repeatable, overrides STENCIL_TEMPLATES_DIRS)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON configuration file (default: read STENCIL_* environment variables)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Generate files from a template")
    generate.add_argument("template", help="Template name or directory")
    generate.add_argument("--output", "-o", type=Path, default=None, help="Output directory")

    init = commands.add_parser("init", help="Create a new project")
    init.add_argument("--template", default="project", help="Project template (default: project)")
    init.add_argument("--output", "-o", type=Path, default=None, help="Parent directory")

    commands.add_parser("templates", help="List available templates")
    commands.add_parser("version", help="Print the stencil version")
    return parser


def main(argv: Optional[Sequence[str]] = None, driver: Optional[ConsoleDriver] = None) -> int:
    """CLI entry point for ``stencil``.  Returns the process exit code."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = GeneratorConfig.load(args.config) if args.config else GeneratorConfig.from_env()
    except (OSError, ValidationError) as exc:
        print_error(f"Error: invalid configuration: {exc}")
        return 1
    if args.templates_dir:
        config.templates_dirs = args.templates_dir
    if getattr(args, "output", None) is not None:
        config.output_dir = args.output

    if args.command == "version":
        console.print(__version__)
        return 0
    if args.command == "templates":
        names = run_templates(config)
        if not names:
            searched = ", ".join(str(path) for path in config.templates_dirs)
            print_warning(f"No templates found in {searched}")
        for name in names:
            console.print(name)
        return 0

    driver = driver or ConsoleDriver()
    try:
        if args.command == "generate":
            print_header(f"Generate {args.template}")
            target, written = run_generate(config, args.template, driver)
        else:
            print_header("New project")
            target, written = run_init(config, args.template, driver)
    except CommandExecutionError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print_error(f"Error: {exc}")
        return 1

    print_summary_table(
        {"Files written": str(len(written)), "Output": str(target.resolve())},
        title="Generation",
    )
    print_success("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
