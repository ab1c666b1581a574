"""The "new project" questionnaire and the model derived from its answers."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from stencil.messages import MessageBundle
from stencil.prompting.questions import OptionsQuestion, PlainQuestion
from stencil.prompting.tree import QuestionsBuilder, QuestionTree
from stencil.prompting.validation import check_is_package, check_regex
from stencil.utils import sanitize_name

TREE_NAME = "project"

PROJECT_NAME_PATTERN = r"[a-zA-Z][\w-]*"
NAMESPACE_PATTERN = r"[a-z][a-z0-9]{0,6}"
VERSION_PATTERN = r"\d+\.\d+(\.\d+)?(-SNAPSHOT)?"


def project_questions(messages: MessageBundle, cwd: Optional[Path] = None) -> QuestionTree:
    """Build the question tree asked when creating a new project.

    Args:
        messages: Bundle providing ``platformVersions``, ``databases`` and
            ``enterVersionManually``.
        cwd: Directory whose name seeds the default project name.
    """
    versions = messages.get_list("platformVersions")
    manual_entry = len(versions)
    default_name = sanitize_name((cwd or Path.cwd()).name) or "project"

    def project_name(q: PlainQuestion) -> None:
        q.set_default(default_name)
        q.validate_with(
            lambda value: check_regex(value, PROJECT_NAME_PATTERN, "Invalid project name")
        )

    def namespace(q: PlainQuestion) -> None:
        q.set_computed_default(lambda answers: sanitize_name(answers["projectName"])[:7] or "app")
        q.validate_with(
            lambda value: check_regex(
                value,
                NAMESPACE_PATTERN,
                "Namespace must be lower-case letters and digits, at most 7 characters",
            )
        )

    def root_package(q: PlainQuestion) -> None:
        q.set_computed_default(lambda answers: f"com.company.{answers['namespace']}")
        q.validate_with(check_is_package)

    def platform_version(q: OptionsQuestion) -> None:
        q.set_default(0)

    def custom_platform_version(q: PlainQuestion) -> None:
        q.ask_if(lambda answers: answers["platformVersion"] == manual_entry)
        q.validate_with(
            lambda value: check_regex(value, VERSION_PATTERN, "Invalid platform version")
        )

    def database(q: OptionsQuestion) -> None:
        q.set_default(0)

    builder = QuestionsBuilder()
    builder.question("projectName", "Project name", project_name)
    builder.question("namespace", "Project namespace", namespace)
    builder.question("rootPackage", "Root package", root_package)
    builder.options(
        "platformVersion",
        "Platform version",
        [*versions, messages.get("enterVersionManually")],
        platform_version,
    )
    builder.question("customPlatformVersion", "Platform version", custom_platform_version)
    builder.options("database", "Choose database", messages.get_list("databases"), database)
    return builder.build(TREE_NAME)


class ProjectInitModel(BaseModel):
    """Values of a new project, derived from the questionnaire answers."""

    project_name: str = Field(..., description="Project name")
    namespace: str = Field(..., description="Short project namespace")
    root_package: str = Field(..., description="Dotted root package")
    platform_version: str = Field(..., description="Chosen or manually entered version")
    database: str = Field(..., description="Database label")

    @property
    def root_package_directory(self) -> str:
        return self.root_package.replace(".", "/")

    @classmethod
    def from_answers(cls, answers: Mapping[str, Any], messages: MessageBundle) -> "ProjectInitModel":
        if "customPlatformVersion" in answers:
            platform_version = answers["customPlatformVersion"]
        else:
            platform_version = messages.get_list("platformVersions")[answers["platformVersion"]]
        return cls(
            project_name=answers["projectName"],
            namespace=answers["namespace"],
            root_package=answers["rootPackage"],
            platform_version=platform_version,
            database=messages.get_list("databases")[answers["database"]],
        )

    def as_context(self) -> dict[str, str]:
        """Template context for this project, keyed by answer names."""
        return {
            "projectName": self.project_name,
            "namespace": self.namespace,
            "rootPackage": self.root_package,
            "rootPackageDirectory": self.root_package_directory,
            "platformVersion": self.platform_version,
            "database": self.database,
        }
