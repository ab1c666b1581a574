"""Tests for the template description parser (stencil.scaffolder.parser).

Covers:
- Minimal template with one question and one copy instruction
- Question kinds, option labels, instruction flags and order
- Missing description, malformed XML, unknown tags
- Template locator resolution
"""

from __future__ import annotations

from pathlib import Path

import pytest

from stencil.errors import QuestionDefinitionError, TemplateError
from stencil.prompting.questions import OptionsQuestion, PlainQuestion
from stencil.scaffolder.locator import TemplateLocator
from stencil.scaffolder.models import OptionsTemplateQuestion, PlainTemplateQuestion
from stencil.scaffolder.parser import parse_description, parse_template


pytestmark = pytest.mark.unit


FULL_DESCRIPTION = """\
<template modelName="service">
    <questions>
        <plain name="name" caption="Service name"/>
        <options name="license" caption="License">
            <option>MIT</option>
            <option> Apache-2.0 </option>
        </options>
        <plain name="owner" caption="Owner"/>
    </questions>
    <operations>
        <transform src="README.md" dst="README.md"/>
        <copy src="static" dst="assets"/>
        <transform src="app.py" dst="src/{{ name }}/app.py"/>
    </operations>
</template>
"""


class TestParseTemplate:
    def test_minimal_template(
        self, make_template, templates_root: Path, minimal_description: str
    ):
        make_template("minimal", minimal_description)
        template = parse_template("minimal", TemplateLocator([templates_root]))

        assert template.model_name == "project"
        assert template.path == templates_root / "minimal"
        assert template.questions == (PlainTemplateQuestion(name="name", caption="Project name"),)
        assert len(template.instructions) == 1
        instruction = template.instructions[0]
        assert instruction.transform is False
        assert instruction.src == "static.txt"
        assert instruction.dst == "static.txt"

    def test_full_template_keeps_document_order(self, make_template, templates_root: Path):
        make_template("svc", FULL_DESCRIPTION)
        template = parse_template("svc", TemplateLocator([templates_root]))

        assert [q.name for q in template.questions] == ["name", "license", "owner"]
        license_question = template.questions[1]
        assert isinstance(license_question, OptionsTemplateQuestion)
        assert license_question.options == ("MIT", "Apache-2.0")

        assert [(i.src, i.dst, i.transform) for i in template.instructions] == [
            ("README.md", "README.md", True),
            ("static", "assets", False),
            ("app.py", "src/{{ name }}/app.py", True),
        ]

    def test_missing_description(self, templates_root: Path):
        (templates_root / "empty").mkdir()
        with pytest.raises(TemplateError, match="Unable to find template.xml for template empty"):
            parse_template("empty", TemplateLocator([templates_root]))

    def test_missing_template_directory(self, templates_root: Path):
        with pytest.raises(TemplateError, match="Unable to find"):
            parse_template("nowhere", TemplateLocator([templates_root]))

    def test_unknown_operation(self, make_template, templates_root: Path):
        make_template(
            "bad",
            """\
            <template modelName="m">
                <operations>
                    <copy src="a" dst="a"/>
                    <delete src="b"/>
                </operations>
            </template>
            """,
        )
        with pytest.raises(TemplateError, match="Invalid template"):
            parse_template("bad", TemplateLocator([templates_root]))

    def test_unknown_question(self, make_template, templates_root: Path):
        make_template(
            "bad",
            """\
            <template modelName="m">
                <questions><secret name="pw" caption="Password"/></questions>
                <operations/>
            </template>
            """,
        )
        with pytest.raises(TemplateError, match="Invalid template"):
            parse_template("bad", TemplateLocator([templates_root]))

    def test_unknown_option_element(self, make_template, templates_root: Path):
        make_template(
            "bad",
            """\
            <template modelName="m">
                <questions>
                    <options name="x" caption="X"><choice>a</choice></options>
                </questions>
                <operations/>
            </template>
            """,
        )
        with pytest.raises(TemplateError, match="Invalid template"):
            parse_template("bad", TemplateLocator([templates_root]))

    def test_options_without_options(self, make_template, templates_root: Path):
        make_template(
            "bad",
            """\
            <template modelName="m">
                <questions><options name="x" caption="X"/></questions>
                <operations/>
            </template>
            """,
        )
        with pytest.raises(TemplateError, match="no options"):
            parse_template("bad", TemplateLocator([templates_root]))

    def test_missing_operations(self, make_template, templates_root: Path):
        make_template("bad", '<template modelName="m"><questions/></template>')
        with pytest.raises(TemplateError, match="no operations"):
            parse_template("bad", TemplateLocator([templates_root]))

    def test_malformed_xml(self, make_template, templates_root: Path):
        make_template("bad", "<template><operations></template>")
        with pytest.raises(TemplateError, match="Invalid template"):
            parse_template("bad", TemplateLocator([templates_root]))

    @pytest.mark.parametrize(
        "operation",
        ['<copy dst="out.txt"/>', '<transform src="in.txt"/>', '<copy src="" dst="out.txt"/>'],
    )
    def test_operation_requires_src_and_dst(
        self, make_template, templates_root: Path, operation: str
    ):
        make_template(
            "bad",
            f'<template modelName="m"><operations>{operation}</operations></template>',
        )
        with pytest.raises(TemplateError, match="requires non-empty src and dst"):
            parse_template("bad", TemplateLocator([templates_root]))

    def test_questions_region_optional(self, tmp_path: Path):
        description = tmp_path / "template.xml"
        description.write_text(
            '<template modelName="m"><operations><copy src="a" dst="b"/></operations></template>',
            encoding="utf-8",
        )
        template = parse_description(description)
        assert template.questions == ()
        assert template.path == tmp_path
        assert template.question_tree() is None


class TestQuestionTree:
    def test_converts_to_question_model(self, make_template, templates_root: Path):
        make_template("svc", FULL_DESCRIPTION)
        tree = parse_template("svc", TemplateLocator([templates_root])).question_tree()

        assert tree is not None
        assert tree.name == "service"
        assert [type(q) for q in tree] == [PlainQuestion, OptionsQuestion, PlainQuestion]
        assert tree[1].options == ("MIT", "Apache-2.0")

    def test_duplicate_names_rejected(self, make_template, templates_root: Path):
        make_template(
            "dup",
            """\
            <template modelName="m">
                <questions>
                    <plain name="a" caption="A"/>
                    <plain name="a" caption="A again"/>
                </questions>
                <operations/>
            </template>
            """,
        )
        template = parse_template("dup", TemplateLocator([templates_root]))
        with pytest.raises(QuestionDefinitionError, match="name a"):
            template.question_tree()


class TestTemplateLocator:
    def test_search_order(self, tmp_path: Path):
        first, second = tmp_path / "first", tmp_path / "second"
        (second / "svc").mkdir(parents=True)
        (first / "svc").mkdir(parents=True)
        (second / "only-second").mkdir()

        locator = TemplateLocator([first, second])
        assert locator.find("svc") == first / "svc"
        assert locator.find("only-second") == second / "only-second"
        assert locator.available() == ["only-second", "svc"]

    def test_direct_directory(self, tmp_path: Path):
        target = tmp_path / "direct"
        target.mkdir()
        assert TemplateLocator([]).find(str(target)) == target

    def test_missing_falls_back_to_first_search_dir(self, tmp_path: Path):
        assert TemplateLocator([tmp_path]).find("nope") == tmp_path / "nope"
