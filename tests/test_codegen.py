"""Tests for the codegen module."""

import pytest

from structgen.codegen import generate, go_type, render
from structgen.record import Primitive, Record

USER = Record(
    name="User",
    depth=1,
    fields={"UserID": Primitive.INTEGER, "Email": Primitive.STRING},
    children=(
        Record(
            name="Profile",
            depth=2,
            fields={"AvatarURL": Primitive.STRING},
            children=(
                Record(name="Theme", depth=3, fields={"Dark": Primitive.BOOL}),
            ),
        ),
    ),
)

EXPECTED_USER = (
    "type User struct {\n"
    "\tEmail string\n"
    "\tUserID int\n"
    "\tProfile struct {\n"
    "\t\tAvatarURL string\n"
    "\t\tTheme struct {\n"
    "\t\t\tDark bool\n"
    "\t\t}\n"
    "\t}\n"
    "}\n"
)


class TestGoType:
    """Test primitive -> Go type spelling."""

    @pytest.mark.parametrize("primitive,expected", [
        (Primitive.STRING, "string"),
        (Primitive.INTEGER, "int"),
        (Primitive.BOOL, "bool"),
        (Primitive.STRUCT, "struct{}"),
    ])
    def test_mapping(self, primitive, expected):
        assert go_type(primitive) == expected

    def test_accepts_plain_string(self):
        assert go_type("integer") == "int"


class TestRender:
    """Test template rendering of record trees."""

    def test_nested_record(self):
        assert render({"records": [USER], "package": None}) == EXPECTED_USER

    def test_package_clause(self):
        text = render({"records": [USER], "package": "models"})
        assert text == "package models\n\n" + EXPECTED_USER

    def test_records_separated_by_blank_line(self):
        other = Record(name="Tag", depth=1, fields={"Label": Primitive.STRING})
        text = render({"records": [USER, other], "package": None})
        assert text == EXPECTED_USER + "\ntype Tag struct {\n\tLabel string\n}\n"

    def test_empty_record(self):
        text = render({"records": [Record(name="Empty", depth=1)], "package": None})
        assert text == "type Empty struct {\n}\n"

    def test_no_records(self):
        assert render({"records": [], "package": None}) == ""

    def test_nested_children_omit_type_keyword(self):
        lines = render({"records": [USER], "package": None}).splitlines()
        assert [line for line in lines if line.startswith("type ")] == ["type User struct {"]


class TestGenerate:
    """Test writing rendered output."""

    def test_returns_text_without_output(self):
        assert generate({"records": [USER], "package": None}) == EXPECTED_USER

    def test_writes_file(self, tmp_path):
        output = tmp_path / "gen" / "models.go"
        text = generate({"records": [USER], "package": "models"}, output)
        assert output.read_text() == text
