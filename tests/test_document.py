"""Tests for prologue.document.Prologue."""
import logging

import pytest

from prologue.document import Prologue


def _simple() -> Prologue:
    prl = Prologue()
    prl.content("Name", ["FOO"])
    prl.content("Purpose", ["Do it."])
    prl.content("History", ["1990 (MJC): Original."])
    return prl


class TestContent:
    def test_set_and_get(self) -> None:
        prl = Prologue()
        prl.content("description", ["First line.", "Second line."])
        assert prl.content("Description") == ["First line.", "Second line."]

    def test_absent_section_is_empty(self) -> None:
        assert Prologue().content("Notes") == []

    def test_empty_sequence_removes_section(self) -> None:
        prl = Prologue()
        prl.content("Notes", ["a"])
        prl.content("Notes", [])
        assert "Notes" not in prl.sections()

    def test_returns_copy(self) -> None:
        prl = Prologue()
        prl.content("Notes", ["a"])
        prl.content("Notes").append("b")
        assert prl.content("Notes") == ["a"]

    def test_strips_newlines(self) -> None:
        prl = Prologue()
        prl.content("Notes", ["a\n", "b\r\n"])
        assert prl.content("Notes") == ["a", "b"]

    def test_rejects_bare_string(self) -> None:
        with pytest.raises(TypeError):
            Prologue().content("Notes", "text")

    def test_rejects_undefined_name(self) -> None:
        with pytest.raises(ValueError):
            Prologue().content(None)  # type: ignore[arg-type]

    def test_del_section(self) -> None:
        prl = _simple()
        prl.del_section("purpose")
        assert prl.sections() == ["History", "Name"]

    def test_attribute_accessors(self) -> None:
        prl = Prologue()
        prl.content("Type of Module", ["ADAM A-task"])
        assert prl.type_of_module == ["ADAM A-task"]
        assert prl.description == []

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError):
            Prologue().no_such_section  # noqa: B018


class TestSections:
    def test_sections_sorted(self) -> None:
        assert _simple().sections() == ["History", "Name", "Purpose"]

    def test_misc_sections(self) -> None:
        prl = _simple()
        prl.content("global variables", ["X"])
        prl.content("Author", ["MJC"])
        prl.content("C usage", ["foo()"])
        assert prl.misc_sections() == ["C Usage", "Global Variables"]

    def test_has_section_literal(self) -> None:
        assert _simple().has_section("history") == "History"

    def test_has_section_alias(self) -> None:
        prl = Prologue()
        prl.content("Author", ["MJC"])
        assert prl.has_section("Authors") == "Author"
        assert prl.section("Authors") == ("Author", ["MJC"])

    def test_has_section_missing(self) -> None:
        assert Prologue().has_section("Licence") is None
        assert Prologue().section("Licence") == ("Licence", [])

    def test_alias_conflict_prefers_literal(self, caplog: pytest.LogCaptureFixture) -> None:
        prl = Prologue()
        prl.content("Author", ["MJC"])
        prl.content("Authors", ["TIMJ"])
        with caplog.at_level(logging.WARNING):
            assert prl.has_section("Authors") == "Authors"
        assert "Both section (Authors) and alias (Author) exist" in caplog.text


class TestDerived:
    def test_years(self) -> None:
        prl = Prologue()
        prl.content("History", [
            "1990 original", "2007-03-04 revised", "14.03.99 typo fix",
        ])
        assert prl.years() == [1990, 1999, 2007]

    def test_years_two_digit_century(self) -> None:
        prl = Prologue()
        prl.content("History", ["1/2/51 one", "3/4/50 two", "no date here"])
        assert prl.years() == [1951, 2050]

    def test_years_without_history(self) -> None:
        assert Prologue().years() == []

    def test_adam_task_from_parameters(self) -> None:
        prl = Prologue()
        prl.content("ADAM Parameters", ["IN = NDF (Read)"])
        assert prl.is_adam_task()

    def test_adam_task_from_type(self) -> None:
        prl = Prologue()
        prl.content("Type of Module", ["ADAM A-task"])
        assert prl.is_adam_task()

    def test_not_adam_task(self) -> None:
        prl = Prologue()
        prl.content("Type of Module", ["adam subroutine"])
        assert not prl.is_adam_task()
        assert not _simple().is_adam_task()


class TestGuessDefaults:
    def test_language_from_suffix(self) -> None:
        prl = Prologue()
        prl.guess_defaults(file="kpg1_fill.f")
        assert prl.language == ["Starlink Fortran 77"]
        assert prl.type_of_module == []

    def test_include_file(self) -> None:
        prl = Prologue()
        prl.guess_defaults(file="SAE_PAR")
        assert prl.language == ["Starlink Fortran 77"]
        assert prl.type_of_module == ["FORTRAN INCLUDE"]

    def test_common_block(self) -> None:
        prl = Prologue()
        prl.guess_defaults(file="/src/kappa/CTM_CMN")
        assert prl.type_of_module == ["COMMON BLOCK"]

    def test_does_not_overwrite(self) -> None:
        prl = Prologue()
        prl.content("Language", ["Fortran 90"])
        prl.guess_defaults(file="foo.c")
        assert prl.language == ["Fortran 90"]

    def test_unknown_file(self) -> None:
        prl = Prologue()
        prl.guess_defaults(file="README")
        prl.guess_defaults()
        assert prl.sections() == []


class TestStringify:
    def test_canonical_layout(self) -> None:
        assert _simple().stringify() == (
            "*+\n"
            "*  Name:\n"
            "*     FOO\n"
            "\n"
            "*  Purpose:\n"
            "*     Do it.\n"
            "\n"
            "*  History:\n"
            "*     1990 (MJC): Original.\n"
            "*     {enter_further_changes_here}\n"
            "\n"
            "*-\n"
        )

    def test_blank_edge_lines_not_written(self) -> None:
        prl = Prologue()
        prl.content("Notes", ["", "Inner.", "", "More.", " "])
        prl.content("Bugs", ["", ""])
        assert prl.stringify() == "*+\n*  Notes:\n*     Inner.\n*\n*     More.\n\n*-\n"

    def test_terminator_does_not_mutate(self) -> None:
        prl = _simple()
        prl.stringify()
        assert prl.content("History") == ["1990 (MJC): Original."]

    def test_terminator_not_repeated(self) -> None:
        prl = Prologue()
        prl.content("Bugs", ["None known.", "{note_new_bugs_here}"])
        text = prl.stringify()
        assert text.count("{note_new_bugs_here}") == 1

    def test_order_ignores_insertion(self) -> None:
        prl = Prologue()
        prl.content("Bugs", ["b"])
        prl.content("Notes", ["n"])
        prl.content("Name", ["x"])
        text = prl.stringify()
        assert text.index("*  Name:") < text.index("*  Notes:") < text.index("*  Bugs:")

    def test_misc_sections_in_slot(self) -> None:
        prl = Prologue()
        prl.content("Notes", ["n"])
        prl.content("Prior Requirements", ["p"])
        prl.content("Global Variables", ["g"])
        prl.content("Authors", ["a"])
        text = prl.stringify()
        assert (
            text.index("*  Notes:")
            < text.index("*  Global Variables:")
            < text.index("*  Prior Requirements:")
            < text.index("*  Authors:")
        )

    def test_adam_task_moves_arguments(self) -> None:
        prl = Prologue()
        prl.content("Description", ["d"])
        prl.content("Arguments", ["STATUS = INTEGER (Given and Returned)"])
        prl.content("ADAM Parameters", ["IN = NDF (Read)"])
        text = prl.stringify()
        assert text.count("*  Arguments:") == 1
        assert text.index("*  Arguments:") < text.index("*  Description:")
        assert prl.output_order().count("Arguments") == 1

    def test_non_adam_keeps_arguments_after_description(self) -> None:
        prl = Prologue()
        prl.content("Description", ["d"])
        prl.content("Arguments", ["a"])
        text = prl.stringify()
        assert text.index("*  Description:") < text.index("*  Arguments:")

    def test_write_defaults(self) -> None:
        prl = Prologue(write_defaults=True)
        prl.content("Name", ["FOO"])
        assert prl.stringify() == (
            "*+\n"
            "*  Name:\n"
            "*     FOO\n"
            "\n"
            "*  Language:\n"
            "*     {routine_language}\n"
            "\n"
            "*  Authors:\n"
            "*     {original_author_entry}\n"
            "\n"
            "*  History:\n"
            "*     {enter_changes_here}\n"
            "\n"
            "*  Bugs:\n"
            "*     {note_any_bugs_here}\n"
            "\n"
            "*-\n"
        )

    def test_alias_name_written(self) -> None:
        prl = Prologue()
        prl.content("Author", ["MJC"])
        text = prl.stringify()
        assert "*  Author:\n*     MJC\n*     {enter_new_authors_here}\n" in text

    def test_invocation_continuation(self) -> None:
        prl = Prologue()
        prl.content("Invocation", ["CALL FOO( A,", ":         B )"])
        prl.content("Notes", [":colon"])
        text = prl.stringify()
        assert "*     CALL FOO( A,\n*    :         B )\n" in text
        assert "*     :colon\n" in text

    def test_blank_lines(self) -> None:
        prl = Prologue(comment_char="#")
        prl.content("Description", ["one", "", "   ", "two"])
        assert "#  Description:\n#     one\n#\n#\n#     two\n\n" in prl.stringify()

    def test_embedded_comment(self) -> None:
        prl = Prologue(starts_embedded_comment=True, ends_embedded_comment=True)
        prl.content("Name", ["foo"])
        text = prl.stringify()
        assert text.startswith("/*\n*+\n")
        assert text.endswith("*-\n*/\n")

    def test_empty_prologue(self) -> None:
        assert Prologue().stringify() == "*+\n*-\n"
