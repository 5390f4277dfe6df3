"""
Tests for the MakeError taxonomy and its message rendering.
"""
import pytest

from smake.core.errors import ErrorKind, MakeError


class TestMakeError:
    def test_fields_are_kept(self):
        error = MakeError(ErrorKind.UNRESOLVED_VARIABLE, line=3, variable="OUT")
        assert error.kind is ErrorKind.UNRESOLVED_VARIABLE
        assert error.line == 3
        assert error.variable == "OUT"
        assert error.section is None
        assert error.chain == ()

    def test_is_an_exception(self):
        with pytest.raises(MakeError):
            raise MakeError(ErrorKind.CONFIG_NOT_FOUND, path="makefile")

    @pytest.mark.parametrize(
        "error, expected",
        [
            (MakeError(ErrorKind.CONFIG_NOT_FOUND, path="mk"), "File mk does not exist"),
            (MakeError(ErrorKind.COMMAND_OUTSIDE_SECTION, line=2), "Command not in a section on line 2"),
            (
                MakeError(ErrorKind.EMPTY_VARIABLE_VALUE, line=5, variable="X"),
                "Invalid value for variable X on line 5",
            ),
            (
                MakeError(ErrorKind.UNRESOLVED_VARIABLE, line=1, variable="Y"),
                "Undeclared/uninitialized variable Y on line 1",
            ),
        ],
    )
    def test_render(self, error, expected):
        assert error.render() == expected
        assert str(error) == expected

    def test_render_without_line(self):
        error = MakeError(ErrorKind.EMPTY_VARIABLE_VALUE, variable="MODE")
        assert str(error) == "Invalid value for variable MODE"

    def test_cycle_render_shows_the_loop(self):
        error = MakeError(ErrorKind.CYCLIC_INVOCATION, section="A", chain=["A", "B"])
        assert "A -> B -> A" in str(error)

    def test_every_kind_renders(self):
        for kind in ErrorKind:
            assert str(MakeError(kind, section="S", detail="d"))
