"""Unit tests for OutputManager."""

from rich.console import Console

from empstats.output import OutputManager, Verbosity, get_output, set_output


class TestOutputManager:
    """Test cases for OutputManager class."""

    def test_quiet_hides_messages(self, capsys):
        """Test that quiet mode drops info and success messages but keeps results."""
        output = OutputManager(verbosity=Verbosity.QUIET)
        output.info("loading")
        output.success("done")
        output.result("42")
        assert capsys.readouterr().out.strip() == "42"

    def test_verbose_only_in_verbose_mode(self, capsys):
        """Test that verbose messages need VERBOSE."""
        OutputManager(verbosity=Verbosity.NORMAL).verbose("hidden detail")
        OutputManager(verbosity=Verbosity.VERBOSE).verbose("shown detail")
        out = capsys.readouterr().out
        assert "hidden detail" not in out
        assert "shown detail" in out

    def test_error_goes_to_stderr(self, capsys):
        """Test that errors and suggestions print to stderr."""
        OutputManager().error("Error: broken", suggestion="try again")
        captured = capsys.readouterr()
        assert "Error: broken" in captured.err
        assert "try again" in captured.err
        assert captured.out == ""

    def test_mapping_table(self, capsys):
        """Test printing a mapping as a table."""
        OutputManager(verbosity=Verbosity.QUIET).mapping_table(
            "Counts", {"sales": 2, "hr": [1, 2]}, "department", "count"
        )
        out = capsys.readouterr().out
        assert "Counts" in out
        assert "sales" in out
        assert "1, 2" in out

    def test_title_wider_than_columns(self, capsys):
        """Test that a long title over narrow columns stays on one line."""
        output = OutputManager(console=Console(width=80))
        output.mapping_table("Average salary by department", {"hr": 1.0}, "k", "v")
        assert "Average salary by department" in capsys.readouterr().out

    def test_employee_table(self, capsys, employees):
        """Test printing employee records as a table."""
        OutputManager().employee_table("Staff", [employees[4].to_dict()])
        out = capsys.readouterr().out
        assert "Staff" in out
        assert "Dilip" in out

    def test_global_instance(self):
        """Test replacing the global output manager."""
        manager = OutputManager(verbosity=Verbosity.QUIET)
        previous = get_output()
        set_output(manager)
        try:
            assert get_output() is manager
        finally:
            set_output(previous)
