"""Unit tests for the avl-tree command line."""

from avl_tree.cli.main import main


def test_prints_values_in_order(capsys):
    """Test that numeric values are printed in ascending order."""
    assert main(["--numeric", "3", "1", "2", "10"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "1 2 3 10"


def test_strings_sort_lexicographically(capsys):
    """Test that values default to string ordering."""
    assert main(["3", "1", "2", "10"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "1 10 2 3"


def test_duplicates_are_dropped(capsys):
    """Test that repeated values are printed once."""
    assert main(["--numeric", "2", "2", "1", "1"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "1 2"


def test_empty_input(capsys):
    """Test running with no values."""
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines()[0] == ""


def test_stats(capsys):
    """Test the --stats summary lines."""
    assert main(["--numeric", "--stats", "3", "1", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "size=3 height=2"
    assert lines[2] == "rotations: left=1 right=1 (LL=0 LR=1 RR=0 RL=0)"


def test_show_tree(capsys):
    """Test the --show-tree drawing."""
    assert main(["--numeric", "--show-tree", "1", "2", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1:] == ["   ┌2┐   ", "┌1┐   ┌3┐"]


def test_show_tree_with_heights(capsys):
    """Test that --heights labels the drawing."""
    assert main(["--numeric", "--show-tree", "--heights", "2", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    pad = " " * len("┌1 h=1 b=+0┐")
    assert lines[1:] == [f"{pad}┌2 h=2 b=+1┐", f"┌1 h=1 b=+0┐{pad}"]


def test_reads_values_from_file(tmp_path, capsys):
    """Test reading values from a file alongside arguments."""
    path = tmp_path / "values.txt"
    path.write_text("5\n\n4\n6\n", encoding="utf-8")
    assert main(["--numeric", "--file", str(path), "1"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "1 4 5 6"


def test_bad_number_exits_with_error(capsys):
    """Test that a non-integer with --numeric exits with status 2."""
    assert main(["--numeric", "1", "two"]) == 2
    assert "Error" in capsys.readouterr().err


def test_missing_file_exits_with_error(tmp_path, capsys):
    """Test that an unreadable value file exits with status 2."""
    assert main(["--file", str(tmp_path / "nope.txt")]) == 2
    assert "Error" in capsys.readouterr().err


def test_missing_config_exits_with_error(tmp_path, capsys):
    """Test that a missing config file exits with status 2."""
    assert main(["--config", str(tmp_path / "nope.toml"), "1"]) == 2
    assert "Config file not found" in capsys.readouterr().err


def test_config_is_applied(tmp_path, capsys):
    """Test that a TOML config is loaded and used."""
    path = tmp_path / "tree.toml"
    path.write_text("[avl_tree]\nvalidate_after_insert = true\n", encoding="utf-8")
    assert main(["--config", str(path), "--numeric", "9", "8", "7"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "7 8 9"
