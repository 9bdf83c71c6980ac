"""Tests for the attribute dump entry point."""

from main import run_attribute_dump


def test_run_attribute_dump(tmp_path, sample_entry_xml, capsys) -> None:
    """Test that the entry is read and printed back in normalized form."""
    # Arrange
    entry_path = tmp_path / "entry.xml"
    entry_path.write_text(sample_entry_xml, encoding="utf-8")

    # Act
    exit_code = run_attribute_dump(str(entry_path))

    # Assert
    assert exit_code == 0
    output = capsys.readouterr().out
    assert "<g:item_type" in output
    assert 'access="private"' in output
    assert "rating" not in output


def test_run_attribute_dump_missing_file(tmp_path) -> None:
    assert run_attribute_dump(str(tmp_path / "missing.xml")) == 1


def test_run_attribute_dump_malformed_file(tmp_path) -> None:
    entry_path = tmp_path / "entry.xml"
    entry_path.write_text("<entry>", encoding="utf-8")

    assert run_attribute_dump(str(entry_path)) == 1
