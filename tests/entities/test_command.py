"""
Tests for the EditorCommand entity.
"""

from text_editor.entities.command import CommandName, EditorCommand


class TestEditorCommand:
    """Test cases for the EditorCommand entity."""

    def test_from_arguments_full(self):
        command = EditorCommand.from_arguments(
            {
                "command": "insert",
                "path": "/tmp/a.txt",
                "insert_line": 3,
                "new_str": "x",
                "description": "add a line",
            }
        )

        assert command.command == CommandName.INSERT
        assert command.path == "/tmp/a.txt"
        assert command.insert_line == 3
        assert command.new_str == "x"
        assert command.old_str is None
        assert command.description == "add a line"

    def test_view_range_becomes_pair(self):
        command = EditorCommand.from_arguments(
            {"command": "view", "path": "/tmp/a.txt", "view_range": [None, 5]}
        )

        assert command.view_range == (None, 5)

    def test_single_item_view_range_reads_to_end(self):
        command = EditorCommand.from_arguments(
            {"command": "view", "path": "/tmp/a.txt", "view_range": [3]}
        )

        assert command.view_range == (3, -1)

    def test_unknown_command_is_kept(self):
        command = EditorCommand.from_arguments({"command": "delete", "path": "/tmp/a"})

        assert command.command == "delete"
        assert command.command not in CommandName.values()

    def test_missing_command(self):
        assert EditorCommand.from_arguments({}).command == ""

    def test_command_names(self):
        assert CommandName.values() == [
            "view",
            "create",
            "str_replace",
            "insert",
            "undo_edit",
        ]

    def test_str(self):
        command = EditorCommand(command="view", path="/tmp/a.txt")

        assert str(command) == "EditorCommand(command='view', path='/tmp/a.txt')"
