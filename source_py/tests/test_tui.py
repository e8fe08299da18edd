import unittest
from unittest.mock import patch

from vrename.types import Config, LineCountMismatchError
from vrename import tui


def make_config(dry_run):
    return Config(
        file_names=["old.txt", "same.txt"],
        editor="vim",
        dry_run=dry_run,
        json=False,
        plain=False,
        verbose=False,
        log_file=None,
    )


class TestTUI(unittest.TestCase):

    @patch('vrename.tui.Console')
    @patch('vrename.tui.Progress')
    @patch('vrename.tui.edit_names')
    @patch('os.rename')
    def test_run_tui_dry_run(self, mock_rename, mock_edit, mock_progress, mock_console):
        config = make_config(dry_run=True)
        mock_edit.return_value = {"old.txt": "new.txt", "same.txt": "same.txt"}

        ret = tui.run_tui(config)

        self.assertEqual(ret, 0)
        mock_edit.assert_called_with("vim", ["old.txt", "same.txt"])
        mock_console.assert_called_with(stderr=True)
        printed = [str(c.args[0]) for c in mock_console.return_value.print.call_args_list if c.args]
        self.assertIn('would rename "old.txt" to "new.txt"', printed)
        self.assertIn("[bold yellow]Dry Run Complete[/bold yellow]", printed)

        # Ensure no file operations
        mock_rename.assert_not_called()

    @patch('vrename.tui.Console')
    @patch('vrename.tui.Progress')
    @patch('vrename.tui.edit_names')
    @patch('os.rename')
    def test_run_tui_execute(self, mock_rename, mock_edit, mock_progress, mock_console):
        config = make_config(dry_run=False)
        mock_edit.return_value = {"old.txt": "new.txt", "same.txt": "same.txt"}

        ret = tui.run_tui(config)

        self.assertEqual(ret, 0)
        mock_rename.assert_any_call("old.txt", "new.txt")
        mock_rename.assert_any_call("same.txt", "same.txt")
        progress = mock_progress.return_value.__enter__.return_value
        progress.add_task.assert_called_with("[red]Renaming...", total=2)
        self.assertEqual(progress.advance.call_count, 2)

    @patch('vrename.tui.Console')
    @patch('vrename.tui.Progress')
    @patch('vrename.tui.edit_names')
    @patch('os.rename')
    def test_run_tui_mismatch_propagates(self, mock_rename, mock_edit, mock_progress, mock_console):
        config = make_config(dry_run=False)
        mock_edit.side_effect = LineCountMismatchError(["old.txt", "same.txt"], ["new.txt"])

        with self.assertRaises(LineCountMismatchError):
            tui.run_tui(config)

        mock_rename.assert_not_called()
        mock_progress.assert_not_called()

    @patch('vrename.tui.Console')
    @patch('vrename.tui.Progress')
    @patch('vrename.tui.edit_names')
    @patch('os.rename')
    def test_run_tui_escapes_markup_in_names(self, mock_rename, mock_edit, mock_progress, mock_console):
        config = make_config(dry_run=True)
        mock_edit.return_value = {"[draft].txt": "[final].txt"}

        tui.run_tui(config)

        printed = [str(c.args[0]) for c in mock_console.return_value.print.call_args_list if c.args]
        self.assertIn('would rename "\\[draft].txt" to "\\[final].txt"', printed)


if __name__ == '__main__':
    unittest.main()
