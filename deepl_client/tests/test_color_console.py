import unittest
from unittest.mock import patch
import sys

from deepl_client.color_console import (
    print_error, print_info, print_translation,
    COLOR_ERROR, COLOR_INFO, COLOR_RESET
)

class TestColorConsole(unittest.TestCase):

    @patch('deepl_client.color_console.IS_TTY', True)
    @patch('builtins.print')
    def test_print_error_color(self, mock_print):
        """Test that print_error uses the correct color code and stderr."""
        print_error("Error message")
        mock_print.assert_called_once()
        self.assertEqual(mock_print.call_args[0][0], f"{COLOR_ERROR}Error message{COLOR_RESET}")
        self.assertEqual(mock_print.call_args[1]['file'], sys.stderr)

    @patch('deepl_client.color_console.IS_TTY', True)
    @patch('builtins.print')
    def test_print_info_color(self, mock_print):
        """Test that print_info uses the correct color code."""
        print_info("Info message")
        mock_print.assert_called_once()
        self.assertEqual(mock_print.call_args[0][0], f"{COLOR_INFO}Info message{COLOR_RESET}")

    @patch('deepl_client.color_console.IS_TTY', False)
    @patch('builtins.print')
    def test_no_color_when_not_tty(self, mock_print):
        """Test that no color codes are used when not in a TTY."""
        print_error("Plain message")
        mock_print.assert_called_once()
        self.assertEqual(mock_print.call_args[0][0], "Plain message")

    @patch('deepl_client.color_console.IS_TTY', True)
    @patch('builtins.print')
    def test_translation_is_never_colored(self, mock_print):
        """Translated content stays plain so it can be piped."""
        print_translation("Bitte gehen Sie nach Hause.")
        mock_print.assert_called_once_with("Bitte gehen Sie nach Hause.")

if __name__ == '__main__':
    unittest.main()
