import sys

import colorama

colorama.init()

# Define color constants
COLOR_ERROR = colorama.Fore.RED
COLOR_INFO = colorama.Fore.CYAN
COLOR_RESET = colorama.Style.RESET_ALL

IS_TTY = sys.stdout.isatty()


def _print_colored(message: str, color: str, file=None):
    """Internal function to print a message with a specified color."""
    if file is None:
        file = sys.stdout
    if IS_TTY:
        print(f"{color}{message}{COLOR_RESET}", file=file)
    else:
        print(message, file=file)


def print_error(message: str):
    """Prints a message in the 'error' color (red) to stderr."""
    _print_colored(message, COLOR_ERROR, file=sys.stderr)


def print_info(message: str):
    """Prints a message in the 'info' color (cyan)."""
    _print_colored(message, COLOR_INFO)


def print_translation(content: str):
    """Prints translated content without decoration so it can be piped."""
    print(content)
