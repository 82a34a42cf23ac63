import argparse
import os
import sys
from typing import Dict, Optional

if __name__ == "__main__" and not __package__:
    parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if parent_dir not in sys.path:
        sys.path.insert(0, parent_dir)
    import deepl_client
    __package__ = "deepl_client"

from .config import ConfigurationError, load_settings
from .deepl_lib.client import DeepL
from .deepl_lib.exceptions import DeeplError
from .deepl_lib.options import Formality, SplitSentences
from . import color_console as cc

__version__ = "1.0.0"

MISSING_TARGET_LANGUAGE_MESSAGE = "No value provided for required options '--target-language'"

SPLIT_SENTENCES_CHOICES: Dict[str, SplitSentences] = {
    "none": SplitSentences.NONE,
    "punctuation": SplitSentences.PUNCTUATION,
    "punctuation-and-newlines": SplitSentences.PUNCTUATION_AND_NEWLINES,
}


class _ArgumentParser(argparse.ArgumentParser):
    """An ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _validate_args(args: argparse.Namespace) -> None:
    """Performs validation checks on parsed command-line arguments."""
    if args.command == "translate" and not args.target_language:
        print(MISSING_TARGET_LANGUAGE_MESSAGE, file=sys.stderr)
        sys.exit(1)


def _create_client(args: argparse.Namespace) -> DeepL:
    """Builds the API client from the environment settings."""
    settings = load_settings()
    return DeepL(api_key=settings.api_key, api_base_url=settings.api_base_url, debug=args.debug)


def _formality(args: argparse.Namespace) -> Formality:
    if args.formality_more:
        return Formality.MORE
    if args.formality_less:
        return Formality.LESS
    return Formality.DEFAULT


def run_usage_information(deepl: DeepL, args: argparse.Namespace) -> None:
    """Prints the account's character quota and current usage."""
    usage = deepl.usage_information()
    print(f"Available characters per billing period: {usage.character_limit}")
    print(f"Characters already translated in the current billing period: {usage.character_count}")


def run_languages(deepl: DeepL, args: argparse.Namespace) -> None:
    """Prints the available source and target languages."""
    source_languages = deepl.source_languages()
    target_languages = deepl.target_languages()

    cc.print_info("DeepL can translate from the following source languages:")
    for language, name in source_languages.items():
        print(f"  {language.ljust(5)} ({name})")
    print()
    cc.print_info("DeepL can translate to the following target languages:")
    for language, name in target_languages.items():
        print(f"  {language.ljust(5)} ({name})")


def run_translate(deepl: DeepL, args: argparse.Namespace) -> None:
    """Translates the input file (or stdin) and writes the result."""
    if args.input_file:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    translations = deepl.translate(
        [text],
        target_language=args.target_language,
        source_language=args.source_language,
        split_sentences=SPLIT_SENTENCES_CHOICES.get(args.split_sentences),
        preserve_formatting=args.preserve_formatting,
        formality=_formality(args),
    )
    translated_content = "".join(translation.text for translation in translations)

    if args.output_file:
        with open(args.output_file, 'w', encoding='utf-8') as f:
            f.write(translated_content)
    else:
        cc.print_translation(translated_content)


COMMANDS = {
    "usage-information": run_usage_information,
    "languages": run_languages,
    "translate": run_translate,
}


def main_logic(args: argparse.Namespace) -> None:
    """Orchestrates the main application workflow after argument parsing."""
    _validate_args(args)
    deepl = _create_client(args)
    COMMANDS[args.command](deepl, args)


def build_parser() -> argparse.ArgumentParser:
    """Defines the command-line interface of the `deepl` tool."""
    parser = _ArgumentParser(
        prog="deepl",
        description="A command-line client for the DeepL translation API.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="The API key is read from the DEEPL_API_KEY environment variable.\n"
               "Set DEEPL_API_BASE_URL to use a different API host, e.g. https://api-free.deepl.com/v2.\n\n"
               "Example usage:\n"
               "  echo 'Please go home.' | deepl translate --source-language EN --target-language DE\n"
               "  deepl translate --target-language EN-US --input-file in.txt --output-file out.txt"
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument("--debug", action="store_true", help="Print API requests and responses to stderr.")

    # --debug is also accepted after the command; SUPPRESS leaves a flag given before it intact.
    common_parser = _ArgumentParser(add_help=False)
    common_parser.add_argument("--debug", action="store_true", default=argparse.SUPPRESS,
                               help="Print API requests and responses to stderr.")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.add_parser("usage-information", parents=[common_parser], help="Fetch account usage information")
    subparsers.add_parser("languages", parents=[common_parser],
                          help="Fetch information about available source and target languages")

    translate_parser = subparsers.add_parser("translate", parents=[common_parser], help="Translate text")
    translate_parser.add_argument("--source-language", metavar="DE", help="The source language to use (detected if omitted).")
    translate_parser.add_argument("--target-language", metavar="EN", help="The target language to use (required).")
    translate_parser.add_argument("--input-file", metavar="path/to/file", help="Read from this file rather than stdin.")
    translate_parser.add_argument("--output-file", metavar="path/to/file", help="Write to this file rather than stdout.")
    translate_parser.add_argument("--split-sentences", choices=list(SPLIT_SENTENCES_CHOICES), default=None,
                                  help="How the server splits the input into sentences.")

    formatting_group = translate_parser.add_mutually_exclusive_group()
    formatting_group.add_argument("--preserve-formatting", dest="preserve_formatting", action="store_true",
                                  help="Preserve source text formatting.")
    formatting_group.add_argument("--no-preserve-formatting", dest="preserve_formatting", action="store_false",
                                  help="Let the server adjust the formatting.")
    translate_parser.set_defaults(preserve_formatting=None)

    formality_group = translate_parser.add_mutually_exclusive_group()
    formality_group.add_argument("--formality-more", action="store_true", help="Translate more formally.")
    formality_group.add_argument("--formality-less", action="store_true", help="Translate less formally.")

    return parser


def main(argv: Optional[list] = None) -> None:
    """Parses the command line and runs the requested command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    try:
        main_logic(args)
    except (DeeplError, ConfigurationError, OSError, ValueError) as e:
        cc.print_error(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        cc.print_error(f"Error: unexpected failure: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
