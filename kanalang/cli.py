"""
Command-line interface for Kanalang.

- Translating English <-> Kana (argument, file, or stdin line by line)
- Showing the subject/verb/object decomposition of a sentence
- Listing the lexicon
- Chatting with an LLM in Kana
"""
import sys
import os
import argparse
import json
import logging

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kanalang.chat import ChatConfig, ChatError, KanaChatSession
from kanalang.errors import ParseError
from kanalang.lexicon import DEFAULT_ENTRIES, Category, build_lexicon, load_entries
from kanalang.logging_config import ProgressLogger, setup_logging
from kanalang.parser import parse_english, parse_kana, validate_kana
from kanalang.translator import Translator

logger = logging.getLogger(__name__)

DIRECTION_CHOICES = ['auto', 'to', 'en2k', 'en-kana', 'from', 'k2en', 'kana-en']


def build_translator(args) -> Translator:
    """Translator over the built-in lexicon plus any --lexicon file."""
    lexicon_path = getattr(args, 'lexicon', None) or os.environ.get('KANALANG_LEXICON')
    if not lexicon_path:
        return Translator()
    try:
        extra = load_entries(lexicon_path)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    return Translator(build_lexicon(list(DEFAULT_ENTRIES) + extra))


def cmd_translate(args):
    """Translate text between English and Kana."""
    translator = build_translator(args)

    if args.text:
        print(translator.translate(" ".join(args.text), args.direction))
        return

    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            lines = [line.rstrip('\n') for line in f]
        progress = ProgressLogger(total=len(lines), desc=f"Translating {args.file}", logger=logger)
        for line in lines:
            print(translator.translate(line, args.direction) if line.strip() else "")
            progress.update()
        progress.close()
        return

    # One translation per stdin line. Blank lines are skipped in auto mode and
    # printed as empty lines for an explicit direction.
    for line in sys.stdin:
        line = line.rstrip('\n')
        if line.strip():
            print(translator.translate(line, args.direction))
        elif args.direction != 'auto':
            print("")


def cmd_parse(args):
    """Show the role decomposition of a sentence."""
    lexicon = build_translator(args).lexicon
    text = " ".join(args.text) if args.text else input("Enter sentence: ").strip()

    try:
        if args.lang == 'kana':
            parsed = parse_kana(text, lexicon)
            if args.validate:
                validate_kana(parsed, lexicon)
        else:
            parsed = parse_english(text, lexicon)
    except ParseError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == 'json':
        print(json.dumps(parsed.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(f"Subject: {' '.join(parsed.subject)}")
        print(f"Verb: {' '.join(parsed.verb)}")
        print(f"Object: {' '.join(parsed.obj)}")
        print(f"Question: {'yes' if parsed.is_question else 'no'}")
        print(f"Negated: {'yes' if parsed.is_negated else 'no'}")


def cmd_lexicon(args):
    """List lexicon words with their meanings."""
    lexicon = build_translator(args).lexicon
    categories = [Category(args.category)] if args.category else list(Category)

    rows = [
        (word, category.value, lexicon.lookup_by_canonical(word))
        for category in categories
        for word in lexicon.words_in(category)
    ]

    if args.format == 'json':
        data = [{"kana": word, "type": cat, "english": list(meanings)} for word, cat, meanings in rows]
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return

    table = Table(title=f"Kana lexicon ({len(rows)} words)")
    table.add_column("Kana", style="bold green")
    table.add_column("Type", style="cyan")
    table.add_column("English")
    for word, cat, meanings in rows:
        table.add_row(word, cat, escape(", ".join(meanings)))
    Console().print(table)


def enable_line_editing() -> bool:
    """Turn on input() line editing and history for an interactive terminal."""
    if not sys.stdin.isatty():
        return False
    try:
        import readline  # noqa: F401
    except ImportError:
        logger.debug("readline not available, chat input has no history")
        return False
    return True


def cmd_chat(args):
    """Interactive chat with an LLM, translated through Kana."""
    console = Console()
    try:
        config = ChatConfig.from_env(args.endpoint, args.model, args.api_key, args.timeout)
    except ValueError as e:
        console.print(f"[red]error:[/red] {escape(str(e))}")
        console.print("Use --endpoint/--model/--api-key or KANALANG_ENDPOINT/KANALANG_MODEL/KANALANG_API_KEY.")
        sys.exit(1)

    session = KanaChatSession(config, translator=build_translator(args))
    enable_line_editing()

    console.print("[bold cyan]Kanalang Chat - Type 'quit' to exit[/bold cyan]")
    console.print("[dim]Your messages will be translated to kanalang before sending.[/dim]")
    console.print("[dim]LLM responses will be translated back to English.[/dim]")
    console.print()

    try:
        while True:
            try:
                line = input("you> ").strip()
            except KeyboardInterrupt:
                console.print("^C")
                continue
            except EOFError:
                console.print("^D")
                break

            if not line:
                continue
            if line in ('quit', 'exit'):
                console.print("[dim]Goodbye![/dim]")
                break

            try:
                turn = session.send(line)
            except ChatError as e:
                console.print(f"[red]error:[/red] {escape(str(e))}", highlight=False)
                console.print()
                continue

            console.print(f"[dim]\\[kanalang] {escape(turn.kana_input)}[/dim]")
            console.print(f"[dim]\\[kanalang] {escape(turn.kana_response)}[/dim]")
            console.print(f"[bold green]llm>[/bold green] {escape(turn.english_response)}", highlight=False)
            console.print()
    finally:
        session.close()


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='kanalang',
        description='kana - translate between English and the Kana constructed language',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Translate
  kanalang translate -d to "i want food"        # mi wile e moku
  kanalang translate -d from "mi toki pona"     # I speak good.
  echo "i love you" | kanalang translate -d to  # mi olin e sina

  # Decompose a sentence
  kanalang parse --lang kana --validate "ona li toki e ijo"

  # Browse the lexicon
  kanalang lexicon --category action

  # Chat with an OpenAI-compatible endpoint
  kanalang chat --endpoint http://localhost:8080/v1 --model default --api-key 123

Kana:
  ~120 simple words, SVO word order, particles li / e / pi, inspired by Toki Pona.
        """
    )
    parser.add_argument('--lexicon', help='JSON file with extra lexicon entries (env: KANALANG_LEXICON)')
    parser.add_argument('--debug', action='store_true', help='Verbose logging')
    parser.add_argument('--log-file', help='Also write logs to this file')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # --- translate command ---
    parser_translate = subparsers.add_parser('translate', help='Translate English <-> Kana')
    parser_translate.add_argument('text', nargs='*', help='Text to translate (default: stdin)')
    parser_translate.add_argument('-d', '--direction', default='auto', choices=DIRECTION_CHOICES,
                                  help='to/en2k/en-kana, from/k2en/kana-en, or auto (default)')
    parser_translate.add_argument('-f', '--file', help='Translate a file line by line')
    parser_translate.set_defaults(func=cmd_translate)

    # --- parse command ---
    parser_parse = subparsers.add_parser('parse', help='Show subject/verb/object of a sentence')
    parser_parse.add_argument('text', nargs='*', help='Sentence to parse')
    parser_parse.add_argument('--lang', choices=['kana', 'english'], default='kana',
                              help='Language of the sentence (default: kana)')
    parser_parse.add_argument('--validate', action='store_true',
                              help='Fail on words missing from the lexicon (kana only)')
    parser_parse.add_argument('--format', choices=['text', 'json'], default='text',
                              help='Output format (default: text)')
    parser_parse.set_defaults(func=cmd_parse)

    # --- lexicon command ---
    parser_lexicon = subparsers.add_parser('lexicon', help='List the Kana lexicon')
    parser_lexicon.add_argument('--category', choices=[c.value for c in Category],
                                help='Only list one word category')
    parser_lexicon.add_argument('--format', choices=['text', 'json'], default='text',
                                help='Output format (default: text)')
    parser_lexicon.set_defaults(func=cmd_lexicon)

    # --- chat command ---
    parser_chat = subparsers.add_parser('chat', help='Chat with an LLM in Kana')
    parser_chat.add_argument('--endpoint', help='OpenAI-compatible API endpoint (env: KANALANG_ENDPOINT)')
    parser_chat.add_argument('--model', help='Model name (env: KANALANG_MODEL)')
    parser_chat.add_argument('--api-key', help='API key (env: KANALANG_API_KEY)')
    parser_chat.add_argument('--timeout', type=float, help='Request timeout in seconds (default: 60)')
    parser_chat.set_defaults(func=cmd_chat)

    args = parser.parse_args(argv)

    setup_logging(log_file=args.log_file, debug=args.debug)

    # If no command specified, show help
    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == '__main__':
    main()
