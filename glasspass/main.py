from __future__ import annotations

import sys

from getpass import getpass

from .core.config import GenerationConfig
from .core.exceptions import InvalidConfiguration
from .core.password_generator import generate
from .core.settings import DEFAULT_LENGTH, configure_logging
from .core.strength import StrengthReport, evaluate


def ask_yes_no(prompt: str, default: bool = True) -> bool:
    """Ask a y/n question; an empty answer returns the default."""
    suffix = ' (Y/n): ' if default else ' (y/N): '
    answer = input(prompt + suffix).strip().lower()

    if not answer:
        return default
    return answer.startswith('y')


def collect_config() -> GenerationConfig:
    """Prompt for length and character classes and build a config."""
    length_input = input(f'Length (default {DEFAULT_LENGTH}): ').strip()
    length = DEFAULT_LENGTH

    if length_input.isdecimal():
        length = int(length_input)

    return GenerationConfig(
        length=length,
        include_lowercase=ask_yes_no('Include lowercase letters?'),
        include_uppercase=ask_yes_no('Include uppercase letters?'),
        include_numbers=ask_yes_no('Include numbers?'),
        include_symbols=ask_yes_no('Include symbols?'),
    )


def print_report(report: StrengthReport) -> None:
    """Display a strength report."""
    print(f'Strength: {report.strength} (score {report.score})')
    for message in report.feedback:
        print(f' - {message}')


def action_generate_password() -> None:
    """Generate a password and display it to the user."""
    config = collect_config()

    try:
        password = generate(config)
    except InvalidConfiguration as exc:
        print(f'[!] {exc}\n')
        return

    print('Generated password:', password)
    print_report(evaluate(password))
    print()


def action_evaluate_password() -> None:
    """Score a password typed by the user."""
    password = getpass('Password to evaluate: ')
    print_report(evaluate(password))
    print()


def show_menu() -> str:
    """Print the main menu and return the user's choice."""
    print('===== GlassPass =====')
    print('1) Generate password')
    print('2) Evaluate password strength')
    print('3) Quit')
    return input('Select an option: ').strip()


def main() -> None:
    """Main entry point for the CLI."""
    configure_logging()

    while True:
        choice = show_menu()
        print()

        if choice == '1':
            action_generate_password()
        elif choice == '2':
            action_evaluate_password()
        elif choice == '3':
            print('Goodbye.')
            sys.exit(0)
        else:
            print('Invalid selection.\n')


if __name__ == '__main__':
    main()
