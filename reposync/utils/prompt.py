"""Operator confirmation prompt."""

import sys
import logging

logger = logging.getLogger('reposync')


def ask_confirmation(question: str) -> bool:
    """Ask a yes/no question, defaulting to no.

    When stdin is piped, the answer is read from /dev/tty instead.

    Args:
        question: Question to display

    Returns:
        True only if the operator answered 'y'
    """
    prompt = f"{question} [y/N]: "
    try:
        if sys.stdin.isatty():
            response = input(prompt)
        else:
            with open('/dev/tty', 'r') as tty:
                print(prompt, end='', flush=True)
                response = tty.readline()
    except EOFError:
        response = ""
    except OSError:
        logger.warning("No TTY available for confirmation. Use --sync to pull without asking.")
        response = ""
    return response.strip().lower() == 'y'
