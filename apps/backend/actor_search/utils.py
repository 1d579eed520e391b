"""
Utility functions for Actor Search.

Provides logging setup and console display helpers.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logger(
    name: str,
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    console_output: bool = True,
) -> logging.Logger:
    """
    Set up a logger with file and optional console handlers.

    Args:
        name: Logger name (used for both logger and log file)
        log_dir: Directory for log files (defaults to ./logs)
        level: Logging level
        console_output: Whether to also log to console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_dir is None:
        log_dir = Path.cwd() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / f"{name}_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)  # Only warnings and above to console
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def print_header(text: str, char: str = "=", width: int = 60) -> None:
    """Print a header with decorative lines."""
    print(char * width)
    print(text.center(width))
    print(char * width)


def print_section(text: str, char: str = "-", width: int = 60) -> None:
    """Print a section divider with text."""
    print(f"\n{char * width}")
    print(text)
    print(char * width)


def print_key_value(key: str, value: str, key_width: int = 20) -> None:
    """Print a key-value pair with aligned formatting."""
    print(f"{key:<{key_width}}: {value}")


def get_user_choice(
    prompt: str,
    options: list,
    allow_cancel: bool = True,
) -> Optional[int]:
    """
    Get user choice from numbered options.

    Args:
        prompt: Prompt message
        options: List of option descriptions
        allow_cancel: Whether to allow cancellation (0 or empty)

    Returns:
        Selected index (0-based) or None if cancelled
    """
    print(f"\n{prompt}")
    for i, option in enumerate(options, 1):
        print(f"  [{i}] {option}")
    if allow_cancel:
        print("  [0] Cancel")
    print()

    while True:
        try:
            response = input("Enter your choice: ").strip()
            if not response and allow_cancel:
                return None
            if response == "0" and allow_cancel:
                return None

            choice = int(response)
            if 1 <= choice <= len(options):
                return choice - 1
            print(f"Please enter a number between 1 and {len(options)}")
        except ValueError:
            print("Please enter a valid number")
        except EOFError:
            return None
