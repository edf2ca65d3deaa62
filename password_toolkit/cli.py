#!/usr/bin/env python3
"""
Command-line interface for the Password Security Toolkit.

Runs the numbered demonstrations: 1 recovers a 6-digit password from its
hash, 2 checks single passwords, 3 checks a list of passwords, 4 generates a
password. Without arguments all four run in order.
"""

import argparse
import sys
import time
from typing import Any, Dict, List, Optional

from password_toolkit.core.cracker import HashCracker
from password_toolkit.core.generator import generate_password
from password_toolkit.core.strength import is_strong_password, check_passwords_list
from password_toolkit.utils.config import Config, verbosity_to_level
from password_toolkit.utils.exceptions import PasswordToolkitError
from password_toolkit.utils.logger import Logger

DEMO_ALIASES = {
    "1": "bruteforce",
    "2": "strength",
    "3": "batch",
    "4": "generate",
}
DEMO_ORDER = ["bruteforce", "strength", "batch", "generate"]


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="password-toolkit",
        description="Password Security Toolkit demonstrations",
    )

    parser.add_argument(
        "demos",
        nargs="*",
        metavar="DEMO",
        help="Demonstrations to run: 1/bruteforce, 2/strength, 3/batch, 4/generate "
             "(default: all, in order)",
    )

    input_group = parser.add_argument_group("Demonstration Inputs")
    input_group.add_argument("--target-hash", help="SHA-256 hex digest of a 6-digit password")
    input_group.add_argument(
        "--passwords", nargs="+", metavar="PASSWORD", help="Passwords to check"
    )
    input_group.add_argument("--length", type=int, help="Length of the generated password")

    performance_group = parser.add_argument_group("Performance Options")
    performance_group.add_argument(
        "-p",
        "--processes",
        type=int,
        help="Processes for the brute-force search (0 = CPU count - 1)",
    )
    performance_group.add_argument(
        "--progress", action="store_true", default=None, help="Show a progress bar while searching"
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "-v",
        "--verbosity",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging verbosity level",
    )
    output_group.add_argument("--log-file", help="Save log output to this file")
    output_group.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress log messages on the console"
    )

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument("--config", help="Path to configuration file")
    config_group.add_argument(
        "--save-config",
        action="store_true",
        help="Save current settings as default configuration",
    )

    return parser


def resolve_settings(args, config: Config) -> Dict[str, Any]:
    """Merge command-line arguments over configuration values"""
    def pick(arg_value, key):
        return arg_value if arg_value is not None else config.get(key)

    return {
        "target_hash": pick(args.target_hash, "target_hash"),
        "sample_passwords": pick(args.passwords, "sample_passwords"),
        "password_length": pick(args.length, "password_length"),
        "processes": pick(args.processes, "processes"),
        "show_progress": pick(args.progress, "show_progress"),
        "check_interval": config.get("check_interval", 10000),
        "verbosity": pick(args.verbosity, "verbosity"),
        "log_file": pick(args.log_file, "log_file"),
    }


def setup_logger(settings: Dict[str, Any], quiet: bool) -> Logger:
    """Set up logging from the resolved settings"""
    return Logger(
        log_file=settings["log_file"],
        level=verbosity_to_level(settings["verbosity"] or "info"),
        console=not quiet,
    )


def save_config_from_settings(settings: Dict[str, Any], config: Config) -> None:
    """Save the effective settings as the new default configuration"""
    config.update(settings)
    config.save()


def print_header(name: str) -> None:
    print(f"\n{name}\n" + "-" * 20)


def demo_bruteforce(settings: Dict[str, Any], logger) -> None:
    cracker = HashCracker(
        processes=settings["processes"],
        check_interval=settings["check_interval"],
        show_progress=settings["show_progress"],
        logger=logger,
    )
    password = cracker.crack(settings["target_hash"])
    print(password if password is not None else "No result found")


def demo_strength(settings: Dict[str, Any], logger) -> None:
    # The single-check demonstration tries "1234" where the list uses "Abc5"
    passwords = ["1234" if p == "Abc5" else p for p in settings["sample_passwords"]]
    width = max(len(p) for p in passwords) if passwords else 0
    for password in passwords:
        print(f"{password:<{width}} -> {is_strong_password(password)}")


def demo_batch(settings: Dict[str, Any], logger) -> None:
    results = check_passwords_list(settings["sample_passwords"])
    for password, strong in results.items():
        print(f"{password} -> {strong}")


def demo_generate(settings: Dict[str, Any], logger) -> None:
    print(f"Generated password: {generate_password(settings['password_length'])}")


DEMOS = {
    "bruteforce": demo_bruteforce,
    "strength": demo_strength,
    "batch": demo_batch,
    "generate": demo_generate,
}


def run_demos(tokens: List[str], settings: Dict[str, Any], logger) -> bool:
    """Run each requested demonstration in order

    Returns:
        False if any token did not name a demonstration
    """
    all_valid = True
    for token in tokens or DEMO_ORDER:
        name = DEMO_ALIASES.get(token, token.lower())
        demo = DEMOS.get(name)
        if demo is None:
            print(f"Invalid demonstration: {token}")
            logger.warning(f"Unknown demonstration selector: {token}")
            all_valid = False
            continue

        print_header(name)
        start_time = time.time()
        demo(settings, logger)
        logger.debug(f"Demonstration {name} took {time.time() - start_time:.2f} seconds")

    return all_valid


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the password toolkit CLI

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
    except PasswordToolkitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    settings = resolve_settings(args, config)
    logger = setup_logger(settings, args.quiet).get_logger()

    try:
        if args.save_config:
            save_config_from_settings(settings, config)
            logger.info(f"Configuration saved to {config.config_path}")

        return 0 if run_demos(args.demos, settings, logger) else 1

    except PasswordToolkitError as e:
        logger.error(f"Error: {str(e)}")
        return 1
    except KeyboardInterrupt:
        logger.info("\nProcess interrupted by user.")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
