"""
rangecheck CLI — командная строка для операций над замкнутым интервалом.

Использование:
    rangecheck <lower> <upper>                         — вывести интервал
    rangecheck <lower> <upper> contains <value>        — проверка принадлежности
    rangecheck <lower> <upper> subset <lower2> <upper2> — проверка подмножества

Опции (до подкоманды):
    --json          — вывести результат одной JSON-строкой (контракт range_report)
    -v, --verbose   — подробный лог в stderr (-v INFO, -vv DEBUG)

Программа либо печатает одну строку результата (exit 0), либо одну строку
ошибки в stderr (exit 1). Частичного результата не бывает.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from typing import Final, Optional, TextIO

from rangecheck import __version__
from rangecheck.cli.commands import (
    Command,
    CommandKind,
    ContainsCommand,
    DisplayCommand,
    SubsetCommand,
    execute,
)
from rangecheck.core.contracts import validate_range_report
from rangecheck.core.domain import InvalidRange, NotANumber, parse_int32


logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================
EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
LOG_FORMAT: Final[str] = "%(name)s - %(levelname)s:%(message)s"

# Логгер пакета, к которому CLI подключает свой handler
PACKAGE_LOGGER: Final[str] = "rangecheck"

# Handler, установленный последним вызовом configure_logging
_cli_handler: Optional[logging.Handler] = None


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UsageError(Exception):
    """
    Неверное число аргументов или неизвестная подкоманда.

    Attributes:
        usage: Строка usage парсера, в котором возникла ошибка
    """

    def __init__(self, message: str, usage: str = ""):
        self.usage = usage
        super().__init__(message)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CliConfig:
    """
    Конфигурация запуска CLI.

    Строится из разобранных опций; переменных окружения и файлов нет.
    """

    json_output: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "CliConfig":
        if args.verbose >= 2:
            level = "DEBUG"
        elif args.verbose == 1:
            level = "INFO"
        else:
            level = DEFAULT_LOG_LEVEL
        return cls(json_output=args.json, log_level=level)


# =============================================================================
# LOGGING
# =============================================================================


def configure_logging(level: str, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Подключение stderr handler к логгеру пакета.

    Повторный вызов заменяет handler, а не добавляет второй.
    """
    global _cli_handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _cli_handler is not None:
        package_logger.removeHandler(_cli_handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger.addHandler(handler)
    _cli_handler = handler
    package_logger.setLevel(level)
    return package_logger


# =============================================================================
# ARGUMENT PARSING
# =============================================================================


class RangeArgumentParser(argparse.ArgumentParser):
    """
    ArgumentParser, превращающий ошибки разбора в UsageError.

    Стандартный argparse завершает процесс с кодом 2; здесь код выхода
    определяет main().
    """

    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message, usage=self.format_usage())


def create_parser() -> RangeArgumentParser:
    """Create the CLI argument parser."""
    parser = RangeArgumentParser(
        prog="rangecheck",
        description="Operations on a closed integer range [lower, upper]",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as a single JSON object",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log to stderr (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument("lower", help="lower bound (inclusive)")
    parser.add_argument("upper", help="upper bound (inclusive)")

    subparsers = parser.add_subparsers(
        title="commands",
        description="Without a command the range itself is printed",
        dest="command",
    )

    contains_parser = subparsers.add_parser(
        CommandKind.CONTAINS.value,
        help="check whether a value lies in the range",
    )
    contains_parser.add_argument("value", help="value to test")

    subset_parser = subparsers.add_parser(
        CommandKind.SUBSET.value,
        help="check whether the range is a subset of another range",
    )
    subset_parser.add_argument("container_lower", help="lower bound of the containing range")
    subset_parser.add_argument("container_upper", help="upper bound of the containing range")

    return parser


def build_command(args: argparse.Namespace) -> Command:
    """
    Разбор операндов в команду.

    Все токены разбираются до конструирования интервалов, поэтому NotANumber
    всегда возникает раньше InvalidRange.

    Raises:
        NotANumber: Если какой-либо операнд не 32-битное целое
    """
    lower = parse_int32(args.lower)
    upper = parse_int32(args.upper)

    if args.command == CommandKind.CONTAINS.value:
        return ContainsCommand(lower=lower, upper=upper, value=parse_int32(args.value))

    if args.command == CommandKind.SUBSET.value:
        return SubsetCommand(
            lower=lower,
            upper=upper,
            container_lower=parse_int32(args.container_lower),
            container_upper=parse_int32(args.container_upper),
        )

    return DisplayCommand(lower=lower, upper=upper)


def reject_numeric_options(argv: list[str]) -> None:
    """
    Проверка токенов вида '-1e3' или '-1.5' до разбора argparse.

    argparse считает позиционными только токены вида '-5'; остальные
    токены с '-' и цифрой он принял бы за неизвестную опцию.

    Raises:
        NotANumber: Если такой токен не является 32-битным целым
    """
    for token in argv:
        if token == "--":
            break
        if len(token) > 1 and token[0] == "-" and (token[1].isdigit() or token[1] == "."):
            parse_int32(token)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================


def run(argv: Optional[list[str]] = None) -> str:
    """
    Разбор аргументов и исполнение команды.

    Returns:
        Строка для вывода в stdout

    Raises:
        UsageError: Ошибка разбора аргументов
        NotANumber: Операнд не является 32-битным целым
        InvalidRange: Невалидный интервал (целевой или контейнер)
    """
    if argv is None:
        argv = sys.argv[1:]
    reject_numeric_options(argv)

    parser = create_parser()
    args = parser.parse_args(argv)
    config = CliConfig.from_args(args)
    configure_logging(config.log_level)

    command = build_command(args)
    logger.debug("parsed command %r", command)

    outcome = execute(command)

    if config.json_output:
        report = outcome.to_report()
        validate_range_report(report)
        return json.dumps(report, ensure_ascii=False)

    return outcome.text


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    try:
        output = run(argv)
    except UsageError as e:
        # Логирование ещё не настроено: ошибка возникла при разборе опций
        if e.usage:
            print(e.usage, end="", file=sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except (NotANumber, InvalidRange) as e:
        logger.info("rejected input: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
