"""
Тесты для CLI (rangecheck.cli.main)

Проверяет:
1. Сквозные сценарии: вывод интервала, contains, subset
2. Код выхода и одну строку ошибки для невалидного ввода
3. Разбор отрицательных чисел
4. Режим --json и уровни логирования
5. UsageError вместо стандартного выхода argparse
"""

import io
import json
import logging

import pytest

from rangecheck import __version__
from rangecheck.cli.main import (
    EXIT_FAILURE,
    EXIT_OK,
    CliConfig,
    UsageError,
    build_command,
    configure_logging,
    create_parser,
    main,
    reject_numeric_options,
)
from rangecheck.cli.commands import ContainsCommand, DisplayCommand, SubsetCommand
from rangecheck.core.domain import INVALID_RANGE_MESSAGE, NotANumber


# =============================================================================
# END-TO-END
# =============================================================================


class TestEndToEnd:
    """Сквозные сценарии"""

    def test_display(self, capsys) -> None:
        assert main(["1", "10"]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == "[1, 10]\n"
        assert captured.err == ""

    def test_contains_false(self, capsys) -> None:
        assert main(["1", "10", "contains", "15"]) == EXIT_OK
        assert capsys.readouterr().out == "[1, 10] contains 15: false\n"

    def test_contains_true(self, capsys) -> None:
        assert main(["1", "10", "contains", "5"]) == EXIT_OK
        assert capsys.readouterr().out == "[1, 10] contains 5: true\n"

    def test_subset_true(self, capsys) -> None:
        assert main(["5", "10", "subset", "1", "15"]) == EXIT_OK
        assert capsys.readouterr().out == "[5, 10] is subset of [1, 15]: true\n"

    def test_subset_false(self, capsys) -> None:
        assert main(["1", "10", "subset", "5", "15"]) == EXIT_OK
        assert capsys.readouterr().out == "[1, 10] is subset of [5, 15]: false\n"

    def test_negative_numbers(self, capsys) -> None:
        """Отрицательные операнды не принимаются за опции"""
        assert main(["-5", "5", "contains", "-3"]) == EXIT_OK
        assert capsys.readouterr().out == "[-5, 5] contains -3: true\n"

    def test_negative_subset(self, capsys) -> None:
        assert main(["-3", "-1", "subset", "-10", "0"]) == EXIT_OK
        assert capsys.readouterr().out == "[-3, -1] is subset of [-10, 0]: true\n"


# =============================================================================
# ERRORS
# =============================================================================


class TestErrors:
    """Ошибки: одна строка в stderr, exit 1, stdout пуст"""

    def test_invalid_range(self, capsys) -> None:
        assert main(["10", "1"]) == EXIT_FAILURE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == f"Error: {INVALID_RANGE_MESSAGE}\n"

    def test_invalid_container(self, capsys) -> None:
        assert main(["1", "10", "subset", "15", "5"]) == EXIT_FAILURE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert INVALID_RANGE_MESSAGE in captured.err

    def test_not_a_number(self, capsys) -> None:
        assert main(["abc", "10"]) == EXIT_FAILURE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: 'abc' is not a valid 32-bit signed integer\n"

    def test_out_of_int32(self, capsys) -> None:
        assert main(["0", "2147483648"]) == EXIT_FAILURE
        assert "not a valid 32-bit signed integer" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "argv,token",
        [
            (["-1e3", "10"], "-1e3"),
            (["1", "-2e1"], "-2e1"),
            (["1", "10", "contains", "-0x10"], "-0x10"),
            (["1", "10", "subset", "-1e2", "5"], "-1e2"),
        ],
    )
    def test_dash_prefixed_non_integer(self, capsys, argv: list[str], token: str) -> None:
        """Токен с '-' и цифрой — NotANumber, а не ошибка usage"""
        assert main(argv) == EXIT_FAILURE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == f"Error: '{token}' is not a valid 32-bit signed integer\n"

    def test_parse_error_before_range_error(self, capsys) -> None:
        """Нечисловой операнд обнаруживается раньше невалидного интервала"""
        assert main(["10", "1", "contains", "x"]) == EXIT_FAILURE
        assert "'x' is not a valid" in capsys.readouterr().err

    def test_unknown_subcommand(self, capsys) -> None:
        assert main(["1", "10", "union", "3", "4"]) == EXIT_FAILURE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "usage: rangecheck" in captured.err
        assert "Error: " in captured.err
        assert "invalid choice" in captured.err

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["1"],
            ["1", "10", "contains"],
            ["1", "10", "subset", "1"],
            ["1", "10", "contains", "5", "6"],
            ["1", "10", "subset", "1", "15", "20"],
        ],
    )
    def test_wrong_operand_count(self, capsys, argv: list[str]) -> None:
        assert main(argv) == EXIT_FAILURE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.rstrip("\n").splitlines()[-1].startswith("Error: ")


# =============================================================================
# OPTIONS
# =============================================================================


class TestOptions:
    """Тесты опций --json, --verbose, --version"""

    def test_json_display(self, capsys) -> None:
        assert main(["--json", "1", "10"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {
            "command": "display",
            "range": {"lower": 1, "upper": 10},
        }

    def test_json_contains(self, capsys) -> None:
        assert main(["--json", "1", "10", "contains", "15"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {
            "command": "contains",
            "range": {"lower": 1, "upper": 10},
            "value": 15,
            "result": False,
        }

    def test_json_subset(self, capsys) -> None:
        assert main(["--json", "5", "10", "subset", "1", "15"]) == EXIT_OK
        report = json.loads(capsys.readouterr().out)
        assert report["container"] == {"lower": 1, "upper": 15}
        assert report["result"] is True

    def test_json_errors_stay_text(self, capsys) -> None:
        assert main(["--json", "10", "1"]) == EXIT_FAILURE
        assert capsys.readouterr().err.startswith("Error: ")

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == f"rangecheck {__version__}"

    def test_verbose_logs_query(self, capsys) -> None:
        assert main(["-v", "1", "10", "contains", "5"]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == "[1, 10] contains 5: true\n"
        assert "rangecheck.cli.commands - INFO:contains [1, 10] 5 -> True" in captured.err

    def test_very_verbose_logs_parsed_command(self, capsys) -> None:
        assert main(["-vv", "1", "10"]) == EXIT_OK
        assert "DEBUG:parsed command" in capsys.readouterr().err

    def test_quiet_by_default(self, capsys) -> None:
        assert main(["1", "10"]) == EXIT_OK
        assert capsys.readouterr().err == ""


# =============================================================================
# BUILDING BLOCKS
# =============================================================================


class TestParser:
    """Тесты парсера и построения команд"""

    def test_usage_error_instead_of_exit(self) -> None:
        with pytest.raises(UsageError) as exc_info:
            create_parser().parse_args(["1"])
        assert exc_info.value.usage.startswith("usage: rangecheck")

    def test_build_display(self) -> None:
        args = create_parser().parse_args(["1", "10"])
        assert build_command(args) == DisplayCommand(lower=1, upper=10)

    def test_build_contains(self) -> None:
        args = create_parser().parse_args(["1", "10", "contains", "-4"])
        assert build_command(args) == ContainsCommand(lower=1, upper=10, value=-4)

    def test_build_subset(self) -> None:
        args = create_parser().parse_args(["5", "10", "subset", "1", "15"])
        assert build_command(args) == SubsetCommand(
            lower=5, upper=10, container_lower=1, container_upper=15
        )

    def test_numeric_option_check_accepts_integers_and_options(self) -> None:
        reject_numeric_options(["-v", "--json", "-5", "10", "contains", "-2147483648"])

    def test_numeric_option_check_stops_at_double_dash(self) -> None:
        reject_numeric_options(["--", "-1e3"])

    def test_build_rejects_non_numeric(self) -> None:
        args = create_parser().parse_args(["1", "ten"])
        with pytest.raises(NotANumber):
            build_command(args)


class TestCliConfig:
    """Тесты CliConfig"""

    def test_defaults(self) -> None:
        config = CliConfig.from_args(create_parser().parse_args(["1", "2"]))
        assert config == CliConfig(json_output=False, log_level="WARNING")

    @pytest.mark.parametrize("flags,level", [(["-v"], "INFO"), (["-vv"], "DEBUG"), (["-vvv"], "DEBUG")])
    def test_verbosity(self, flags: list[str], level: str) -> None:
        config = CliConfig.from_args(create_parser().parse_args([*flags, "1", "2"]))
        assert config.log_level == level

    def test_json_flag(self) -> None:
        config = CliConfig.from_args(create_parser().parse_args(["--json", "1", "2"]))
        assert config.json_output is True


class TestConfigureLogging:
    """Тесты настройки логирования"""

    def test_single_handler_after_repeated_calls(self) -> None:
        """Повторная настройка заменяет handler, а не добавляет второй"""
        first_stream, second_stream = io.StringIO(), io.StringIO()
        package_logger = configure_logging("INFO", first_stream)
        handler_count = len(package_logger.handlers)

        package_logger = configure_logging("DEBUG", second_stream)
        assert len(package_logger.handlers) == handler_count
        assert package_logger.level == logging.DEBUG

        logging.getLogger("rangecheck.cli.commands").debug("handler check")
        assert first_stream.getvalue() == ""
        assert "DEBUG:handler check" in second_stream.getvalue()
