"""
Commands — закрытый набор операций CLI над ClosedRange

Каждая команда — frozen dataclass с уже разобранными операндами (int).
Набор фиксирован: DISPLAY, CONTAINS, SUBSET. Диспетчеризация выполняется
одной функцией execute(), иерархии обработчиков нет.

Порядок исполнения:
1. Конструирование целевого интервала [lower, upper]
2. Для SUBSET — конструирование интервала-контейнера
3. Запрос и форматирование одной строки результата

Любая InvalidRange прерывает исполнение до выполнения запроса.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict

from rangecheck.core.domain import ClosedRange


logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class CommandKind(str, Enum):
    """Вид операции"""

    DISPLAY = "display"
    CONTAINS = "contains"
    SUBSET = "subset"


# =============================================================================
# COMMANDS
# =============================================================================


@dataclass(frozen=True)
class DisplayCommand:
    """Вывести интервал [lower, upper]"""

    lower: int
    upper: int

    kind: ClassVar[CommandKind] = CommandKind.DISPLAY


@dataclass(frozen=True)
class ContainsCommand:
    """Проверить, принадлежит ли value интервалу"""

    lower: int
    upper: int
    value: int

    kind: ClassVar[CommandKind] = CommandKind.CONTAINS


@dataclass(frozen=True)
class SubsetCommand:
    """Проверить, является ли [lower, upper] подмножеством [container_lower, container_upper]"""

    lower: int
    upper: int
    container_lower: int
    container_upper: int

    kind: ClassVar[CommandKind] = CommandKind.SUBSET


Command = DisplayCommand | ContainsCommand | SubsetCommand


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CommandOutcome:
    """
    Результат исполнения команды.

    Attributes:
        kind: Вид выполненной операции
        target: Целевой интервал
        text: Строка для вывода в текстовом режиме
        value: Проверяемое значение (только CONTAINS)
        container: Интервал-контейнер (только SUBSET)
        result: Результат запроса (None для DISPLAY)
    """

    kind: CommandKind
    target: ClosedRange
    text: str
    value: int | None = None
    container: ClosedRange | None = None
    result: bool | None = None

    def to_report(self) -> Dict[str, Any]:
        """
        Машиночитаемый отчёт (контракт range_report).

        Ключи value/container/result присутствуют только для своих команд.
        """
        report: Dict[str, Any] = {
            "command": self.kind.value,
            "range": self.target.model_dump(),
        }
        if self.value is not None:
            report["value"] = self.value
        if self.container is not None:
            report["container"] = self.container.model_dump()
        if self.result is not None:
            report["result"] = self.result
        return report


# =============================================================================
# FORMATTING
# =============================================================================


def format_bool(flag: bool) -> str:
    """Булево значение в нижнем регистре: 'true' / 'false'"""
    return "true" if flag else "false"


def format_contains(target: ClosedRange, value: int, result: bool) -> str:
    return f"{target.render()} contains {value}: {format_bool(result)}"


def format_subset(target: ClosedRange, container: ClosedRange, result: bool) -> str:
    return f"{target.render()} is subset of {container.render()}: {format_bool(result)}"


# =============================================================================
# EXECUTION
# =============================================================================


def execute(command: Command) -> CommandOutcome:
    """
    Исполнение команды.

    Args:
        command: Команда с разобранными операндами

    Returns:
        CommandOutcome с текстом и данными для отчёта

    Raises:
        InvalidRange: Если целевой интервал или контейнер невалиден
        TypeError: Если передан объект, не являющийся командой
    """
    if not isinstance(command, (DisplayCommand, ContainsCommand, SubsetCommand)):
        raise TypeError(f"Unknown command: {command!r}")

    target = ClosedRange.from_bounds(command.lower, command.upper)

    if isinstance(command, DisplayCommand):
        logger.info("display %s", target)
        return CommandOutcome(kind=command.kind, target=target, text=target.render())

    if isinstance(command, ContainsCommand):
        result = target.contains(command.value)
        logger.info("contains %s %d -> %s", target, command.value, result)
        return CommandOutcome(
            kind=command.kind,
            target=target,
            text=format_contains(target, command.value, result),
            value=command.value,
            result=result,
        )

    container = ClosedRange.from_bounds(command.container_lower, command.container_upper)
    result = target.is_subset(container)
    logger.info("subset %s of %s -> %s", target, container, result)
    return CommandOutcome(
        kind=command.kind,
        target=target,
        text=format_subset(target, container, result),
        container=container,
        result=result,
    )
