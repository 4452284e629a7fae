"""Calculator plugin — evaluate arithmetic expressions."""

import re

import structlog

from ..base import CalculationRecord, ExecutionResult, FailureKind, PluginDescriptor
from ..evaluator import EvaluationError, evaluate, sanitize

logger = structlog.get_logger()

INVALID_CHARACTERS_MESSAGE = (
    "Expression contains invalid characters. Only numbers and basic operators "
    "(+, -, *, /, parentheses) are allowed."
)


class CalculatorPlugin:
    """Evaluate mathematical expressions safely."""

    name: str = "calculator"
    description: str = "Evaluate mathematical expressions safely"
    invocation_hint: str = "/calc [expression]"
    exact_pattern: re.Pattern[str] = re.compile(r"^/calc\s+(.+)$", re.I)
    patterns: list[re.Pattern[str]] = [
        re.compile(r"(?:calculate|compute|what's|what is) (.+?)(?:\?|$)", re.I),
        re.compile(r"(?:solve|evaluate) (.+?)(?:\?|$)", re.I),
    ]

    async def execute(self, text: str, match: re.Match[str]) -> ExecutionResult:
        expression = (match.group(1) or "").strip()
        if not expression:
            return ExecutionResult.fail(
                FailureKind.MISSING_ARGUMENT, "Please provide a mathematical expression"
            )

        # Reject rather than evaluate a stripped version of the input.
        if sanitize(expression) != expression:
            logger.info("Rejected expression with invalid characters", expression=expression)
            return ExecutionResult.fail(FailureKind.VALIDATION, INVALID_CHARACTERS_MESSAGE)

        try:
            result = evaluate(expression)
        except EvaluationError as exc:
            logger.info("Expression evaluation failed", expression=expression, error=str(exc))
            return ExecutionResult.fail(
                FailureKind.EVALUATION, "Invalid mathematical expression"
            )

        return ExecutionResult.ok(CalculationRecord(expression_text=expression, result=result))

    def descriptor(self) -> PluginDescriptor:
        return PluginDescriptor(
            name=self.name,
            description=self.description,
            exact_pattern=self.exact_pattern,
            invocation_hint=self.invocation_hint,
            natural_language_patterns=tuple(self.patterns),
            executor=self.execute,
        )
