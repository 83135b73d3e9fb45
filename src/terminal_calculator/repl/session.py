"""Interactive read-evaluate-print loop."""
import io
import sys
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from terminal_calculator.common.config import CalculatorSettings
from terminal_calculator.common.errors import EvaluationError, ExpressionParseError
from terminal_calculator.common.evaluator import ExpressionEvaluator
from terminal_calculator.common.logger import logger
from terminal_calculator.common.models import EvaluationResult, Expression
from terminal_calculator.common.parser import ExpressionParser


class CalculatorSession(BaseModel):
    """
    Interactive calculator session bound to three text streams.

    Lifecycle:
        - Prints the greeting
        - Reads one line per prompt and evaluates it
        - Reports parse and evaluation errors, then prompts again
        - Ends on the exit command, end of input or Ctrl+C
    """

    # Allow arbitrary types like io.TextIOBase
    model_config = ConfigDict(arbitrary_types_allowed=True)

    settings: CalculatorSettings = Field(default_factory=CalculatorSettings)
    stdin: io.TextIOBase = Field(default_factory=lambda: sys.stdin, description="Input stream")
    stdout: io.TextIOBase = Field(default_factory=lambda: sys.stdout, description="Result stream")
    stderr: io.TextIOBase = Field(default_factory=lambda: sys.stderr, description="Error stream")

    def _write(self, stream: io.TextIOBase, text: str) -> None:
        stream.write(text)
        stream.flush()

    def _read_line(self) -> Optional[str]:
        """
        Write the prompt and read one trimmed line.

        :return: Trimmed line, or None at end of input
        :rtype: Optional[str]
        """
        self._write(self.stdout, self.settings.prompt)
        line: str = self.stdin.readline()
        # readline() returns "" only at end of input; a blank line is "\n"
        if not line:
            return None
        return line.strip()

    def is_exit_command(self, line: str) -> bool:
        """Return True if the trimmed line is the exit command, ignoring case."""
        return line.strip().lower() == self.settings.exit_command

    def process_line(self, line: str) -> Optional[EvaluationResult]:
        """
        Parse and evaluate one line, reporting the outcome on the session streams.

        :param str line: Input line

        :return: The evaluation result, or None if the line was rejected
        :rtype: Optional[EvaluationResult]
        """
        try:
            expression: Expression = ExpressionParser.parse(line)
        except ExpressionParseError as exc:
            logger.warning(f"🧮❌ Could not parse {line!r}: {exc}")
            self._write(self.stderr, f"Invalid input:\n{exc}\nTry again\n")
            return None

        try:
            result: float = ExpressionEvaluator.evaluate(expression)
        except EvaluationError as exc:
            logger.warning(f"🧮❌ Could not evaluate {expression}: {exc}")
            self._write(self.stderr, f"Error evaluating expression:\n{exc}\nTry again\n")
            return None

        evaluation = EvaluationResult(expression=expression, result=result)
        logger.debug(f"🧮✅ {evaluation}")
        self._write(self.stdout, f"{evaluation}\n")
        return evaluation

    def run(self) -> None:
        """
        Run the loop until the user exits.

        :return: None
        """
        self._write(self.stdout, f"{self.settings.greeting}\n")
        logger.info("🧮 Session started")

        try:
            while True:
                line: Optional[str] = self._read_line()
                if line is None:
                    # End of input: finish the prompt line before saying goodbye
                    self._write(self.stdout, "\n")
                    break
                if self.is_exit_command(line):
                    break
                self.process_line(line)
        except KeyboardInterrupt:
            self._write(self.stdout, "\n")

        self._write(self.stdout, f"{self.settings.farewell}\n")
        logger.info("🧮 Session finished")
