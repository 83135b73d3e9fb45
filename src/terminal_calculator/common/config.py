"""Runtime settings for the calculator front ends."""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from terminal_calculator.common.operators import SUPPORTED_SYMBOLS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_greeting(exit_command: str) -> str:
    """Return the session banner naming the supported operators and the exit command."""
    return (
        "Simple Terminal Calculator\n"
        f"Supported operations: {' '.join(SUPPORTED_SYMBOLS)}\n"
        f"type {exit_command} to quit"
    )


class CalculatorSettings(BaseModel):
    """
    Settings shared by the interactive session and the CLI.

    Frozen so a running session cannot have its prompt or exit command
    changed underneath it. When no greeting is given, one is built from
    the exit command.
    """

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(default="> ", description="Prompt written before each input line")
    exit_command: str = Field(default="exit", description="Input that ends the session (case-insensitive)")
    greeting: Optional[str] = Field(default=None, description="Banner printed when the session starts")
    farewell: str = Field(default="Goodbye!", description="Message printed when the session ends")
    log_level: LogLevel = Field(default="WARNING", description="Level of the package logger")

    @field_validator("exit_command")
    def exit_command_must_not_be_empty(cls, v: str) -> str:
        """Ensure the exit command is a non-blank word and store it lower-cased."""
        if not v.strip():
            raise ValueError("Exit command cannot be empty")
        return v.strip().lower()

    @field_validator("log_level", mode="before")
    def normalise_log_level(cls, v):
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def default_greeting(self) -> "CalculatorSettings":
        """Fill in the greeting from the validated exit command."""
        if self.greeting is None:
            # Frozen models reject normal assignment, even inside validators
            object.__setattr__(self, "greeting", build_greeting(self.exit_command))
        return self
