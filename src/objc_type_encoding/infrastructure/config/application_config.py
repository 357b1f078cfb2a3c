"""Configuration management for the command line tool."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

MAX_INDENT_WIDTH = 16


@dataclass
class Config:
    """Configuration for the type-encoding command line tool."""

    output_path: Optional[Path] = None
    verbose: bool = False
    log_dir: Path = Path("logs")
    indent: str = "    "

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object

        Raises:
            ValueError: If INDENT_WIDTH is not a non-negative integer
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        output_path_str = os.getenv("OUTPUT_PATH")
        verbose_str = os.getenv("VERBOSE", "false").lower()
        log_dir_str = os.getenv("LOG_DIR", "logs")
        indent_width_str = os.getenv("INDENT_WIDTH", "4")

        try:
            indent_width = int(indent_width_str)
        except ValueError as e:
            raise ValueError(f"INDENT_WIDTH must be an integer, got {indent_width_str!r}") from e
        if indent_width < 0:
            raise ValueError(f"INDENT_WIDTH must not be negative, got {indent_width}")

        return cls(
            output_path=Path(output_path_str) if output_path_str else None,
            verbose=verbose_str in ("true", "1", "yes"),
            log_dir=Path(log_dir_str),
            indent=" " * indent_width,
        )

    @classmethod
    def from_args(
        cls,
        output_path: Optional[Path] = None,
        verbose: Optional[bool] = None,
        indent_width: Optional[int] = None,
        env_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            output_path: File to write rendered output to (overrides env)
            verbose: Enable verbose output (overrides env)
            indent_width: Number of spaces per nesting level (overrides env)
            env_path: Optional path to .env file

        Returns:
            Config object
        """
        config = cls.from_env(env_path)

        if output_path is not None:
            config.output_path = output_path
        if verbose is not None:
            config.verbose = verbose
        if indent_width is not None:
            if indent_width < 0:
                raise ValueError(f"Indent width must not be negative: {indent_width}")
            config.indent = " " * indent_width

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if len(self.indent) > MAX_INDENT_WIDTH:
            raise ValueError(
                f"Indent width {len(self.indent)} exceeds maximum of {MAX_INDENT_WIDTH}"
            )

        if self.output_path is not None and self.output_path.is_dir():
            raise ValueError(f"Output path is a directory: {self.output_path}")

    def ensure_output_dir(self) -> None:
        """Create the parent directory of the output file if it doesn't exist."""
        if self.output_path is not None:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)

    def ensure_log_dir(self) -> None:
        """Create the log directory if it doesn't exist."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
