"""Exceptions raised by argquote."""


class ArgquoteError(Exception):
    """Base class for every error raised by argquote."""


class StringificationError(ArgquoteError, TypeError):
    """A value could not be converted into a string."""

    def __init__(self) -> None:
        super().__init__(
            "argquote requires strings or values that can be converted into a string"
        )


class ShellConfigError(ArgquoteError, ValueError):
    """The escaping configuration could not be resolved."""


class UnsupportedShellError(ShellConfigError):
    def __init__(self, shell_name: str) -> None:
        self.shell_name = shell_name
        super().__init__(f"argquote does not support the shell {shell_name}")


class ExecutableNotFoundError(ShellConfigError):
    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(f"No executable could be found for {executable}")


class InvalidOptionsError(ShellConfigError):
    """Options failed validation."""


class QuotingUnsupportedError(ArgquoteError, RuntimeError):
    def __init__(self) -> None:
        super().__init__("Quoting is not supported when no shell is used")
