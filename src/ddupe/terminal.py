"""
Console implementation of the Terminal protocol over stdin/stdout/stderr.
"""
import sys
from typing import Optional, TextIO


class ConsoleTerminal:
    """Line-based, blocking console. Output is suppressed in quiet mode, prompts are not."""

    def __init__(
            self,
            stdin: Optional[TextIO] = None,
            stdout: Optional[TextIO] = None,
            stderr: Optional[TextIO] = None,
            quiet: bool = False
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.quiet = quiet

    def ask(self, prompt: str) -> str:
        self.stdout.write(f"{prompt} ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("End of input")
        return line.rstrip("\r\n")

    def show(self, message: str = "", error: bool = False) -> None:
        if self.quiet and not error:
            return
        stream = self.stderr if error else self.stdout
        print(message, file=stream)
