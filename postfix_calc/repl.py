# repl.py

"""Interactive session: one infix expression per line, each on fresh stacks."""

import logging
from typing import Callable, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .calculator import calculate, render
from .config import Settings
from .errors import CalculatorError

logger = logging.getLogger(__name__)

PROMPT = '> '

HELP_TEXT = """
Infix Expression Evaluator help
-------------------------------
Enter an infix expression to see its postfix notation and value.

Supported:
  - Addition / subtraction:   1 + 2, 5 - 3
  - Multiplication / division: 4 * 2, 9 / 3
  - Exponentiation:           2 ^ 3  (equal precedence groups left to right)
  - Parentheses:              (1 + 2) * 3
  - Floating point:           3.5 + 1.5

Not supported: unary minus, functions, variables.

Commands:
  :help, help      show this help
  :history         show recent history
  :exit, :quit     leave the session (Ctrl-D also works)
"""


class REPL:
    """Read-Eval-Print Loop for the calculator."""

    def __init__(self, settings: Optional[Settings] = None,
                 read_line: Optional[Callable[[str], str]] = None):
        self.settings = settings or Settings()
        self.history_file = self.settings.history_file
        self._read_line = read_line
        self.running = True

    def _default_reader(self) -> Callable[[str], str]:
        session = PromptSession(history=FileHistory(self.history_file))
        return session.prompt

    def _run_command(self, cmd: str) -> str:
        cmd = cmd.lower()
        if cmd in {'exit', 'quit'}:
            self.running = False
            return "Goodbye!"
        if cmd == 'help':
            return HELP_TEXT.strip()
        if cmd == 'history':
            try:
                with open(self.history_file, 'r', encoding='utf-8') as f:
                    # FileHistory stores entries as "+line" after a timestamp comment
                    entries = [line[1:] for line in f.read().splitlines() if line.startswith('+')]
            except OSError as e:
                logger.warning("Could not read history file %s: %s", self.history_file, e)
                return f"Could not read history: {e}"
            return "\n".join(entries[-50:]) if entries else "(no history)"
        return f"Unknown command: {cmd}"

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Evaluate a single line (either command or expression). Returns (ok, output)."""
        s = line.strip()
        if s.startswith(':'):
            body = s[1:].strip()
            if not body:
                return False, "No command specified. Use :help for available commands."
            return True, self._run_command(body.split()[0])
        if s.lower() == 'help':
            return True, self._run_command('help')

        try:
            evaluation = calculate(s, self.settings)
        except CalculatorError as e:
            return False, f"Error: {e}"
        return True, render(evaluation)

    def repl_loop(self) -> None:
        """Prompt until :exit, :quit or end of input."""
        read_line = self._read_line or self._default_reader()
        print("Interactive Infix Evaluator. Type :help for help. Ctrl-D or :exit to quit.")
        while self.running:
            try:
                line = read_line(PROMPT)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                print("Exiting.")
                break
            if not line.strip():
                continue
            ok, out = self.evaluate_line(line)
            print(out)
