"""Table-driven shift-reduce parsing with a recorded trace."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import takewhile

from .grammar import END_MARKER
from .table import ActionKind, SLRTable
from .tokens import Token, TokenType, map_token

_WIDTH = 25


@dataclass(frozen=True)
class ParseStep:
    """One row of the trace: symbol stack, remaining input and the action taken."""

    stack: tuple[str, ...]
    remaining: tuple[str, ...]
    action: str


def _spaced(symbols: Iterable[str]) -> str:
    return "".join(f"{s} " for s in symbols)


@dataclass
class ParseResult:
    """Outcome of a parse and every step taken to reach it."""

    accepted: bool
    steps: list[ParseStep] = field(default_factory=list)

    def format_trace(self) -> str:
        """The trace as an aligned table followed by the verdict."""
        rule = "=" * 45
        parts = [
            f"\n{rule}\n                PARSE TRACE\n{rule}\n",
            f"{'STACK':<{_WIDTH}}{'INPUT':<{_WIDTH}}{'ACTION':<20}\n",
            "-" * 61 + "\n",
        ]
        parts.extend(
            f"{_spaced(step.stack):<{_WIDTH}}{_spaced(step.remaining):<{_WIDTH}}{step.action}\n"
            for step in self.steps
        )
        if self.accepted:
            parts.append("\n ACCEPTED: Input is valid\n")
        else:
            parts.append("\n REJECTED: Invalid input\n")
        return "".join(parts)


class Parser:
    """Runs tokens through an SLR table."""

    def __init__(self, table: SLRTable) -> None:
        self.table = table

    def parse(self, tokens: Iterable[Token]) -> ParseResult:
        """Parse tokens up to END_OF_FILE and return the verdict with its trace."""
        symbols = [
            map_token(tok)
            for tok in takewhile(lambda t: t.type is not TokenType.END_OF_FILE, tokens)
        ]
        symbols.append(END_MARKER)

        states = [0]
        stack = [END_MARKER]
        position = 0
        steps: list[ParseStep] = []
        rules = self.table.grammar.rules

        while True:
            lookahead = symbols[position]
            snapshot = (tuple(stack), tuple(symbols[position:]))
            action = self.table.action_table.get(states[-1], {}).get(lookahead)

            if action is None:
                steps.append(ParseStep(*snapshot, "ERROR"))
                return ParseResult(False, steps)

            if action.kind is ActionKind.SHIFT:
                steps.append(ParseStep(*snapshot, f"SHIFT {action.value}"))
                stack.append(lookahead)
                states.append(action.value)
                position += 1
            elif action.kind is ActionKind.REDUCE:
                rule = rules[action.value]
                steps.append(
                    ParseStep(*snapshot, f"REDUCE {rule.lhs} -> {_spaced(rule.rhs)}")
                )
                keep = len(states) - len(rule.rhs)
                del states[keep:]
                del stack[len(stack) - len(rule.rhs):]
                stack.append(rule.lhs)
                states.append(self.table.goto_table[states[-1]][rule.lhs])
            else:
                steps.append(ParseStep(*snapshot, "ACCEPT"))
                return ParseResult(True, steps)