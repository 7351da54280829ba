"""LR(0) item sets and SLR(1) ACTION/GOTO tables built from a grammar."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .grammar import END_MARKER, Grammar


@dataclass(frozen=True, order=True)
class Item:
    """An LR(0) item: a rule index and the position of the dot in its right side."""

    rule_index: int
    dot_pos: int

    def advanced(self) -> Item:
        """The same item with the dot moved one symbol to the right."""
        return Item(self.rule_index, self.dot_pos + 1)


State = frozenset[Item]


class ActionKind(Enum):
    """What the parser does for a state and lookahead."""

    SHIFT = "shift"
    REDUCE = "reduce"
    ACCEPT = "accept"


@dataclass(frozen=True)
class Action:
    """An ACTION table entry: a target state for shifts, a rule index for reduces."""

    kind: ActionKind
    value: int = 0

    def __str__(self) -> str:
        if self.kind is ActionKind.SHIFT:
            return f"SHIFT {self.value}"
        if self.kind is ActionKind.REDUCE:
            return f"REDUCE by rule {self.value}"
        return "ACCEPT"


@dataclass(frozen=True)
class Conflict:
    """A reduce entry that replaced an existing entry in the ACTION table."""

    state: int
    symbol: str
    existing: Action
    replacement: Action

    def __str__(self) -> str:
        return f"Conflict at state {self.state} symbol {self.symbol}"


class SLRTable:
    """Canonical LR(0) collection with the SLR(1) ACTION and GOTO tables."""

    def __init__(self, grammar: Grammar) -> None:
        self.grammar = grammar
        self.states: list[State] = []
        self.goto_table: dict[int, dict[str, int]] = {}
        self.action_table: dict[int, dict[str, Action]] = {}
        self.conflicts: list[Conflict] = []

    def _symbol_after_dot(self, item: Item) -> str | None:
        rhs = self.grammar.rules[item.rule_index].rhs
        return rhs[item.dot_pos] if item.dot_pos < len(rhs) else None

    def closure(self, items: Iterable[Item]) -> State:
        """Add the start items of every non-terminal that appears after a dot."""
        result = set(items)
        pending = list(result)
        while pending:
            symbol = self._symbol_after_dot(pending.pop())
            if symbol not in self.grammar.non_terminals:
                continue
            for index, rule in enumerate(self.grammar.rules):
                if rule.lhs != symbol:
                    continue
                new_item = Item(index, 0)
                if new_item not in result:
                    result.add(new_item)
                    pending.append(new_item)
        return frozenset(result)

    def goto(self, items: Iterable[Item], symbol: str) -> State:
        """The state reached from ``items`` after reading ``symbol``; empty if none."""
        moved = {item.advanced() for item in items if self._symbol_after_dot(item) == symbol}
        return self.closure(moved) if moved else frozenset()

    def build(self) -> None:
        """Build the item sets and fill both tables.

        FIRST and FOLLOW sets are computed first if the grammar lacks them.
        """
        if not self.grammar.follow_sets:
            self.grammar.compute_first_sets()
            self.grammar.compute_follow_sets()
        self.states = []
        self.goto_table = {}
        self.action_table = {}
        self.conflicts = []
        self._build_states()
        self._fill_tables()

    def _build_states(self) -> None:
        start = self.closure({Item(0, 0)})
        self.states.append(start)
        known: dict[State, int] = {start: 0}

        for number, state in enumerate(self.states):
            symbols = sorted(
                {s for item in state if (s := self._symbol_after_dot(item)) is not None}
            )
            for symbol in symbols:
                target = self.goto(state, symbol)
                if not target:
                    continue
                index = known.get(target)
                if index is None:
                    index = len(self.states)
                    self.states.append(target)
                    known[target] = index
                self.goto_table.setdefault(number, {})[symbol] = index

    def _fill_tables(self) -> None:
        rules = self.grammar.rules
        for number, state in enumerate(self.states):
            for item in sorted(state):
                symbol = self._symbol_after_dot(item)
                if symbol is not None and symbol in self.grammar.terminals:
                    row = self.action_table.setdefault(number, {})
                    row[symbol] = Action(ActionKind.SHIFT, self.goto_table[number][symbol])
                elif symbol is None:
                    row = self.action_table.setdefault(number, {})
                    if item.rule_index == 0:
                        row[END_MARKER] = Action(ActionKind.ACCEPT, 0)
                        continue
                    reduce = Action(ActionKind.REDUCE, item.rule_index)
                    lhs = rules[item.rule_index].lhs
                    for lookahead in sorted(self.grammar.follow_sets.get(lhs, ())):
                        if lookahead in row:
                            self.conflicts.append(
                                Conflict(number, lookahead, row[lookahead], reduce)
                            )
                        row[lookahead] = reduce

    def format_states(self) -> str:
        """Listing of every state with its items, the dot marked by ``.``."""
        parts = ["\n=========== LR(0) STATES ===========\n"]
        for number, state in enumerate(self.states):
            parts.append(f"\nState {number}:\n")
            for item in sorted(state):
                rule = self.grammar.rules[item.rule_index]
                text = f"  {rule.lhs} -> "
                for position, symbol in enumerate(rule.rhs):
                    if position == item.dot_pos:
                        text += ". "
                    text += symbol + " "
                if item.dot_pos == len(rule.rhs):
                    text += "."
                parts.append(text + "\n")
        return "".join(parts)

    def format_action_table(self) -> str:
        """The ACTION table, one entry per line, grouped by state."""
        parts = ["\n=========== ACTION TABLE ===========\n"]
        for number, row in sorted(self.action_table.items()):
            parts.append(f"State {number}:\n")
            parts.extend(f"  [{symbol}] = {action}\n" for symbol, action in sorted(row.items()))
        return "".join(parts)

    def format_goto_table(self) -> str:
        """The GOTO table, one transition per line, grouped by state."""
        parts = ["\n=========== GOTO TABLE ===========\n"]
        for number, row in sorted(self.goto_table.items()):
            parts.append(f"State {number}:\n")
            parts.extend(f"  [{symbol}] -> State {target}\n" for symbol, target in sorted(row.items()))
        return "".join(parts)