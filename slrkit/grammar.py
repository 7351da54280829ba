"""Context-free grammars read from a text format, with FIRST and FOLLOW sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

EPSILON = "eps"
END_MARKER = "$"


@dataclass(frozen=True)
class Production:
    """A single rule ``lhs -> rhs``."""

    lhs: str
    rhs: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.lhs} -> {' '.join(self.rhs)}"


def _banner(title: str) -> str:
    line = "=" * 29
    return f"\n{line}\n   {title}\n{line}\n"


@dataclass
class Grammar:
    """An augmented grammar: rule 0 is ``S' -> S``."""

    rules: list[Production] = field(default_factory=list)
    non_terminals: set[str] = field(default_factory=set)
    terminals: set[str] = field(default_factory=set)
    start_symbol: str = ""
    first_sets: dict[str, set[str]] = field(default_factory=dict)
    follow_sets: dict[str, set[str]] = field(default_factory=dict)

    def first_of_symbol(self, symbol: str) -> set[str]:
        """Compute FIRST of one symbol directly from the rules."""
        return self._first(symbol, frozenset())

    def _first(self, symbol: str, visiting: frozenset[str]) -> set[str]:
        if symbol in self.terminals:
            return {symbol}
        if symbol in visiting:
            return set()
        visiting = visiting | {symbol}
        result: set[str] = set()
        for rule in self.rules:
            if rule.lhs != symbol:
                continue
            for position, sym in enumerate(rule.rhs):
                if sym == symbol:
                    break
                first = self._first(sym, visiting)
                result |= first - {EPSILON}
                if EPSILON not in first:
                    break
                if position == len(rule.rhs) - 1:
                    result.add(EPSILON)
        return result

    def compute_first_sets(self) -> dict[str, set[str]]:
        """Fill ``first_sets`` for every symbol and return it."""
        for nt in self.non_terminals:
            self.first_sets[nt] = set()
        for t in self.terminals:
            self.first_sets.setdefault(t, set()).add(t)

        changed = True
        while changed:
            changed = False
            for rule in self.rules:
                current = self.first_sets.setdefault(rule.lhs, set())
                new = self.first_of_symbol(rule.lhs) - current
                if new:
                    current |= new
                    changed = True
        return self.first_sets

    def compute_follow_sets(self) -> dict[str, set[str]]:
        """Fill ``follow_sets`` from ``first_sets`` and return it."""
        for nt in self.non_terminals:
            self.follow_sets[nt] = set()
        self.follow_sets.setdefault(self.start_symbol, set()).add(END_MARKER)

        changed = True
        while changed:
            changed = False
            for rule in self.rules:
                for position, sym in enumerate(rule.rhs):
                    if sym not in self.non_terminals:
                        continue
                    first_of_rest: set[str] = set()
                    rest_can_be_empty = True
                    for following in rule.rhs[position + 1 :]:
                        first = self.first_sets.get(following, set())
                        first_of_rest |= first - {EPSILON}
                        if EPSILON not in first:
                            rest_can_be_empty = False
                            break

                    follow = self.follow_sets.setdefault(sym, set())
                    additions = set(first_of_rest)
                    if rest_can_be_empty:
                        additions |= self.follow_sets.setdefault(rule.lhs, set())
                    additions -= follow
                    if additions:
                        follow |= additions
                        changed = True
        return self.follow_sets

    def format_rules(self) -> str:
        """Numbered listing of all rules."""
        lines = [f"{index}. {rule}\n" for index, rule in enumerate(self.rules)]
        return _banner("GRAMMAR RULES") + "".join(lines)

    def format_symbols(self) -> str:
        """Listing of non-terminals, terminals and the start symbol."""
        non_terminals = "".join(f"  {s}\n" for s in sorted(self.non_terminals))
        terminals = "".join(f"  {s}\n" for s in sorted(self.terminals))
        return (
            _banner("NON-TERMINALS")
            + non_terminals
            + _banner("TERMINALS")
            + terminals
            + f"\nStart Symbol: {self.start_symbol}\n"
        )

    def format_first_sets(self) -> str:
        """FIRST sets of the non-terminals, one per line."""
        lines = [
            f"FIRST({symbol}) = {_format_set(values)}\n"
            for symbol, values in sorted(self.first_sets.items())
            if symbol in self.non_terminals
        ]
        return _banner("FIRST SETS") + "".join(lines)

    def format_follow_sets(self) -> str:
        """All FOLLOW sets, one per line."""
        lines = [
            f"FOLLOW({symbol}) = {_format_set(values)}\n"
            for symbol, values in sorted(self.follow_sets.items())
        ]
        return _banner("FOLLOW SETS") + "".join(lines)


def _format_set(values: set[str]) -> str:
    return "{ " + "".join(f"{v} " for v in sorted(values)) + "}"


def parse_grammar(text: str) -> Grammar:
    """Build an augmented grammar from rule lines such as ``E -> E + T | T``.

    Blank lines, lines starting with ``#`` and lines without ``->`` are ignored.
    The left side of the first rule is the start symbol.
    """
    rules: list[Production] = []
    start: str | None = None

    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        lhs, arrow, rhs = line.partition("->")
        if not arrow:
            continue
        lhs, rhs = lhs.strip(), rhs.strip()
        if "|" in rhs:
            rules.extend(
                Production(lhs, tuple(option.split()))
                for option in rhs.split("|")
                if option.strip()
            )
        else:
            rules.append(Production(lhs, tuple(rhs.split())))
        if start is None:
            start = lhs

    if start is None:
        raise ValueError("grammar defines no rules")

    non_terminals = {rule.lhs for rule in rules}
    terminals = {sym for rule in rules for sym in rule.rhs if sym not in non_terminals}
    augmented = Production(start + "'", (start,))
    return Grammar(
        rules=[augmented, *rules],
        non_terminals=non_terminals,
        terminals=terminals,
        start_symbol=augmented.lhs,
    )


def load_grammar(path: str | Path) -> Grammar:
    """Read a grammar file; raises OSError if it cannot be opened."""
    return parse_grammar(Path(path).read_text(encoding="utf-8"))