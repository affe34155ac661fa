"""Coefficient tables of the two- and three-loop loop functions.

Above one loop every hierarchy writes its loop functions at the scale
Q = Mt as a finite sum of terms

    (c + a_1 K_1 + a_2 K_2 + ...) * s_1^p_1 * s_2^p_2 * ...

with a rational coefficient c, transcendental constants K_k taken from
the constant table, and symbols s_i supplied by the hierarchy:
logarithms, mass ratios, truncation flags and scheme switches. A table
maps each of the names in LOOP_FUNCTIONS onto a tuple of such terms, so
the data of a hierarchy can be exchanged without touching its code:

    table = CoefficientTable.from_mapping("h3", {
        "F1_2L": [[-16, "t1^2"], [0, "", {"z2": 16 / 3.}]],
        ...
    })
"""

from dataclasses import dataclass, fields
from typing import Dict, FrozenSet, Iterable, Mapping, Sequence, Tuple

from ..utils.constants import ConstantTable


LOOP_FUNCTIONS: Tuple[str, ...] = (
    "F1_2L", "F2_2L", "F3_2L",
    "F1_3L", "F2_3L", "F3_3L",
)

# Real-valued entries of the constant table that may multiply a term
CONSTANT_NAMES: FrozenSet[str] = frozenset(
    f.name for f in fields(ConstantTable) if f.type in (float, "float")
)


@dataclass(frozen=True)
class Term:
    """One monomial of a loop function."""

    coefficient: float = 0.0
    monomial: Tuple[Tuple[str, int], ...] = ()
    constants: Tuple[Tuple[str, float], ...] = ()

    def value(self, symbols: Mapping[str, float], constants: ConstantTable) -> float:
        result = self.coefficient
        for name, weight in self.constants:
            result += weight * getattr(constants, name)
        for name, power in self.monomial:
            result *= symbols[name] ** power
        return result


def term(coefficient: float = 0.0, monomial: str = "", **constants: float) -> Term:
    """Build a term from a monomial written as e.g. "xMst r^2 t1".

    Args:
        coefficient: Rational part of the coefficient
        monomial: Whitespace-separated symbols, each optionally raised to ^power
        **constants: Weights of constant-table entries added to the coefficient

    Returns:
        Term
    """
    factors = []
    for token in monomial.split():
        name, _, power = token.partition("^")
        factors.append((name, int(power) if power else 1))
    return Term(
        coefficient=float(coefficient),
        monomial=tuple(factors),
        constants=tuple(sorted((k, float(v)) for k, v in constants.items())),
    )


class CoefficientTable:
    """Terms of the loop functions of one hierarchy.

    Raises:
        ValueError: A loop function is missing or a term names an unknown constant
    """

    def __init__(self, name: str, terms: Mapping[str, Iterable[Term]]):
        missing = [f for f in LOOP_FUNCTIONS if f not in terms]
        if missing:
            raise ValueError(f"{name}: no terms for {missing}")
        unknown = sorted(set(terms) - set(LOOP_FUNCTIONS))
        if unknown:
            raise ValueError(f"{name}: unknown loop functions {unknown}")

        self.name = name
        self._terms: Dict[str, Tuple[Term, ...]] = {f: tuple(terms[f]) for f in LOOP_FUNCTIONS}

        for function, function_terms in self._terms.items():
            for t in function_terms:
                bad = [k for k, _ in t.constants if k not in CONSTANT_NAMES]
                if bad:
                    raise ValueError(f"{name}: {function} uses unknown constants {bad}")

    @classmethod
    def from_mapping(
        cls, name: str, data: Mapping[str, Iterable[Sequence]]
    ) -> "CoefficientTable":
        """Build a table from plain data, e.g. parsed from JSON.

        Every entry is [coefficient], [coefficient, monomial] or
        [coefficient, monomial, {constant: weight}].
        """
        terms = {}
        for function, entries in data.items():
            built = []
            for entry in entries:
                coefficient, monomial, constants = (list(entry) + ["", {}])[:3]
                built.append(term(coefficient, monomial, **constants))
            terms[function] = built
        return cls(name, terms)

    @property
    def symbols(self) -> FrozenSet[str]:
        """All symbol names used by the table."""
        return frozenset(
            s for ts in self._terms.values() for t in ts for s, _ in t.monomial
        )

    def terms(self, function: str) -> Tuple[Term, ...]:
        return self._terms[function]

    def evaluate(
        self,
        function: str,
        symbols: Mapping[str, float],
        constants: ConstantTable,
    ) -> float:
        """Sum the terms of one loop function.

        Raises:
            ValueError: A term uses a symbol that is not supplied
        """
        function_terms = self._terms[function]
        try:
            return sum(t.value(symbols, constants) for t in function_terms)
        except KeyError as exc:
            raise ValueError(
                f"{self.name}: {function} uses undefined symbol {exc.args[0]!r}"
            ) from None

    def __len__(self) -> int:
        return sum(len(ts) for ts in self._terms.values())

    def __repr__(self) -> str:
        return f"CoefficientTable({self.name!r}, terms={len(self)})"
