# core/truth_table.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Exhaustive enumeration of variable assignments for a formula

"""Truth table generation by exhaustive enumeration.

`TruthTable` takes the root of an expression tree and its ordered variable
set, then evaluates the tree for all 2^N assignments. Row ``i`` assigns
``variables[k]`` the value of bit ``k`` of ``i``, so the first row is all
false, the last row all true, and the rows in between follow binary counting
with the first variable as the least significant bit.

Rows are produced lazily and strictly in order. Each row is reported as soon
as it has been evaluated: any failed implications first, then the row itself.

Evaluation errors are handled according to the table's `ErrorPolicy`. The
default aborts the whole run on the first error; ``SKIP`` records the error
on the row, reports it and moves on to the next assignment.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from logic.evaluator import Evaluator, FailedImplication
from logic.exceptions import EvaluationError
from logic.node import Node, format_bool, free_variables
from utils.logger import get_logger
from .assignment import Assignment

ROW_SEPARATOR = "  \t "


class ErrorPolicy(Enum):
    """What the driver does when a row cannot be evaluated."""

    ABORT = auto()  # re-raise and stop the run
    SKIP = auto()  # record the error on the row and continue


@dataclass(frozen=True)
class TruthTableRow:
    """One evaluated assignment.

    Attributes:
        index: Row counter the assignment was derived from
        assignment: Variable values of this row
        result: Truth value of the formula, None if evaluation failed
        diagnostics: Failed implications encountered while evaluating
        error: Evaluation error recorded under ``ErrorPolicy.SKIP``
    """

    index: int
    assignment: Assignment
    result: Optional[bool]
    diagnostics: Tuple[FailedImplication, ...] = ()
    error: Optional[EvaluationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class TruthTableSummary:
    """Counts over a complete truth table."""

    rows: int
    true_rows: int
    false_rows: int
    error_rows: int
    failed_implications: int

    @property
    def is_tautology(self) -> bool:
        return self.error_rows == 0 and self.false_rows == 0

    @property
    def is_contradiction(self) -> bool:
        return self.error_rows == 0 and self.true_rows == 0

    @property
    def is_contingent(self) -> bool:
        return self.true_rows > 0 and self.false_rows > 0

    @property
    def classification(self) -> str:
        if self.is_tautology:
            return "tautology"
        if self.is_contradiction:
            return "contradiction"
        if self.is_contingent:
            return "contingent"
        return "undetermined"


def format_row(row: TruthTableRow, label: str) -> str:
    """Render a row as a single output line.

    Args:
        row: Evaluated row
        label: Display label of the formula

    Returns:
        ``p=false q=true  \\t Evaluating "label" :: true``, or the error
        message in place of the result for rows that failed
    """
    outcome = format_bool(row.result) if row.ok else f"error: {row.error}"
    return f'{row.assignment}{ROW_SEPARATOR}Evaluating "{label}" :: {outcome}'


@dataclass
class TruthTable:
    """Evaluates a formula over every assignment of its variables.

    Attributes:
        root: Root node of the formula
        variables: Ordered variable set; discovered from ``root`` when omitted
        label: Formula label used in reports; defaults to ``root.label``
        error_policy: Handling of rows whose evaluation fails
        emit: Callable receiving each output line; the project logger
            is used when omitted
    """

    root: Node
    variables: Optional[Sequence[str]] = None
    label: Optional[str] = None
    error_policy: ErrorPolicy = ErrorPolicy.ABORT
    emit: Optional[Callable[[str], None]] = field(default=None, repr=False)

    def __post_init__(self):
        if self.variables is None:
            self.variables = free_variables(self.root)
        else:
            self.variables = list(self.variables)
            if len(set(self.variables)) != len(self.variables):
                raise ValueError(f"Variable set contains duplicates: {self.variables}")

        if self.label is None:
            self.label = self.root.label

        get_logger().debug(
            f"Truth table for {self.label!r} over {len(self.variables)} variable(s)"
        )

    @property
    def row_count(self) -> int:
        """Number of rows the table has (2 to the power of the variable count)."""
        return 1 << len(self.variables)

    def assignments(self) -> Iterator[Assignment]:
        """Yield every assignment in binary counting order."""
        for counter in range(self.row_count):
            yield Assignment.from_counter(self.variables, counter)

    def rows(self) -> Iterator[TruthTableRow]:
        """Evaluate and report the rows one after another.

        Yields:
            Each evaluated row, after it has been reported

        Raises:
            EvaluationError: First evaluation failure under ``ErrorPolicy.ABORT``
        """
        logger = get_logger()
        logger.table_start(self.label, self.variables)

        for counter, assignment in enumerate(self.assignments()):
            diagnostics: List[FailedImplication] = []
            evaluator = Evaluator(diagnostics.append)

            try:
                result = evaluator.evaluate(self.root, assignment)
                row = TruthTableRow(counter, assignment, result, tuple(diagnostics))

            except EvaluationError as exc:
                if self.error_policy is ErrorPolicy.ABORT:
                    logger.debug(f"Aborting at row {counter} ({assignment}): {exc}")
                    raise
                logger.debug(f"Skipping row {counter} ({assignment}): {exc}")
                row = TruthTableRow(counter, assignment, None, tuple(diagnostics), exc)

            self._report(row)
            yield row

    def run(self) -> List[TruthTableRow]:
        """Evaluate every row and return them in order."""
        return list(self.rows())

    def summary(self, rows: Optional[Sequence[TruthTableRow]] = None) -> TruthTableSummary:
        """Summarize a table, running it first when no rows are given.

        Args:
            rows: Previously produced rows of this table

        Returns:
            Row counts and failed implication total
        """
        if rows is None:
            rows = self.run()

        return TruthTableSummary(
            rows=len(rows),
            true_rows=sum(1 for r in rows if r.ok and r.result),
            false_rows=sum(1 for r in rows if r.ok and not r.result),
            error_rows=sum(1 for r in rows if not r.ok),
            failed_implications=sum(len(r.diagnostics) for r in rows),
        )

    def _report(self, row: TruthTableRow) -> None:
        logger = get_logger()
        line = format_row(row, self.label)

        if self.emit is not None:
            for failure in row.diagnostics:
                self.emit(str(failure))
            self.emit(line)
            return

        for failure in row.diagnostics:
            logger.failed_implication(str(failure))
        if row.ok:
            logger.truth_table_row(line)
        else:
            logger.row_error(line)


def truth_table(
    root: Node,
    variables: Optional[Sequence[str]] = None,
    error_policy: ErrorPolicy = ErrorPolicy.ABORT,
    emit: Optional[Callable[[str], None]] = None,
) -> List[TruthTableRow]:
    """Build, report and return the complete truth table of a formula."""
    return TruthTable(root, variables, error_policy=error_policy, emit=emit).run()
