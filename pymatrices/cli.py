"""
Interactive command-line harness for pymatrices.

Reads an operation selector and one or two matrices from standard input,
performs the operation and prints the result:

    1 - determinant      (one matrix)
    2 - addition         (two matrices)
    3 - subtraction      (two matrices)
    4 - multiplication   (two matrices)

Each matrix is entered as a row count, a column count, then that many lines
of whitespace-separated numbers. Numbers are read as decimals, so "0.1" is
exactly one tenth.

Usage:
    python -m pymatrices
    python -m pymatrices --operation 1 --quiet < input.txt
"""

from __future__ import annotations

import argparse
import sys
from decimal import Decimal, InvalidOperation
from typing import Iterator, TextIO

from pymatrices import __version__
from pymatrices.core.exceptions import PyMatricesError, ValidationError
from pymatrices.core.validation import check_positive_dimension
from pymatrices.numeric.matrix import NumericMatrix

OPERATIONS = {
    1: 'determinant',
    2: 'addition',
    3: 'subtraction',
    4: 'multiplication',
}

MENU = (
    "Choose a matrix operation to perform:\n"
    "1- Calculate determinant\n"
    "2- Matrix addition\n"
    "3- Matrix subtraction\n"
    "4- Matrix multiplication"
)


class _Prompter:
    """Line reader that echoes prompts unless quiet."""

    def __init__(self, stdin: TextIO, stdout: TextIO, quiet: bool):
        self._lines: Iterator[str] = iter(stdin)
        self._stdout = stdout
        self._quiet = quiet

    def say(self, text: str, end: str = "\n") -> None:
        if not self._quiet:
            print(text, end=end, file=self._stdout)

    def next_line(self, prompt: str | None = None) -> str:
        """Next non-blank input line, stripped."""
        if prompt is not None:
            self.say(prompt, end="")
        for line in self._lines:
            stripped = line.strip()
            if stripped:
                return stripped
        raise ValidationError("Unexpected end of input")

    def next_int(self, prompt: str, name: str) -> int:
        text = self.next_line(prompt)
        try:
            return int(text)
        except ValueError:
            raise ValidationError(f"{name}: expected an integer, got {text!r}") from None


def _parse_row(text: str) -> list[Decimal]:
    """Split a line on whitespace and read each token as a Decimal."""
    row = []
    for token in text.split():
        try:
            row.append(Decimal(token))
        except InvalidOperation:
            raise ValidationError(f"Not a number: {token!r}") from None
    return row


def read_matrix(prompter: _Prompter) -> NumericMatrix:
    """
    Read one matrix: row count, column count, then the rows.

    Raises:
        ValidationError: If a count is not a positive integer or a token is
            not a number
        IncompatibleRowSizeError: If a row does not have the declared length
    """
    n_rows = check_positive_dimension(
        prompter.next_int("Input the matrix number of rows: ", "rows"), "rows"
    )
    n_columns = check_positive_dimension(
        prompter.next_int("Input the matrix number of columns: ", "columns"),
        "columns",
    )

    matrix = NumericMatrix(n_columns)
    prompter.say("Write your matrix rows separating each number with a space")
    for i in range(n_rows):
        matrix.add_row(_parse_row(prompter.next_line(f"F{i + 1}: ")))
    return matrix


def run(operation: int, prompter: _Prompter, stdout: TextIO) -> None:
    """Read the operands for operation, compute and print the result."""
    if operation == 1:
        matrix = read_matrix(prompter)
        print(matrix, file=stdout)
        print(f"Determinant: {matrix.determinant()}", file=stdout)
        return

    mat1 = read_matrix(prompter)
    mat2 = read_matrix(prompter)
    if operation == 2:
        result = mat1.add(mat2)
    elif operation == 3:
        result = mat1.subtract(mat2)
    else:
        result = NumericMatrix.multiply(mat1, mat2)
    print(result, file=stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pymatrices',
        description='Exact decimal matrix arithmetic from standard input',
    )
    parser.add_argument(
        '--operation', '-o',
        type=int,
        choices=sorted(OPERATIONS),
        help='Operation selector (skip the menu): '
             + ', '.join(f'{k}={v}' for k, v in OPERATIONS.items()),
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Do not print the menu and input prompts',
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    return parser


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    prompter = _Prompter(stdin, stdout, args.quiet)
    try:
        operation = args.operation
        if operation is None:
            prompter.say(MENU)
            operation = prompter.next_int("", "operation")
            if operation not in OPERATIONS:
                raise ValidationError(
                    f"operation: expected one of {sorted(OPERATIONS)}, got {operation}"
                )
        run(operation, prompter, stdout)
    except PyMatricesError as e:
        print(f"ERROR: {e}", file=stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
