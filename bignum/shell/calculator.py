"""
Interactive Calculator

Binds user input to BigInteger operations through a dispatch table
(operation name -> operator).

Two surfaces:
- evaluate(): blocking request/response, one operation per call
- Calculator: read-evaluate-print loop; each command either succeeds or
  reports "Error: ..." and the loop continues with the next command

Operands may follow the operation on the same line ("pow 2 10 1000") or
are prompted for one per line. Operands are parsed strictly.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ..core_math.bigint import BigInteger
from ..exceptions import BigNumError, UnknownOperationError
from ..logging_config import get_logger

logger = get_logger(__name__)


# ============================================================================
# Constants
# ============================================================================

OPERATION_PROMPT = "\nEnter operation: "
BINARY_PROMPTS = ("Enter first number: ", "Enter second number: ")
MODULAR_PROMPTS = ("Enter first number: ", "Enter second number: ", "Enter modulus: ")
INVERSE_PROMPTS = ("Enter number: ", "Enter modulus: ")
POWER_PROMPTS = ("Enter base: ", "Enter exponent: ", "Enter modulus: ")
QUIT_COMMANDS = ("quit", "exit")


# ============================================================================
# Dispatch Table
# ============================================================================

@dataclass(frozen=True)
class Operation:
    """A named calculator operation."""
    name: str
    func: Callable[..., BigInteger]
    prompts: Tuple[str, ...]
    description: str

    @property
    def arity(self) -> int:
        return len(self.prompts)


OPERATIONS: Dict[str, Operation] = {
    op.name: op for op in (
        Operation('+', BigInteger.add, BINARY_PROMPTS, "a + b"),
        Operation('-', BigInteger.subtract, BINARY_PROMPTS, "a - b"),
        Operation('*', BigInteger.multiply, BINARY_PROMPTS, "a * b"),
        Operation('/', BigInteger.divide, BINARY_PROMPTS, "a / b (truncating)"),
        Operation('%', BigInteger.modulo, BINARY_PROMPTS, "a mod b (non-negative)"),
        Operation('addmod', BigInteger.add_mod, MODULAR_PROMPTS, "(a + b) mod m"),
        Operation('mulmod', BigInteger.mul_mod, MODULAR_PROMPTS, "(a * b) mod m"),
        Operation('inverse', BigInteger.mod_inverse, INVERSE_PROMPTS, "a^-1 mod m"),
        Operation('pow', BigInteger.pow_mod, POWER_PROMPTS, "base^exp mod m"),
    )
}


def available_operations() -> str:
    """Comma separated list of operation names."""
    return ", ".join(OPERATIONS)


def get_operation(name: str) -> Operation:
    """
    Look up an operation by name.

    Raises:
        UnknownOperationError: If name is not in the dispatch table
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(
            f"Unknown operation: {name}",
            {'available': available_operations()},
        ) from None


def evaluate(operation: str, *operands: str) -> str:
    """
    Run one operation on decimal operands.

    Args:
        operation: Operation name ('+', 'pow', 'inverse', ...)
        *operands: Decimal literals, one per operand

    Returns:
        The result as decimal text

    Raises:
        UnknownOperationError: Unknown operation name
        BigNumError: Wrong operand count, malformed literal, or an
                     arithmetic failure (division by zero, no inverse, ...)
    """
    op = get_operation(operation)

    if len(operands) != op.arity:
        raise BigNumError(
            f"'{op.name}' expects {op.arity} operands, got {len(operands)}",
            {'usage': op.description},
        )

    values = [BigInteger.parse(text, strict=True) for text in operands]
    result = op.func(*values)

    logger.info(
        "evaluate",
        extra={'operation': op.name, 'operand_digits': [len(v.digits) for v in values]},
    )
    return str(result)


# ============================================================================
# Read-Evaluate-Print Loop
# ============================================================================

class Calculator:
    """
    Interactive calculator loop.

    Example:
        lines = iter(["+", "2", "3", "quit"])
        Calculator(input_fn=lambda prompt: next(lines)).run()
        # prints "Result: 5"
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        """
        Args:
            input_fn: Reads one line, given a prompt (default: input)
            output_fn: Writes one line (default: print)
        """
        self._input = input_fn or input
        self._output = output_fn or print
        self._history: List[Tuple[str, str]] = []

    @property
    def history(self) -> List[Tuple[str, str]]:
        """(command, outcome) pairs of every executed command."""
        return list(self._history)

    def print_banner(self) -> None:
        self._output("\nInteractive mode (enter 'quit' to exit):")
        self._output(f"Available operations: {available_operations()}")

    def read_operands(self, op: Operation) -> List[str]:
        """Prompt for each operand of op."""
        return [self._input(prompt).strip() for prompt in op.prompts]

    def execute(self, line: str) -> Optional[str]:
        """
        Execute one command line.

        Returns:
            The text written for the command, or None for a blank line
        """
        tokens = line.split()
        if not tokens:
            return None

        name, operands = tokens[0], tokens[1:]

        if name not in OPERATIONS:
            message = f"Unknown operation. Available: {available_operations()}"
            self._output(message)
            self._history.append((name, message))
            return message

        op = OPERATIONS[name]
        if not operands:
            operands = self.read_operands(op)

        try:
            message = f"Result: {evaluate(name, *operands)}"
        except BigNumError as e:
            logger.warning(
                "command failed",
                extra={'operation': name, 'error': type(e).__name__},
            )
            message = f"Error: {e.message}"

        self._output(message)
        self._history.append((line.strip(), message))
        return message

    def run(self) -> int:
        """
        Run until 'quit', 'exit' or end of input.

        Returns:
            Number of commands executed
        """
        self.print_banner()

        while True:
            try:
                line = self._input(OPERATION_PROMPT)
                if line.strip() in QUIT_COMMANDS:
                    break
                self.execute(line)
            except EOFError:
                break

        return len(self._history)
