"""
Error types for DeskCalc
Every failure aborts only the current action and carries a kind + message
"""


class CalculatorError(Exception):
    """Base class for recoverable calculator failures"""
    kind = "CalculatorError"
    default_message = "Error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'kind': self.kind, 'message': self.message}


class InvalidNumber(CalculatorError):
    kind = "InvalidNumber"
    default_message = "Invalid number"


class Overflow(CalculatorError):
    kind = "Overflow"
    default_message = "Number too large"


class DivisionByZero(CalculatorError):
    kind = "DivisionByZero"
    default_message = "Cannot divide by zero"


class InvalidOperator(CalculatorError):
    kind = "InvalidOperator"
    default_message = "Invalid operator"


class InvalidDomain(CalculatorError):
    kind = "InvalidDomain"
    default_message = "Invalid input"


class InputTooLong(CalculatorError):
    kind = "InputTooLong"
    default_message = "Input too long"


class UnknownFunction(CalculatorError):
    kind = "UnknownFunction"
    default_message = "Unknown function"
