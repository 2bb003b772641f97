"""
Input Accumulator for DeskCalc
Builds the text of one operand from digit and decimal point presses
"""
import config
from errors import InputTooLong, InvalidNumber
from validation import format_number, parse_number

DIGITS = "0123456789"


class InputAccumulator:
    def __init__(self, max_length=config.MAX_INPUT_LENGTH):
        self.max_length = max_length
        self.reset()

    def reset(self):
        """Back to a fresh '0' that extends on the next digit"""
        self.text = "0"
        self.waiting_for_operand = False

    def append_digit(self, digit):
        """Add a digit, or start a new operand when waiting for one"""
        digit = str(digit)
        if len(digit) != 1 or digit not in DIGITS:
            raise InvalidNumber(f"Invalid digit: {digit}")

        if self.waiting_for_operand:
            candidate = digit
        elif self.text == "0":
            candidate = digit
        else:
            candidate = self.text + digit

        # Buffer and waiting flag stay untouched on failure
        if len(candidate) > self.max_length:
            raise InputTooLong()

        self.text = candidate
        self.waiting_for_operand = False
        return self.text

    def append_decimal_point(self):
        """Add a decimal point unless one is already present"""
        if self.waiting_for_operand:
            self.text = "0."
            self.waiting_for_operand = False
        elif "." not in self.text:
            if len(self.text) + 1 > self.max_length:
                raise InputTooLong()
            self.text += "."
        return self.text

    def backspace(self):
        """Remove the last character (CE)"""
        remainder = self.text[:-1]
        if len(self.text) <= 1 or remainder in ("", "-", "+"):
            self.text = "0"
        else:
            self.text = remainder
        return self.text

    def set_value(self, value):
        """Write a computed number back into the buffer"""
        self.text = format_number(value)
        return self.text

    def to_number(self):
        return parse_number(self.text)
