"""
Calculator Engine for DeskCalc
Two-operand / one-operator state machine with left-to-right chaining
"""
import math
import operator as _operator

import config
import scientific
from errors import DivisionByZero, InvalidOperator
from history_manager import HistoryManager
from input_accumulator import InputAccumulator
from memory_manager import MemoryRegister
from validation import (
    check_operand,
    format_number,
    parse_number,
    prevent_overflow,
    round_result,
    to_exponential,
    validate_number,
)

OPERATORS = {
    '+': _operator.add,
    '-': _operator.sub,
    '*': _operator.mul,
    '/': _operator.truediv,
}


class CalculatorState:
    """Operand, pending left operand and pending operator"""

    def __init__(self):
        self.accumulator = InputAccumulator()
        self.reset()

    def reset(self):
        self.accumulator.reset()
        self.previous_input = ""
        self.operator = None
        # True between an operator press and the next change to the operand
        self.operator_fresh = False

    @property
    def current_input(self):
        return self.accumulator.text

    @property
    def waiting_for_operand(self):
        return self.accumulator.waiting_for_operand


class CalculationEngine:
    def __init__(self, history=None, memory=None):
        self.state = CalculatorState()
        self.history = history if history is not None else HistoryManager()
        self.memory = memory if memory is not None else MemoryRegister()

    # ── Operand entry ────────────────────────────────────────────────────
    def input_digit(self, digit):
        """Add a digit to the current operand"""
        self.state.accumulator.append_digit(digit)
        self.state.operator_fresh = False
        return self.current_display_value()

    def input_decimal(self):
        """Add a decimal point to the current operand"""
        self.state.accumulator.append_decimal_point()
        self.state.operator_fresh = False
        return self.current_display_value()

    def backspace(self):
        """Remove the last character of the current operand"""
        self.state.accumulator.backspace()
        self.state.operator_fresh = False
        return self.current_display_value()

    def load_value(self, value):
        """Load a number (constant, conversion result) as the current operand"""
        value = check_operand(parse_number(value))
        self._show_result(value)
        return self.current_display_value()

    # ── Operators ────────────────────────────────────────────────────────
    def input_operator(self, operator):
        """Choose the next operator, evaluating any pending one first"""
        if operator not in OPERATORS:
            raise InvalidOperator(f"Invalid operator: {operator}")
        state = self.state
        value = check_operand(state.accumulator.to_number())

        if state.previous_input == "":
            state.previous_input = format_number(value)
        elif state.operator and state.operator_fresh:
            # Operator pressed twice in a row: only the choice changes
            pass
        elif state.operator:
            result = self.perform_calculation(state.previous_input, value, state.operator)
            state.accumulator.set_value(result)
            state.previous_input = state.current_input

        state.operator = operator
        state.operator_fresh = True
        state.accumulator.waiting_for_operand = True
        return self.current_display_value()

    def calculate_result(self):
        """Evaluate the pending operation (=)"""
        state = self.state
        if state.previous_input == "" or not state.operator:
            return self.current_display_value()

        value = check_operand(state.accumulator.to_number())
        result = self.perform_calculation(state.previous_input, value, state.operator)
        expression = f"{state.previous_input} {state.operator} {format_number(value)}"

        self.history.add_calculation(expression, result)
        state.previous_input = ""
        state.operator = None
        self._show_result(result)
        return self.current_display_value()

    @staticmethod
    def perform_calculation(first_operand, second_operand, operator):
        """Apply one binary operator to two operands.

        Both operands are checked for finiteness, then for range. The result
        is range checked and rounded half up to 8 decimal places.
        """
        a = parse_number(first_operand)
        b = parse_number(second_operand)

        validate_number(a)
        validate_number(b)
        prevent_overflow(a)
        prevent_overflow(b)

        if operator not in OPERATORS:
            raise InvalidOperator(f"Invalid operator: {operator}")
        if operator == '/' and b == 0:
            raise DivisionByZero()

        result = OPERATORS[operator](a, b)
        prevent_overflow(result)
        return round_result(result)

    # ── Functions ────────────────────────────────────────────────────────
    def apply_function(self, name):
        """Apply a scientific function to the current operand"""
        value = self.state.accumulator.to_number()
        result, expression = scientific.apply(name, value)
        self.history.add_calculation(expression, result)
        self._show_result(result)
        return self.current_display_value()

    # ── Memory ───────────────────────────────────────────────────────────
    def memory_store(self):
        self.memory.store(self.state.accumulator.to_number())

    def memory_recall(self):
        self._show_result(self.memory.recall())
        return self.current_display_value()

    def memory_clear(self):
        self.memory.clear()

    def memory_add(self):
        self.memory.add(self.state.accumulator.to_number())

    def memory_subtract(self):
        self.memory.subtract(self.state.accumulator.to_number())

    # ── Reset ────────────────────────────────────────────────────────────
    def clear(self):
        """Reset operand and operator state (memory and history are kept)"""
        self.state.reset()
        return self.current_display_value()

    def clear_history(self):
        self.history.clear_calculation_history()

    # ── Display queries ──────────────────────────────────────────────────
    def current_display_value(self):
        """Text to render for the current operand"""
        text = self.state.current_input
        value = parse_number(text)
        if not math.isfinite(value):
            return text
        if value != 0 and abs(value) < config.EXP_DISPLAY_LOW:
            return to_exponential(value)
        if abs(value) >= config.EXP_DISPLAY_HIGH:
            return to_exponential(value)
        return text

    def history_label(self):
        """Pending part of the expression, e.g. '50 +'"""
        if self.state.previous_input and self.state.operator:
            return f"{self.state.previous_input} {self.state.operator}"
        return "0"

    def memory_indicator(self):
        return self.memory.has_value()

    def get_history(self, limit=None):
        return self.history.get_calculation_history(limit)

    def _show_result(self, value):
        self.state.accumulator.set_value(value)
        self.state.accumulator.waiting_for_operand = True
        self.state.operator_fresh = False
