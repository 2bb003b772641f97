import math
import re

import pytest

from calculator import CalculationEngine
from errors import DivisionByZero, InputTooLong, InvalidDomain, InvalidNumber, InvalidOperator, Overflow
from validation import round_result


def enter(engine, keys):
    for key in keys:
        if key == '.':
            engine.input_decimal()
        else:
            engine.input_digit(key)


def test_simple_addition(engine):
    enter(engine, "50")
    engine.input_operator('+')
    assert engine.history_label() == "50 +"
    enter(engine, "3")
    assert engine.calculate_result() == "53"

    head = engine.get_history()[0]
    assert head['expression'] == "50 + 3"
    assert head['result'] == 53
    assert engine.history_label() == "0"
    assert engine.state.waiting_for_operand


def test_chain_evaluates_left_to_right(engine):
    enter(engine, "2")
    engine.input_operator('+')
    enter(engine, "3")
    engine.input_operator('*')
    # Pending addition is evaluated as soon as the next operator arrives
    assert engine.current_display_value() == "5"
    assert engine.history_label() == "5 *"
    enter(engine, "4")
    assert engine.calculate_result() == "20"


def test_a_plus_b_minus_c(engine):
    enter(engine, "7")
    engine.input_operator('+')
    enter(engine, "8")
    engine.input_operator('-')
    enter(engine, "10")
    assert engine.calculate_result() == "5"


def test_operator_without_prior_operand(engine):
    engine.input_operator('+')
    assert engine.state.previous_input == "0"
    assert engine.state.operator == '+'
    assert engine.state.waiting_for_operand


def test_second_operator_replaces_pending_one(engine):
    enter(engine, "5")
    engine.input_operator('+')
    engine.input_operator('*')
    assert engine.state.previous_input == "5"
    assert engine.state.operator == '*'
    assert engine.current_display_value() == "5"
    enter(engine, "2")
    assert engine.calculate_result() == "10"


def test_equals_without_operator_is_noop(engine):
    enter(engine, "5")
    assert engine.calculate_result() == "5"
    assert engine.get_history() == []
    assert not engine.state.waiting_for_operand


def test_equals_right_after_operator_reuses_operand(engine):
    enter(engine, "5")
    engine.input_operator('+')
    assert engine.calculate_result() == "10"


def test_result_starts_new_operand(engine):
    enter(engine, "2")
    engine.input_operator('+')
    enter(engine, "2")
    engine.calculate_result()
    enter(engine, "7")
    assert engine.current_display_value() == "7"


def test_result_feeds_next_operator(engine):
    enter(engine, "6")
    engine.input_operator('*')
    enter(engine, "7")
    engine.calculate_result()
    engine.input_operator('-')
    enter(engine, "2")
    assert engine.calculate_result() == "40"
    assert engine.get_history()[0]['expression'] == "42 - 2"


def test_division_by_zero_leaves_state_unchanged(engine):
    enter(engine, "5")
    engine.input_operator('/')
    enter(engine, "0")
    with pytest.raises(DivisionByZero):
        engine.calculate_result()
    assert engine.state.previous_input == "5"
    assert engine.state.operator == '/'
    assert engine.state.current_input == "0"
    assert engine.get_history() == []


def test_decimal_result(engine):
    enter(engine, "0.1")
    engine.input_operator('+')
    enter(engine, "0.2")
    assert engine.calculate_result() == "0.3"


def test_invalid_operator(engine):
    enter(engine, "5")
    with pytest.raises(InvalidOperator):
        engine.input_operator('%')
    assert engine.state.operator is None
    assert engine.state.previous_input == ""


@pytest.mark.parametrize("a", [0, 1, -7.5, 1e15])
@pytest.mark.parametrize("b", [0, 0.0, -0.0])
def test_perform_calculation_division_by_zero(a, b):
    with pytest.raises(DivisionByZero):
        CalculationEngine.perform_calculation(a, b, '/')


def test_perform_calculation_rounds_to_eight_places():
    assert CalculationEngine.perform_calculation(0.1, 0.2, '+') == 0.3
    third = CalculationEngine.perform_calculation(1, 3, '/')
    assert third == 0.33333333
    for result in (third, CalculationEngine.perform_calculation(2, 3, '/'),
                   CalculationEngine.perform_calculation(1.23456789, 9.87654321, '*')):
        assert round_result(result) == result


def test_perform_calculation_parses_text_operands():
    assert CalculationEngine.perform_calculation("12.5", "2", '*') == 25.0


def test_perform_calculation_range():
    with pytest.raises(Overflow):
        CalculationEngine.perform_calculation(1e15, 10, '*')
    with pytest.raises(Overflow):
        CalculationEngine.perform_calculation(1e16, 1, '+')
    assert CalculationEngine.perform_calculation(1e15, 0, '+') == 1e15


def test_finiteness_checked_before_range():
    with pytest.raises(InvalidNumber):
        CalculationEngine.perform_calculation(1e16, math.inf, '+')
    with pytest.raises(InvalidNumber):
        CalculationEngine.perform_calculation(math.nan, 1, '-')


def test_unknown_operator_in_perform_calculation():
    with pytest.raises(InvalidOperator):
        CalculationEngine.perform_calculation(1, 2, '^')


def test_history_keeps_ten_newest(engine):
    for i in range(1, 12):
        enter(engine, str(i))
        engine.input_operator('+')
        enter(engine, "1")
        engine.calculate_result()

    results = [entry['result'] for entry in engine.get_history()]
    assert len(results) == 10
    assert results == [float(i) for i in range(12, 2, -1)]
    assert 2.0 not in results


def test_function_application(engine):
    enter(engine, "9")
    assert engine.apply_function('sqrt') == "3"
    assert engine.get_history()[0]['expression'] == "√9"
    assert engine.state.waiting_for_operand


def test_function_inside_pending_operation(engine):
    enter(engine, "5")
    engine.input_operator('+')
    enter(engine, "9")
    engine.apply_function('sqrt')
    assert engine.history_label() == "5 +"
    engine.input_operator('+')
    assert engine.current_display_value() == "8"


def test_factorial_error_leaves_state_unchanged(engine):
    engine.input_operator('-')
    enter(engine, "1")
    engine.calculate_result()
    assert engine.current_display_value() == "-1"

    with pytest.raises(InvalidDomain):
        engine.apply_function('factorial')
    assert engine.state.current_input == "-1"
    assert len(engine.get_history()) == 1


def test_factorial_of_ten(engine):
    enter(engine, "10")
    assert engine.apply_function('factorial') == "3628800"


def test_input_too_long(engine):
    enter(engine, "123456789012345")
    with pytest.raises(InputTooLong):
        engine.input_digit("6")
    assert engine.state.current_input == "123456789012345"


def test_memory_register(engine):
    enter(engine, "5")
    engine.memory_store()
    assert engine.memory_indicator()

    engine.clear()
    enter(engine, "3")
    engine.memory_add()
    assert engine.memory.recall() == 8.0
    engine.memory_subtract()
    engine.memory_subtract()
    assert engine.memory.recall() == 2.0

    assert engine.memory_recall() == "2"
    assert engine.state.waiting_for_operand

    engine.memory_clear()
    assert not engine.memory_indicator()


def test_memory_overflow_is_rejected(engine):
    engine.load_value(1e15)
    engine.memory_store()
    with pytest.raises(Overflow):
        engine.memory_add()
    assert engine.memory.recall() == 1e15


def test_clear_keeps_memory_and_history(engine):
    enter(engine, "4")
    engine.memory_store()
    engine.input_operator('*')
    enter(engine, "2")
    engine.calculate_result()
    engine.input_operator('+')

    assert engine.clear() == "0"
    assert engine.state.previous_input == ""
    assert engine.state.operator is None
    assert not engine.state.waiting_for_operand
    assert engine.memory_indicator()
    assert len(engine.get_history()) == 1

    engine.clear_history()
    assert engine.get_history() == []


def test_display_uses_exponential_outside_window(engine):
    engine.load_value(1234567890)
    assert engine.current_display_value() == "1.234568e+9"
    engine.load_value(0.0000001)
    assert engine.current_display_value() == "1.000000e-7"
    engine.load_value(0.5)
    assert engine.current_display_value() == "0.5"
    engine.clear()
    assert engine.current_display_value() == "0"


def test_load_value_validates(engine):
    with pytest.raises(InvalidNumber):
        engine.load_value(math.inf)
    with pytest.raises(Overflow):
        engine.load_value(6.02214076e23)
    assert engine.state.current_input == "0"


def test_backspace_after_typing(engine):
    enter(engine, "12.5")
    assert engine.backspace() == "12."
    assert engine.backspace() == "12"


OPERAND_TEXT = re.compile(r'^-?\d*\.?\d*$')


def test_tiny_result_is_written_positionally(engine):
    enter(engine, "0.00000001")
    engine.input_operator('+')
    enter(engine, "0")
    engine.calculate_result()
    assert engine.state.current_input == "0.00000001"
    assert engine.get_history()[0]['expression'] == "0.00000001 + 0"
    assert engine.current_display_value() == "1.000000e-8"

    engine.backspace()
    assert OPERAND_TEXT.match(engine.state.current_input)
    assert engine.state.accumulator.to_number() == 0.0


def test_unrounded_function_result_is_positional(engine):
    engine.load_value(1e-9)
    engine.apply_function('sin')
    assert OPERAND_TEXT.match(engine.state.current_input)
    assert "e" not in engine.get_history()[0]['expression']
