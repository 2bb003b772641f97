"""
Action Dispatcher for DeskCalc
Turns button and keyboard events into engine calls and tracks the last error
"""
import threading

import constants
from calculator import CalculationEngine
from errors import CalculatorError, UnknownFunction

# Display glyphs the front ends put on operator buttons
OPERATOR_ALIASES = {
    '×': '*',
    'x': '*',
    '÷': '/',
    '−': '-',
}


class ActionDispatcher:
    def __init__(self, engine=None):
        self.engine = engine if engine is not None else CalculationEngine()
        self.last_error = None
        self.scientific_mode = False
        self._lock = threading.RLock()

        self._actions = {
            'digit':           lambda value: self.engine.input_digit(value),
            'decimal':         lambda value: self.engine.input_decimal(),
            'operator':        lambda value: self.engine.input_operator(OPERATOR_ALIASES.get(value, value)),
            'equals':          lambda value: self.engine.calculate_result(),
            'clear':           lambda value: self.engine.clear(),
            'backspace':       lambda value: self.engine.backspace(),
            'function':        lambda value: self.engine.apply_function(value),
            'memory_store':    lambda value: self.engine.memory_store(),
            'memory_recall':   lambda value: self.engine.memory_recall(),
            'memory_clear':    lambda value: self.engine.memory_clear(),
            'memory_add':      lambda value: self.engine.memory_add(),
            'memory_subtract': lambda value: self.engine.memory_subtract(),
            'clear_history':   lambda value: self.engine.clear_history(),
            'constant':        lambda value: self.engine.load_value(constants.get_constant(value)['value']),
            'value':           lambda value: self.engine.load_value(value),
            'toggle_scientific': lambda value: self.toggle_scientific(),
        }

    def dispatch(self, action, value=None):
        """Run one user action; returns the state snapshot.

        CalculatorError is recorded in last_error and re-raised, leaving the
        engine state as it was before the action.
        """
        with self._lock:
            handler = self._actions.get(action)
            try:
                if handler is None:
                    raise UnknownFunction(f"Unknown action: {action}")
                handler(value)
            except CalculatorError as e:
                self.last_error = e.to_dict()
                raise
            self.last_error = None
            return self.snapshot()

    def handle_key(self, key):
        """Map a keyboard key to an action. Returns False for unmapped keys."""
        if len(key) == 1 and key.isdigit():
            action, value = 'digit', key
        elif key == '.':
            action, value = 'decimal', None
        elif key in ('+', '-', '*', '/'):
            action, value = 'operator', key
        elif key in ('Enter', 'Return', '='):
            action, value = 'equals', None
        elif key in ('Escape', 'c', 'C'):
            action, value = 'clear', None
        elif key in ('Backspace', 'BackSpace'):
            action, value = 'backspace', None
        elif key == 'm':
            action, value = 'memory_recall', None
        elif key == 's':
            action, value = 'toggle_scientific', None
        else:
            return False
        self.dispatch(action, value)
        return True

    def toggle_scientific(self):
        self.scientific_mode = not self.scientific_mode
        return self.scientific_mode

    def snapshot(self):
        """Everything a front end needs to render"""
        with self._lock:
            return {
                'display': self.engine.current_display_value(),
                'history_label': self.engine.history_label(),
                'memory_indicator': self.engine.memory_indicator(),
                'memory': self.engine.memory.recall(),
                'scientific_mode': self.scientific_mode,
                'history': self.engine.get_history(),
                'error': self.last_error,
            }
