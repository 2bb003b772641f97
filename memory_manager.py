"""
Memory Manager for DeskCalc
The single memory register (MS / MR / MC / M+ / M-)
"""
from validation import check_operand


class MemoryRegister:
    def __init__(self):
        self.value = 0.0

    def store(self, value):
        """Replace memory with value (MS)"""
        self.value = float(check_operand(value))
        return self.value

    def recall(self):
        """Recall memory value (MR)"""
        return self.value

    def clear(self):
        """Clear memory (MC)"""
        self.value = 0.0

    def add(self, value):
        """Add value to memory (M+)"""
        self.value = float(check_operand(self.value + check_operand(value)))
        return self.value

    def subtract(self, value):
        """Subtract value from memory (M-)"""
        self.value = float(check_operand(self.value - check_operand(value)))
        return self.value

    def has_value(self):
        return self.value != 0
