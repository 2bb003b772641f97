"""
History Manager for DeskCalc
Keeps the most recent calculations, newest first, in a fixed-size log
"""
from collections import deque
from datetime import datetime

import config
from validation import format_number


class HistoryManager:
    def __init__(self, max_items=config.MAX_HISTORY_ITEMS):
        self.max_items = max_items
        # appendleft on a bounded deque evicts the oldest entry in the same step
        self._entries = deque(maxlen=max_items)

    def add_calculation(self, expression, result):
        """Add a calculation to history"""
        entry = {
            'expression': expression,
            'result': result,
            'timestamp': datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        }
        self._entries.appendleft(entry)
        return entry

    def get_calculation_history(self, limit=None):
        """Get calculation history, newest first"""
        entries = list(self._entries)
        if limit is not None:
            entries = entries[:limit]
        return [dict(e) for e in entries]

    def latest(self):
        return dict(self._entries[0]) if self._entries else None

    def clear_calculation_history(self):
        """Clear all calculation history"""
        self._entries.clear()

    def format_calculation_history(self):
        """Format calculation history for display"""
        formatted = []
        for entry in self._entries:
            formatted.append(f"{entry['timestamp']}: {entry['expression']} = {format_number(entry['result'])}")
        return formatted

    def __len__(self):
        return len(self._entries)
