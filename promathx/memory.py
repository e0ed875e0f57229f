import logging
from threading import Lock


class Memory:
    """Single-slot value store shared by the HTTP API and the bot.

    ``None`` means the slot is empty; a stored ``0.0`` is a value.
    """

    def __init__(self, value=None):
        self.logger = logging.getLogger('promathx.memory')
        self._lock = Lock()
        self._value = value

    def store(self, value):
        value = float(value)
        with self._lock:
            self.logger.debug('store %r (was %r)', value, self._value)
            self._value = value

    def recall(self):
        with self._lock:
            return self._value

    def clear(self):
        with self._lock:
            self.logger.debug('clear (was %r)', self._value)
            self._value = None
