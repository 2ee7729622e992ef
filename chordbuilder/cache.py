import threading

from .logger_config import logger


class ChordCache:
    """
    Append-only cache of computed chord lists, keyed by the raw key string.

    Usage:
        cache = ChordCache(compute_triads, name="triads")
        cache.get_or_compute("C")   # computes and stores
        cache.get_or_compute("C")   # same list instance as before

    Two threads missing on the same key may both compute, but only the first
    result is stored and every caller receives that stored instance.
    """

    def __init__(self, compute, name="chords"):
        self._compute = compute
        self.name = name
        self._entries = {}
        self._lock = threading.Lock()

    def get_or_compute(self, key):
        try:
            return self._entries[key]
        except KeyError:
            pass
        value = self._compute(key)
        with self._lock:
            stored = self._entries.setdefault(key, value)
        if stored is value:
            logger.debug("Cached %s for key %r", self.name, key)
        return stored

    def __contains__(self, key):
        return key in self._entries

    def __len__(self):
        return len(self._entries)
