"""Target Locker: lock a target for tomorrow and get reminded about it."""

__version__ = "0.1.0"
