"""Cookie Scout — website cookie and tracker analyzer."""

__version__ = "0.1.0"
