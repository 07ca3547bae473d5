"""langlex - keyword and identifier tokenizer."""

__version__ = "0.1.0"
