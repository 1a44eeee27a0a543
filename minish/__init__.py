"""Parts of a small shell: command tree, environment, builtins, heredoc delimiters, line reading and string helpers."""

__version__ = "0.1.0"