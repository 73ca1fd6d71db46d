"""
Entry point for running torico-tokens as a module.

Usage:
    python -m torico_tokens build
"""

from torico_tokens.cli import main

if __name__ == "__main__":
    main()
