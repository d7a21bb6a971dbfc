"""
Entry point for running mkcheckout as a module.

This allows execution via `python -m mkcheckout`.

Example:
    $ python -m mkcheckout
"""

from . import main

if __name__ == "__main__":
    main()
