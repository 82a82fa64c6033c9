"""Entry point for running envreload as a module.

Allows ``python -m envreload``, which behaves like the ``envreload`` script.
"""

from .cli import main

if __name__ == "__main__":
    main()
