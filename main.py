#!/usr/bin/env python3
"""
Run xrectsel from a source checkout.

Equivalent to the installed ``xrectsel`` command.
"""
from xrectsel.application.cli import main

if __name__ == "__main__":
    main()
