#!/usr/bin/env python3
"""
Prompt Selector - Package Entrypoint

This allows the prompt_selector package to be executed directly:
    python3 -m prompt_selector

It simply delegates execution to prompt_selector.main.main().
"""

import sys

from prompt_selector.main import main

if __name__ == "__main__":
    sys.exit(main())
