"""
Runs convert-footage from a source checkout: `python main.py <file-or-folder>`.

The installed `convert-footage` command calls the same `main()`.
"""
import sys

from convert_footage.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
