"""
This package contains the domain models of convert-footage.

Modules:
    exceptions.py: The exception hierarchy, split into usage problems and
                   failures of external tools.
    conversion.py: Settings for a run, per-file outcomes, and the naming rule for
                   converted files.
"""
