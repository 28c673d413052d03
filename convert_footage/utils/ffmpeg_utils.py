"""
Helpers for presenting external commands in log output.
"""
import os
import shlex
import subprocess
from typing import List


def display_command(cmd_list: List[str]) -> str:
    """
    Joins a command list into a single string that can be pasted into a shell.

    Uses Windows quoting rules on Windows and POSIX quoting everywhere else.
    """
    if os.name == "nt":
        return subprocess.list2cmdline(cmd_list)
    return shlex.join(cmd_list)
