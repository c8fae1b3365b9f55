# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI exit codes.

There is one failure code on purpose: every user-facing error is reported the
same way, as an `Error: ...` line on stderr. Compiler failures never change the
exit code, they are part of the measurement.
"""

SUCCESS: int = 0
FAILURE: int = 1
