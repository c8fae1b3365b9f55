# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
tuplebench measurement package.

Subsystems:
  - command: compiler argument vectors for one tuple size
  - runner: the sequential timing loop
  - models: the Sample record every timing produces
"""
