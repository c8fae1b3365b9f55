# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

from tuplebench.cli.main import main

main()
