# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
benchforge project generation package.

Subsystems:
  - templates: bundled template loading and `$Name$` substitution
  - directory: provisioning `<root>/<identifier>/`, with bounded delete retries
  - dependencies: copying referenced binaries next to the project directory
  - artifacts: the four pure artifact generators
  - generator: the orchestration step that runs all of the above in order
"""
