# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Benchmark descriptor package.

The descriptor is what discovery hands us: which type and method to run, the
parameter values to assign, and the job settings. Everything that came from
the host type system (namespaces, assembly names, binary locations) arrives
here as plain strings and is never re-derived.

Subsystems:
  - models: the frozen descriptor dataclasses
  - jobs: run configuration enums and their build/source conversions
  - loader: reading a descriptor from YAML
"""
