"""ecgen: Enumerative combinatorial generation.

Every member of a combinatorial class is visited exactly once, each state
differing from the previous one by a single minimal change.

Engines (each with a delta mode ``*_gen`` and a materializing mode):
    brgc_gen / brgc - bit-vectors, reflected binary Gray code
    emk_gen / emk - k-subsets, homogeneous revolving door
    sjt_gen / sjt - permutations, Steinhaus-Johnson-Trotter
    ehr_gen / ehr - permutations, Ehrlich star transpositions
    set_partition_gen / set_partition - set partitions as RG strings
    set_bipart_gen / set_bipart - partitions into two blocks

Example:
    from ecgen import brgc_gen

    lst = [0, 0, 0]
    for i in brgc_gen(len(lst)):
        lst[i] ^= 1
"""

from __future__ import annotations

from ecgen import cli, logging
from ecgen.combin import emk, emk_gen, emk_neg
from ecgen.counting import bell, comb, factorial, stirling2nd
from ecgen.exceptions import InvalidArgument
from ecgen.gray_code import brgc, brgc_gen
from ecgen.perm import ehr, ehr_gen, sjt, sjt_gen
from ecgen.set_bipart import set_bipart, set_bipart_gen
from ecgen.set_partition import initial_rgs, set_partition, set_partition_gen

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Engines
    "brgc",
    "brgc_gen",
    "emk",
    "emk_gen",
    "emk_neg",
    "sjt",
    "sjt_gen",
    "ehr",
    "ehr_gen",
    "set_partition",
    "set_partition_gen",
    "initial_rgs",
    "set_bipart",
    "set_bipart_gen",
    # Counts
    "factorial",
    "comb",
    "stirling2nd",
    "bell",
    # Errors
    "InvalidArgument",
    # Utilities
    "cli",
    "logging",
]
