"""Filter type alias.

Filter function: takes a candidate record, returns True to keep it.
"""

from collections.abc import Callable

from demofilter.domain.model.candidate import CandidateRecord

type CandidateFilter = Callable[[CandidateRecord], bool]
