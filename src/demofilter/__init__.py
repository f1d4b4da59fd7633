"""demofilter - demographic filter matching for participant records."""

__version__ = "0.1.0"

from demofilter.application.compiler import describe, format_label, group_selections
from demofilter.application.selection_store import SelectionStore
from demofilter.application.services.matcher import DemographicMatcher
from demofilter.domain.model.config import FilterConfig
from demofilter.domain.model.option import DemographicOption
from demofilter.domain.model.toggle import ToggleOutcome

__all__ = [
    "DemographicMatcher",
    "DemographicOption",
    "FilterConfig",
    "SelectionStore",
    "ToggleOutcome",
    "__version__",
    "describe",
    "format_label",
    "group_selections",
]
