"""Domain exceptions: all public errors of demofilter.

All exceptions visible to users are defined in the domain.
Application and infrastructure layers raise these, never their own.
"""


class DemoFilterError(Exception):
    """Base for all demofilter exceptions.

    Allows: except DemoFilterError to catch all library errors.
    """


class InvalidSelectionError(DemoFilterError, ValueError):
    """Selection input is malformed.

    Inherits ValueError for semantic correctness (bad value).
    """


class FieldMappingError(DemoFilterError, ValueError):
    """Field mapping table is invalid.

    Raised at construction time, never during matching.
    """


class UnmappedFieldError(DemoFilterError, LookupError):
    """No candidate field is mapped for a (group, category) pair.

    Only raised when strict field mapping is enabled.

    Attributes:
        group: Demographic group name.
        category: Category name within the group.
    """

    def __init__(self, *, group: str, category: str) -> None:
        """Initialize with the unmapped pair."""
        self.group = group
        self.category = category
        super().__init__(f"No field mapping for group '{group}', category '{category}'")


class GroupFetchError(DemoFilterError, RuntimeError):
    """Reference demographic groups could not be fetched.

    Preserves original exception via __cause__.

    Attributes:
        data_source: Source that failed.
    """

    def __init__(self, data_source: str) -> None:
        """Initialize with failing data source name."""
        self.data_source = data_source
        super().__init__("Failed to fetch demographic options")


class PresetNotFoundError(DemoFilterError, KeyError):
    """No preset with the requested id."""

    def __init__(self, preset_id: str) -> None:
        """Initialize with missing preset id."""
        self.preset_id = preset_id
        super().__init__(preset_id)

    def __str__(self) -> str:
        """Readable message instead of KeyError repr."""
        return f"Preset not found: {self.preset_id}"


class PresetsDisabledError(DemoFilterError, RuntimeError):
    """Presets used while disabled in configuration."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("Presets are disabled (enable_presets=False)")
