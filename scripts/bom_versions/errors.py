"""Exceptions raised while building a version-property BOM."""


class BomVersionsError(Exception):
    """Base class for failures the user can fix by changing input or configuration."""


class ConfigError(BomVersionsError):
    """A ``NAME=PATTERNS`` entry could not be parsed."""


class NamePatternError(BomVersionsError):
    """A name-mapping fragment is not a valid regular expression."""

    def __init__(self, name: str, pattern: str, reason: str):
        self.name = name
        self.pattern = pattern
        super().__init__(f"Invalid pattern [{pattern}] configured for property [{name}]: {reason}")


class VersionConflictError(BomVersionsError):
    """Two distinct versions were mapped onto the same property name."""

    def __init__(self, candidate: str, mapped_name: str, value: str,
                 existing_candidate: str, existing_value: str):
        self.candidate = candidate
        self.mapped_name = mapped_name
        self.value = value
        self.existing_candidate = existing_candidate
        self.existing_value = existing_value
        super().__init__(
            f"Cannot merge property [{candidate}] into property [{mapped_name}] "
            f"because [{candidate}] has value [{value}] while [{existing_candidate}] "
            f"already set it to [{existing_value}]. "
            f"Fix the name patterns configured for [{mapped_name}]"
        )


class DuplicateCoordinateError(BomVersionsError):
    """The same groupId:artifactId is managed twice with different versions."""

    def __init__(self, key: str, first: str, second: str):
        self.key = key
        super().__init__(f"Dependency [{key}] is managed with two versions: [{first}] and [{second}]")


class MissingVersionError(BomVersionsError):
    """A managed dependency has no version to turn into a property."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Managed dependency [{key}] does not declare a version")


class PomParseError(BomVersionsError):
    """The POM text is not well-formed XML."""


class UnresolvedCoordinateError(RuntimeError):
    """A dependency reached the rewrite pass without a property name.

    This is a bug in the grouping logic, not a user error.
    """
