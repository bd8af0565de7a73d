import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class DescribedEnum(PrintableEnum):
    """Enum whose member values are human-readable descriptions"""

    @property
    def description(self) -> str:
        return self.value
