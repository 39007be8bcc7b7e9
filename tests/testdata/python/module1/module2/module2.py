from typing import Protocol


class SomeType(int):
    """SomeType is some type"""


class Interface(Protocol):
    """Interface is a main interface"""

    def implements(self) -> None: ...
