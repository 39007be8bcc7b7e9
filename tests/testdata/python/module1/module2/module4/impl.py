class Implementation:
    """Implementation is an implementation in module 4"""

    def implements(self) -> None:
        """implements is an implementation of Implementation in module 4"""
