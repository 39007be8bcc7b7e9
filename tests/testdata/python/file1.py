"""Root package of the python fixtures."""

#: F1 comment
F1 = int

F2 = int
"""F2 comment"""

(
    #: G1 comment
    G1,
    #: G2 comment
    G2,
) = (int, str)

#: Shared comment is ignored for several names.
H1 = H2 = int


class Fetcher:
    """Fetcher is a main fetcher for this module"""

    def fetch_orders(self):
        """fetch_orders fetching orders for me.
        There is also second line
        """

    def fetch_no_comments(self):
        pass

    @property
    def name(self):
        """name is a documented property."""
        return "fetcher"
