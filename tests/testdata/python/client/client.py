class Client:
    """Client is client from package `client`"""

    def do(self):
        """Do some stuff"""
