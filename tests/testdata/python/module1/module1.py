def module1_func():
    """module1_func is a module one function"""


def _module1_private_func():
    """_module1_private_func is module private func."""


class Client:
    """And this Client is from module1"""

    def do(self):
        """Comment for another do"""
