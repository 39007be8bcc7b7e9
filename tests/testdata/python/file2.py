def fetch_emails():
    """fetch_emails is for fetching emails.


    This function is placed in second file.
    """


async def _fetch_users():
    """_fetch_users is private function."""


def undocumented():
    return 1
