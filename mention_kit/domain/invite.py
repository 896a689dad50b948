"""Invite code extraction."""


def parse_invite(text: str) -> str:
    """Return the invite code from an invite link.

    Takes everything after the last ``/``, so ``https://discord.gg/abc``,
    ``discord.gg/abc`` and ``abc`` all give ``abc``. The domain is not
    checked and query strings are left in place.
    """
    return text.rpartition("/")[2]
