"""Google mailbox OAuth broker and workflow webhook relay."""

__version__ = "0.1.0"
