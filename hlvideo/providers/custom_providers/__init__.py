from .mailbox_provider import LocalMailboxProvider

__all__ = [
    'LocalMailboxProvider'
]
