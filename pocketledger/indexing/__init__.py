"""Mini README: Auxiliary indexes maintained by the ledger store.

``trie`` provides the description suggestion index and ``payment_queue`` the
due-date ordered reminder queue. Neither is authoritative for ledger data.
"""

from .payment_queue import UpcomingPaymentQueue
from .trie import DescriptionIndex

__all__ = ["DescriptionIndex", "UpcomingPaymentQueue"]
