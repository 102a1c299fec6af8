"""
Parcel Status Enumeration.
"""

import enum


class ParcelStatus(str, enum.Enum):
    """
    Parcel status enumeration.
    
    Conventional flow is registered → sent → delivered, but the store
    writes any value over any other.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"
